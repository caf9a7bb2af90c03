"""Info page model."""

from __future__ import annotations

from pymova._constants import LIST_COLOR_LENGTH
from pymova.models._base import ContentItem


class InfoPage(ContentItem):
    """A page of the information section.

    Top-level pages appear in the info list; sub pages are only reachable
    through links and through search.
    """

    sub_page: bool | None = None
    """``None`` when the backend left the flag unset; such pages are not main pages."""
    list_color: str | None = None
    """Background colour for the list entry (``#rrggbb``)."""

    @property
    def has_list_color(self) -> bool:
        color = self.list_color
        if not color or len(color) != LIST_COLOR_LENGTH or color[0] != "#":
            return False
        return all(ch in "0123456789abcdefABCDEF" for ch in color[1:])
