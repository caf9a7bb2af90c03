"""Activity model."""

from __future__ import annotations

from pymova.models._base import ContentDate, ContentItem, ImageRef


class Activity(ContentItem):
    """An activity offered by the organisation.

    Permanent activities run all year; the rest are one-off events.
    """

    is_permanent: bool = False
    date: ContentDate = None
    image: ImageRef = None
