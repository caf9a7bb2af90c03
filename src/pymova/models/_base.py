"""Base model shared by every content item.

Every content model inherits from :class:`ContentItem` which provides:

* ``null`` values dropped before validation, so the field default is used
  (the backend returns ``null`` for every empty optional field).
* Integer ids coerced to text, so lookups by ``"12"`` and ``12`` agree.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator


def coerce_item_id(value: Any) -> Any:
    """Return integer ids as text; everything else goes to pydantic unchanged."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def parse_content_date(value: Any) -> datetime | None:
    """Parse backend date strings (``"2021-05-01"``, ``"2021-05-01 10:00:00"``)."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    raise ValueError(f"unsupported date value {value!r}")


ItemId = Annotated[str, BeforeValidator(coerce_item_id)]
"""Annotated type for content ids (numeric or text on the wire)."""

ContentDate = Annotated[datetime | None, BeforeValidator(parse_content_date)]
"""Annotated type for the backend's ISO-ish date strings."""


def expand_image_ref(value: Any) -> Any:
    """Turn an unexpanded file relation (a bare file id) into ``{"id": ...}``."""
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return {"id": str(value)}
    return value


class ContentModel(BaseModel):
    """Frozen model that ignores unknown fields and stashes the raw payload."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original payload."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Only auto-stash raw when the caller did not pass one explicitly.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned


class ImageUrls(BaseModel):
    """URLs of an uploaded image file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    full_url: str = ""
    url: str = ""


class ImageAsset(ContentModel):
    """Image metadata attached to activities and news.

    The backend sends more fields here; only the ones consumers use are
    mapped.  When the relation is not expanded only ``id`` is set and
    ``url`` is empty.
    """

    id: ItemId = ""
    """File id of the upload."""
    width: int | None = None
    height: int | None = None
    filename_disk: str = ""
    data: ImageUrls = Field(default_factory=ImageUrls)

    @property
    def url(self) -> str:
        """Best available URL (``full_url`` first)."""
        return self.data.full_url or self.data.url


ImageRef = Annotated[ImageAsset | None, BeforeValidator(expand_image_ref)]
"""Annotated type for an image relation, expanded or given as a bare file id."""


class ContentItem(ContentModel):
    """Fields common to every content kind."""

    id: ItemId
    """Stable identifier assigned by the backend."""
    language: str
    """Language code the item was written in."""
    title: str = ""
    content: str = ""
