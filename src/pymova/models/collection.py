"""Response envelope for collection endpoints and its validation."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from pymova.exceptions import MovaPayloadError
from pymova.models._base import ContentItem

ItemT = TypeVar("ItemT", bound=ContentItem)


class CollectionResponse(BaseModel, Generic[ItemT]):
    """``{"data": [item, ...]}`` as returned by ``/items/<collection>``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    data: list[ItemT]


def parse_collection(model: type[ItemT], payload: Any, *, path: str = "") -> tuple[ItemT, ...]:
    """Validate a collection payload into a tuple of *model* items.

    Raises
    ------
    MovaPayloadError
        When the envelope or any item fails validation.  A single bad item
        rejects the whole payload.
    """
    try:
        response = CollectionResponse[model].model_validate(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise MovaPayloadError(
            f"Invalid {model.__name__} payload from {path or 'backend'}: "
            f"{exc.error_count()} validation error(s), first: {exc.errors()[0]['msg']}",
            path=path,
        ) from exc
    return tuple(response.data)
