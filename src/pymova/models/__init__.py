"""Data models for content backend responses."""

from pymova.models._base import (
    ContentItem,
    ContentModel,
    ImageAsset,
    ImageUrls,
    coerce_item_id,
    expand_image_ref,
    parse_content_date,
)
from pymova.models.activity import Activity
from pymova.models.collection import CollectionResponse, parse_collection
from pymova.models.infopage import InfoPage
from pymova.models.news import NewsItem

__all__ = [
    "Activity",
    "CollectionResponse",
    "ContentItem",
    "ContentModel",
    "ImageAsset",
    "ImageUrls",
    "InfoPage",
    "NewsItem",
    "coerce_item_id",
    "expand_image_ref",
    "parse_collection",
    "parse_content_date",
]
