"""News model."""

from __future__ import annotations

from pymova.models._base import ContentDate, ContentItem, ImageRef


class NewsItem(ContentItem):
    """A news post.  The backend returns news sorted by ``date``, newest first."""

    date: ContentDate = None
    excerpt: str = ""
    image: ImageRef = None
