"""pymova - Async content store layer for the mova information app."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymova")
except PackageNotFoundError:
    __version__ = "0+local"
from pymova._transport import HttpTransport, Transport
from pymova.backend import BackendProxy
from pymova.config import MovaConfig
from pymova.context import MovaContext
from pymova.events import EventChannel, Subscription
from pymova.exceptions import (
    MovaConfigError,
    MovaError,
    MovaPayloadError,
    MovaTransportError,
)
from pymova.language import LanguageManager
from pymova.models import (
    Activity,
    ContentItem,
    ImageAsset,
    InfoPage,
    NewsItem,
)
from pymova.search import compile_keyword, escape_keyword, search_items
from pymova.store import ContentStore, LanguageFilter, StoreState
from pymova.stores import ActivitiesStore, InfoPagesStore, NewsStore, main_page_filter

__all__ = [
    "__version__",
    "ActivitiesStore",
    "Activity",
    "BackendProxy",
    "ContentItem",
    "ContentStore",
    "EventChannel",
    "HttpTransport",
    "ImageAsset",
    "InfoPage",
    "InfoPagesStore",
    "LanguageFilter",
    "LanguageManager",
    "MovaConfig",
    "MovaConfigError",
    "MovaContext",
    "MovaError",
    "MovaPayloadError",
    "MovaTransportError",
    "NewsItem",
    "NewsStore",
    "StoreState",
    "Subscription",
    "Transport",
    "compile_keyword",
    "escape_keyword",
    "main_page_filter",
    "search_items",
]
