"""Constants shared across pymova modules."""

from __future__ import annotations

USER_AGENT = "pymova/1.0 (+aiohttp)"

DEFAULT_LANGUAGE = "de"
DEFAULT_REQUEST_TIMEOUT = 15.0

#: Backend handshake endpoint used for availability checks.
PING_PATH = "/server/ping"

ACTIVITIES_COLLECTION = "activities"
INFOPAGES_COLLECTION = "infopages"
NEWS_COLLECTION = "news"

#: Characters with special meaning in a regular expression.  Search keywords
#: are matched literally, so each of these gets a backslash in front.
REGEX_SPECIAL_CHARS = frozenset(".*+?^${}()|[]\\")

#: ``list_color`` values must look like ``#rrggbb``.
LIST_COLOR_LENGTH = 7
