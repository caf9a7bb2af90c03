"""Concrete stores, one per content kind."""

from __future__ import annotations

from pymova._constants import ACTIVITIES_COLLECTION, INFOPAGES_COLLECTION, NEWS_COLLECTION
from pymova.models import Activity, InfoPage, NewsItem
from pymova.search import search_items
from pymova.store import ContentStore, LanguageFilter


class ActivitiesStore(ContentStore[Activity]):
    collection = ACTIVITIES_COLLECTION
    item_model = Activity
    query = {"fields": "*.*"}

    def get_all(self) -> tuple[Activity, ...]:
        return self.get()

    def get_permanent(self) -> tuple[Activity, ...]:
        return self.get_filtered(lambda activity: activity.is_permanent)

    def get_non_permanent(self) -> tuple[Activity, ...]:
        return self.get_filtered(lambda activity: not activity.is_permanent)

    def get_activity(self, activity_id: str | int) -> Activity | None:
        return self.get_by_id(activity_id)


def main_page_filter(page: InfoPage) -> bool:
    """Top-level pages are the ones explicitly flagged as not being sub pages."""
    return page.sub_page is False


class InfoPagesStore(ContentStore[InfoPage]):
    collection = INFOPAGES_COLLECTION
    item_model = InfoPage

    def get_main_pages(self) -> tuple[InfoPage, ...]:
        return self.get_filtered(main_page_filter)

    def search(self, keyword: str) -> tuple[InfoPage, ...]:
        """Main pages for an empty keyword, otherwise matching pages including sub pages."""
        return search_items(self.get(), keyword, default_filter=main_page_filter)


class NewsStore(ContentStore[NewsItem]):
    """News, newest first.  The backend sorts and filters by language."""

    collection = NEWS_COLLECTION
    item_model = NewsItem
    query = {"fields": "*.*", "sort": "-date"}
    language_filter = LanguageFilter.SERVER
