"""Tests for content model parsing."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from pymova.exceptions import MovaPayloadError
from pymova.models import Activity, InfoPage, NewsItem, parse_collection


class TestContentItem:
    def test_integer_id_becomes_text(self) -> None:
        activity = Activity.model_validate({"id": 7, "language": "de", "title": "Chor"})
        assert activity.id == "7"

    def test_nulls_use_defaults(self) -> None:
        page = InfoPage.model_validate(
            {"id": "1", "language": "en", "title": None, "content": None, "list_color": None}
        )
        assert page.title == ""
        assert page.content == ""
        assert page.sub_page is None
        assert page.list_color is None

    def test_raw_payload_is_kept(self) -> None:
        payload = {"id": "1", "language": "en", "title": "A", "status": "published"}
        page = InfoPage.model_validate(payload)
        assert page.raw == payload

    def test_models_are_frozen(self) -> None:
        page = InfoPage.model_validate({"id": "1", "language": "en"})
        with pytest.raises(ValidationError):
            page.title = "changed"  # type: ignore[misc]


class TestInfoPage:
    def test_unset_sub_page_stays_none(self) -> None:
        page = InfoPage.model_validate({"id": "1", "language": "en", "sub_page": None})
        assert page.sub_page is None

    @pytest.mark.parametrize(
        ("color", "expected"),
        [("#ffcc00", True), ("#FFCC00", True), ("ffcc00", False), ("#ffcc0", False), ("#ggcc00", False), (None, False)],
    )
    def test_has_list_color(self, color: str | None, expected: bool) -> None:
        page = InfoPage.model_validate({"id": "1", "language": "en", "list_color": color})
        assert page.has_list_color is expected


class TestNewsItem:
    def test_parses_date_and_image(self) -> None:
        news = NewsItem.model_validate(
            {
                "id": 3,
                "language": "de",
                "title": "Sommerfest",
                "excerpt": "Kommt alle",
                "date": "2021-06-01 18:30:00",
                "image": {
                    "width": 800,
                    "height": 600,
                    "filename_disk": "abc.jpg",
                    "data": {"full_url": "https://cms.example.org/abc.jpg", "url": "/abc.jpg", "thumbnails": []},
                },
            }
        )
        assert news.date == datetime(2021, 6, 1, 18, 30)
        assert news.image is not None
        assert news.image.url == "https://cms.example.org/abc.jpg"
        assert news.image.width == 800

    def test_date_only_string(self) -> None:
        news = NewsItem.model_validate({"id": "1", "language": "de", "date": "2021-06-01"})
        assert news.date == datetime(2021, 6, 1)

    def test_image_url_falls_back_to_relative_url(self) -> None:
        news = NewsItem.model_validate({"id": "1", "language": "de", "image": {"data": {"url": "/abc.jpg"}}})
        assert news.image is not None
        assert news.image.url == "/abc.jpg"


class TestActivity:
    def test_unexpanded_image_keeps_file_id(self) -> None:
        activity = Activity.model_validate({"id": 1, "language": "en", "is_permanent": True, "image": 5})
        assert activity.image is not None
        assert activity.image.id == "5"
        assert activity.image.url == ""

    def test_expanded_image(self) -> None:
        activity = Activity.model_validate(
            {"id": 1, "language": "en", "image": {"id": "f1", "data": {"full_url": "https://cms.example.org/f1.jpg"}}}
        )
        assert activity.image is not None
        assert activity.image.id == "f1"
        assert activity.image.url == "https://cms.example.org/f1.jpg"


class TestParseCollection:
    def test_preserves_backend_order(self) -> None:
        items = parse_collection(
            NewsItem,
            {"data": [{"id": "b", "language": "en"}, {"id": "a", "language": "en"}]},
        )
        assert [item.id for item in items] == ["b", "a"]
        assert isinstance(items, tuple)

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": {"id": "1"}},
            {"data": [{"language": "en"}]},
            {"data": [{"id": "1", "language": "en"}, {"id": "2"}]},
            {"data": [{"id": "1", "language": "en", "date": "yesterday"}]},
            [],
        ],
    )
    def test_invalid_payload_raises(self, payload: object) -> None:
        with pytest.raises(MovaPayloadError):
            parse_collection(NewsItem, payload, path="/items/news")
