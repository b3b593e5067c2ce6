"""Unit tests for reshaping CAPI responses into item lists."""

from models import CapiResponse
from services.reshape import PLACEHOLDER_HEADING, as_item_list, render


def capi(*ids: str) -> CapiResponse:
    return CapiResponse.model_validate({"response": {"mostViewed": [{"id": i} for i in ids]}})


class TestAsItemList:
    def test_one_item_per_id_in_order(self) -> None:
        ids = ["world/2026/oct/18/a", "uk-news/b", "sport/c", "d"]
        items = as_item_list(capi(*ids))
        assert len(items.trails) == len(ids)
        assert [item.url for item in items.trails] == ids

    def test_heading_is_constant(self) -> None:
        assert as_item_list(capi("a")).heading == PLACEHOLDER_HEADING
        assert as_item_list(capi()).heading == PLACEHOLDER_HEADING

    def test_empty_response_gives_empty_trails(self) -> None:
        assert as_item_list(CapiResponse()).trails == []


class TestRender:
    def test_trails_format_uses_camel_case_fields(self) -> None:
        payload = render(capi("a"), "trails")
        assert payload == {
            "heading": "Placeholder heading",
            "trails": [
                {
                    "url": "a",
                    "linkText": "foo",
                    "showByline": "foo",
                    "byline": "foo",
                    "image": "foo",
                    "isLiveBlog": "foo",
                }
            ],
        }

    def test_raw_format_is_upstream_shape(self) -> None:
        payload = render(capi("a", "b"), "raw")
        assert payload == {"response": {"mostViewed": [{"id": "a"}, {"id": "b"}]}}
