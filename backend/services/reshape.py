"""Turn a CAPI most-viewed response into the served item list.

Display fields other than the URL are placeholders: there is no byline or
image enrichment step yet.
"""

from models import CapiResponse, Item, ItemList

PLACEHOLDER_HEADING = "Placeholder heading"
PLACEHOLDER_TEXT = "foo"


def as_item_list(resp: CapiResponse) -> ItemList:
    trails = [
        Item(
            url=capi_id,
            link_text=PLACEHOLDER_TEXT,
            show_byline=PLACEHOLDER_TEXT,
            byline=PLACEHOLDER_TEXT,
            image=PLACEHOLDER_TEXT,
            is_live_blog=PLACEHOLDER_TEXT,
        )
        for capi_id in resp.ids
    ]
    return ItemList(heading=PLACEHOLDER_HEADING, trails=trails)


def render(resp: CapiResponse, response_format: str) -> dict:
    """Serialize ``resp`` in the configured format (``trails`` or ``raw``)."""
    if response_format == "raw":
        return resp.model_dump(by_alias=True)
    return as_item_list(resp).model_dump(by_alias=True)
