"""Pydantic models for the Content API response and the served item list."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CapiModel(BaseModel):
    """Upstream model where a JSON ``null`` object decodes as the empty object."""

    @model_validator(mode="before")
    @classmethod
    def _null_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data


class CapiItem(CapiModel):
    """A single most-viewed result. Only the id is extracted."""

    id: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _null_id(cls, value: Any) -> Any:
        return "" if value is None else value


class CapiResponseBody(CapiModel):
    model_config = ConfigDict(populate_by_name=True)

    results: list[CapiItem] = Field(default_factory=list, alias="mostViewed")

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value: Any) -> Any:
        return [] if value is None else value


class CapiResponse(CapiModel):
    """Top-level Content API envelope: ``{"response": {"mostViewed": [...]}}``."""

    response: CapiResponseBody = Field(default_factory=CapiResponseBody)

    @property
    def ids(self) -> list[str]:
        return [item.id for item in self.response.results]


class Item(BaseModel):
    """Display item for one article.

    Only ``url`` carries real data; the other fields are placeholders until
    byline and image enrichment exists.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: str
    link_text: str = Field(alias="linkText")
    show_byline: str = Field(alias="showByline")
    byline: str
    image: str
    is_live_blog: str = Field(alias="isLiveBlog")


class ItemList(BaseModel):
    heading: str
    trails: list[Item]
