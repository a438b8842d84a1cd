"""
Content records as returned by the CMS news queries.

Drafts and unpublished documents can lack fields the published site
normally relies on, so text fields default to empty and an absent or
unreadable ``publishedAt`` leaves ``published_at`` unset.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

# Null text from the CMS reads as empty
Text = Annotated[str, BeforeValidator(lambda value: "" if value is None else value)]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ImageAsset(_Record):
    url: Optional[str] = None


class Image(_Record):
    asset: Optional[ImageAsset] = None
    alt: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        return self.asset.url if self.asset else None


class Slug(_Record):
    current: str


class Author(_Record):
    name: Text = ""
    slug: Optional[Slug] = None
    image: Optional[Image] = None
    bio: Optional[str] = None


class Category(_Record):
    title: Text = ""
    description: Optional[str] = None


class NewsPost(_Record):
    title: Text = ""
    slug: Slug
    excerpt: Optional[str] = None
    author: Optional[Author] = None
    categories: Optional[List[Category]] = None
    body: List[Dict[str, Any]] = Field(default_factory=list)
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    # publishedAt exactly as the CMS sent it
    published_at_text: Optional[str] = Field(default=None, exclude=True)
    main_image: Optional[Image] = Field(default=None, alias="mainImage")

    @model_validator(mode="before")
    @classmethod
    def _keep_published_text(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("publishedAt"), str):
            data = {**data, "published_at_text": data["publishedAt"]}
        return data

    @field_validator("published_at", mode="wrap")
    @classmethod
    def _unreadable_date_is_unset(cls, value: Any, handler) -> Optional[datetime]:
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def path(self) -> str:
        return f"/news/{self.slug.current}"
