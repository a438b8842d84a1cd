"""
News queries with tag-based caching.

Every cached result is labelled with the ``posts`` and ``news`` tags and
the page path it backs, so both tag and path revalidation reach it.
"""

from typing import List, Optional

from pydantic import ValidationError

from shared.logging import get_logger

from ..adapters.cms_client import CMSClient
from ..caching.tag_cache import TagCache
from .models import NewsPost

NEWS_TAGS = ("posts", "news")

NEWS_POST_PROJECTION = """{
  _id,
  title,
  slug,
  excerpt,
  publishedAt,
  body[]{
    ...,
    _type == "image" => { ..., asset->{ url } }
  },
  mainImage { alt, asset->{ url } },
  author->{ name, slug, bio, image { asset->{ url } } },
  categories[]->{ title, description }
}"""

NEWS_POST_BY_SLUG_QUERY = (
    '*[_type in ["news", "post"] && slug.current == $slug][0]' + NEWS_POST_PROJECTION
)

NEWS_POSTS_QUERY = (
    '*[_type in ["news", "post"] && defined(slug.current)]'
    ' | order(publishedAt desc)[0...$limit]' + NEWS_POST_PROJECTION
)


class NewsQueries:
    """Fetches news posts from the CMS through the content cache."""

    def __init__(self, cms: CMSClient, cache: TagCache):
        self.cms = cms
        self.cache = cache
        self.logger = get_logger("site.news_queries")

    async def get_news_post_by_slug(self, slug: str) -> Optional[NewsPost]:
        """Return the post with this slug, or None when no record exists."""
        path = f"/news/{slug}"

        async def _load():
            return await self.cms.query(NEWS_POST_BY_SLUG_QUERY, {"slug": slug})

        record = await self.cache.get_or_load(
            f"news:slug:{slug}", _load, tags=NEWS_TAGS, paths=(path,)
        )
        if record is None:
            self.logger.info("News post not found", slug=slug)
            return None
        return NewsPost.model_validate(record)

    async def list_news_posts(self, limit: int = 20) -> List[NewsPost]:
        """Return the newest posts first, skipping records that fail validation."""

        async def _load():
            return await self.cms.query(NEWS_POSTS_QUERY, {"limit": limit})

        records = await self.cache.get_or_load(
            f"news:list:{limit}", _load, tags=NEWS_TAGS, paths=("/news",)
        )
        posts = []
        for record in records or []:
            try:
                posts.append(NewsPost.model_validate(record))
            except ValidationError as exc:
                self.logger.warning(
                    "Skipping unreadable news record",
                    record_id=record.get("_id") if isinstance(record, dict) else None,
                    error=str(exc),
                )
        return posts
