"""
Content site service.

Serves the news pages from CMS content through a tag-based cache and
exposes the revalidation endpoint that the revalidation trigger and the
CMS webhook call after content changes.
"""

import secrets
import time
from typing import Any, Dict, List, Optional

import httpx
from fastapi import Body, Header, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from shared.base_service import BaseService
from shared.errors import AuthenticationError, ContentNotFoundError, ValidationError

from .adapters.cms_client import CMSClient
from .caching.tag_cache import TagCache
from .content.models import NewsPost
from .content.queries import NewsQueries
from .rendering.pages import generate_metadata, render_news_index, render_news_post, render_not_found
from .revalidation.client import REVALIDATE_PATH, RevalidationRequest
from .schemas import SCHEMA_TYPES, paths_for_document, tags_for_document_type, validate_schema_types


class WebhookSlug(BaseModel):
    current: Optional[str] = None


class CMSWebhookPayload(BaseModel):
    """Document change notification sent by the CMS."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    document_type: str = Field(alias="_type")
    slug: Optional[WebhookSlug] = None


class SiteService(BaseService):
    """Content site service implementation."""

    def __init__(self, cms_transport: Optional[httpx.AsyncBaseTransport] = None, **config_overrides):
        super().__init__("site", 8000, **config_overrides)

        validate_schema_types(SCHEMA_TYPES)

        self.cache = TagCache(self.config.cache_ttl_seconds, metrics=self.metrics)
        self.cms = CMSClient(
            self.config.cms_project_id,
            self.config.cms_dataset,
            self.config.cms_api_version,
            token=self.config.cms_token,
            use_cdn=self.config.cms_use_cdn,
            metrics=self.metrics,
            transport=cms_transport,
        )
        self.news_queries = NewsQueries(self.cms, self.cache)

        self._setup_site_routes()

    async def _check_dependencies(self) -> Dict[str, str]:
        return {"cache": "ok", "cms": self.cms.base_url}

    async def _load_news_post(self, slug: str) -> NewsPost:
        post = await self.news_queries.get_news_post_by_slug(slug)
        if post is None:
            raise ContentNotFoundError(f"News post not found: {slug}", details={"slug": slug})
        return post

    def _check_revalidate_secret(self, provided: Optional[str]) -> None:
        expected = self.config.revalidate_secret
        if expected and not secrets.compare_digest((provided or "").encode(), expected.encode()):
            raise AuthenticationError("Invalid revalidation secret")

    def _revalidate(self, tags: Optional[List[str]], paths: Optional[List[str]], source: str) -> Dict[str, Any]:
        evicted = self.cache.invalidate(tags=tags, paths=paths)
        self.metrics.increment_counter("revalidations_total", source=source)
        self.logger.info("Revalidated", source=source, tags=tags, paths=paths, evicted=evicted)
        return {
            "revalidated": True,
            "tags": tags or [],
            "paths": paths or [],
            "evicted": evicted,
            "now": int(time.time() * 1000),
        }

    def _setup_site_routes(self):
        """Set up site-specific routes."""

        @self.app.exception_handler(ContentNotFoundError)
        async def not_found_handler(request: Request, exc: ContentNotFoundError):
            self.logger.info("Content not found", path=request.url.path, details=exc.details)
            return HTMLResponse(render_not_found(), status_code=404)

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "site",
                "message": f"{self.config.site_name} - Site Service",
                "version": "1.0.0",
                "capabilities": ["news", "revalidation", "schema"]
            }

        @self.app.get("/news", response_class=HTMLResponse)
        async def news_index():
            posts = await self.news_queries.list_news_posts()
            return HTMLResponse(render_news_index(posts, self.config.site_name))

        @self.app.get("/news/{slug}", response_class=HTMLResponse)
        async def news_post(slug: str):
            post = await self._load_news_post(slug)
            return HTMLResponse(render_news_post(post, self.config.site_name))

        @self.app.get("/news/{slug}/metadata")
        async def news_post_metadata(slug: str):
            post = await self.news_queries.get_news_post_by_slug(slug)
            return generate_metadata(post, self.config.site_name)

        @self.app.post(REVALIDATE_PATH)
        async def revalidate(
            options: Optional[RevalidationRequest] = Body(default=None),
            x_revalidate_secret: Optional[str] = Header(default=None),
        ):
            """Invalidate cached content by tag and/or path. No body means everything."""
            self._check_revalidate_secret(x_revalidate_secret)
            options = options or RevalidationRequest()
            return self._revalidate(options.tags, options.paths, source="api")

        @self.app.post(f"{REVALIDATE_PATH}/webhook")
        async def revalidate_webhook(
            payload: CMSWebhookPayload,
            x_revalidate_secret: Optional[str] = Header(default=None),
        ):
            """Map a CMS document change to cache tags and page paths."""
            self._check_revalidate_secret(x_revalidate_secret)

            tags = tags_for_document_type(payload.document_type)
            if not tags:
                raise ValidationError(
                    f"Unknown document type: {payload.document_type}",
                    details={"_type": payload.document_type}
                )

            slug = payload.slug.current if payload.slug else None
            paths = paths_for_document(payload.document_type, slug)
            return self._revalidate(tags, paths, source="webhook")

        @self.app.get("/api/schema")
        async def schema():
            """Content type definitions for the CMS editing tooling."""
            return {"types": [schema_type.to_dict() for schema_type in SCHEMA_TYPES]}


def create_app(**kwargs):
    """Create site service application."""
    service = SiteService(**kwargs)
    return service.app


if __name__ == "__main__":
    service = SiteService()
    service.run()
