"""
Manual cache revalidation trigger.

Call these after updating content in the CMS to refresh the production
cache. Each call is a single POST to the site's revalidation endpoint:
no retry, no backoff, no timeout. Failures are logged once and re-raised.
"""

from typing import Any, Dict, List, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from shared.config import BaseConfig
from shared.errors import ExternalServiceError
from shared.logging import get_logger

REVALIDATE_PATH = "/api/revalidate"


class RevalidationRequest(BaseModel):
    """Tags and/or paths to invalidate. Neither set means everything."""

    tags: Optional[List[str]] = None
    paths: Optional[List[str]] = None

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class RevalidationError(ExternalServiceError):
    """Revalidation endpoint answered with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(
            "revalidate",
            f"HTTP error! status: {status_code}",
            details={"status_code": status_code}
        )


RevalidationOptions = Union[RevalidationRequest, Mapping[str, Any]]


def _encode_options(options: Optional[RevalidationOptions]) -> Dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, RevalidationRequest):
        return options.to_body()
    return dict(options)


class RevalidationClient:
    """Client for the site revalidation endpoint."""

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        self.transport = transport
        self.logger = get_logger("site.revalidation_client")

    async def trigger(self, options: Optional[RevalidationOptions] = None) -> Any:
        """POST the options as JSON and return the parsed response body."""
        body = _encode_options(options)
        url = f"{self.base_url}{REVALIDATE_PATH}"

        try:
            async with httpx.AsyncClient(timeout=None, transport=self.transport) as client:
                response = await client.post(
                    url,
                    json=body,
                    headers={"Content-Type": "application/json"}
                )

            if not response.is_success:
                raise RevalidationError(response.status_code)

            result = response.json()
            self.logger.info("Revalidation successful", result=result)
            return result
        except Exception as exc:
            self.logger.error("Revalidation failed", url=url, body=body, error=str(exc))
            raise

    async def revalidate_events(self) -> Any:
        return await self.trigger({"tags": ["events"]})

    async def revalidate_posts(self) -> Any:
        return await self.trigger({"tags": ["posts"]})

    async def revalidate_products(self) -> Any:
        return await self.trigger({"tags": ["products"]})

    async def revalidate_homepage(self) -> Any:
        return await self.trigger({"tags": ["homepage"]})

    async def revalidate_all(self) -> Any:
        return await self.trigger()


def get_default_client() -> RevalidationClient:
    """Build a client pointed at the configured site base URL."""
    return RevalidationClient(BaseConfig().site_base_url)


async def trigger_revalidation(options: Optional[RevalidationOptions] = None) -> Any:
    """Ask the site to invalidate cached content for the given tags/paths."""
    return await get_default_client().trigger(options)


# Quick revalidation functions for common content types
async def revalidate_events() -> Any:
    return await trigger_revalidation({"tags": ["events"]})


async def revalidate_posts() -> Any:
    return await trigger_revalidation({"tags": ["posts"]})


async def revalidate_products() -> Any:
    return await trigger_revalidation({"tags": ["products"]})


async def revalidate_homepage() -> Any:
    return await trigger_revalidation({"tags": ["homepage"]})


async def revalidate_all() -> Any:
    return await trigger_revalidation()
