"""
Headless CMS client for the site service.
"""

import json
from contextlib import nullcontext
from typing import Any, Dict, Optional, TYPE_CHECKING

import httpx

from shared.errors import ExternalServiceError
from shared.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


class CMSClient:
    """Runs GROQ queries against the CMS HTTP query API."""

    def __init__(
        self,
        project_id: str,
        dataset: str,
        api_version: str,
        *,
        token: Optional[str] = None,
        use_cdn: bool = True,
        metrics: Optional["MetricsCollector"] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version.lstrip("v")
        self.token = token
        # Authenticated queries bypass the CDN to see drafts and fresh writes
        self.use_cdn = use_cdn and not token
        self.metrics = metrics
        self.transport = transport
        self.logger = get_logger("site.cms_client")

    @property
    def base_url(self) -> str:
        host = "apicdn" if self.use_cdn else "api"
        return f"https://{self.project_id}.{host}.sanity.io/v{self.api_version}"

    def _build_params(self, groq: str, params: Optional[Dict[str, Any]]) -> Dict[str, str]:
        query_params = {"query": groq}
        for name, value in (params or {}).items():
            query_params[f"${name}"] = json.dumps(value)
        return query_params

    async def query(self, groq: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Execute a GROQ query and return its ``result`` member."""
        url = f"{self.base_url}/data/query/{self.dataset}"
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        timer = self.metrics.time_operation("cms_query_duration_seconds") if self.metrics else nullcontext()

        try:
            with timer:
                async with httpx.AsyncClient(timeout=10.0, transport=self.transport) as client:
                    response = await client.get(
                        url,
                        params=self._build_params(groq, params),
                        headers=headers
                    )
        except httpx.HTTPError as exc:
            self.logger.error("CMS request error", url=url, params=params, error=str(exc))
            raise ExternalServiceError(
                service="cms",
                message=str(exc),
                details={"params": params or {}}
            ) from exc

        if response.status_code != 200:
            self.logger.error(
                "CMS query failed",
                url=url,
                params=params,
                status_code=response.status_code,
                response=response.text
            )
            raise ExternalServiceError(
                service="cms",
                message=f"Unexpected status {response.status_code}",
                details={"status_code": response.status_code, "body": response.text}
            )

        payload = response.json()
        self.logger.debug("CMS query completed", params=params, ms=payload.get("ms"))
        return payload.get("result")
