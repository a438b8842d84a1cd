"""
Unit tests for the headless CMS client.
"""

import json

import httpx
import pytest

from service_site.app.adapters.cms_client import CMSClient
from shared.errors import ExternalServiceError
from shared.metrics import get_metrics_collector


class TestCMSClient:
    """Test cases for CMSClient."""

    def test_base_url_uses_cdn_by_default(self):
        client = CMSClient("abc123", "production", "2024-01-01")

        assert client.base_url == "https://abc123.apicdn.sanity.io/v2024-01-01"

    def test_token_disables_cdn(self):
        client = CMSClient("abc123", "production", "v2024-01-01", token="secret")

        assert client.base_url == "https://abc123.api.sanity.io/v2024-01-01"

    @pytest.mark.asyncio
    async def test_query_encodes_parameters_and_returns_result(self, cms_transport_factory):
        transport = cms_transport_factory({"title": "Hello"})
        client = CMSClient("abc123", "production", "2024-01-01", transport=transport)

        result = await client.query("*[slug.current == $slug][0]", {"slug": "hello", "limit": 3})

        assert result == {"title": "Hello"}
        request = transport.requests[0]
        assert request.url.path == "/v2024-01-01/data/query/production"
        assert request.url.params["query"] == "*[slug.current == $slug][0]"
        assert json.loads(request.url.params["$slug"]) == "hello"
        assert json.loads(request.url.params["$limit"]) == 3
        assert "authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_query_duration_recorded(self, cms_transport_factory):
        metrics = get_metrics_collector("site")
        client = CMSClient(
            "abc123", "production", "2024-01-01", metrics=metrics, transport=cms_transport_factory([])
        )

        await client.query("*[0]")

        assert metrics.registry.get_sample_value("cms_query_duration_seconds_count") == 1.0

    @pytest.mark.asyncio
    async def test_token_sent_as_bearer(self, cms_transport_factory):
        transport = cms_transport_factory(None)
        client = CMSClient("abc123", "production", "2024-01-01", token="secret", transport=transport)

        assert await client.query("*[0]") is None
        assert transport.requests[0].headers["authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_error_status_raises_external_service_error(self, cms_transport_factory):
        transport = cms_transport_factory(None, status_code=500)
        client = CMSClient("abc123", "production", "2024-01-01", transport=transport)

        with pytest.raises(ExternalServiceError) as exc_info:
            await client.query("*[0]")

        assert exc_info.value.service == "cms"
        assert exc_info.value.details["status_code"] == 500

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out")

        client = CMSClient("abc123", "production", "2024-01-01", transport=httpx.MockTransport(handler))

        with pytest.raises(ExternalServiceError) as exc_info:
            await client.query("*[0]", {"slug": "x"})

        assert "timed out" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)
