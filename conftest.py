"""
Shared pytest fixtures for the content site.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest


@pytest.fixture
def news_post_record() -> Dict[str, Any]:
    """CMS record for a news post, as projected by the news queries."""
    return {
        "title": "Summer Tour Announced",
        "slug": {"current": "summer-tour"},
        "excerpt": "Twelve cities, one summer.",
        "publishedAt": "2025-03-07T18:30:00Z",
        "mainImage": {"alt": "Stage", "asset": {"url": "https://cdn.example.com/stage.jpg"}},
        "author": {
            "name": "Ama Mensah",
            "slug": {"current": "ama-mensah"},
            "bio": "Press officer.",
            "image": {"asset": {"url": "https://cdn.example.com/ama.jpg"}},
        },
        "categories": [{"title": "Tours"}, {"title": "Announcements"}],
        "body": [
            {
                "_type": "block",
                "_key": "b1",
                "style": "normal",
                "markDefs": [],
                "children": [{"_type": "span", "text": "Tickets go on sale Friday.", "marks": []}],
            }
        ],
    }


@pytest.fixture
def cms_transport_factory() -> Callable[..., httpx.MockTransport]:
    """Build a mock CMS transport answering every query with the given results.

    The returned transport records each request in ``transport.requests``.
    """

    def _factory(*results: Any, status_code: int = 200) -> httpx.MockTransport:
        pending: List[Any] = list(results)
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            result = pending.pop(0) if len(pending) > 1 else (pending[0] if pending else None)
            return httpx.Response(
                status_code,
                content=json.dumps({"ms": 3, "query": "", "result": result}),
                headers={"Content-Type": "application/json"},
            )

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return _factory
