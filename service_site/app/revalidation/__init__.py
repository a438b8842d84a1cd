"""
Revalidation package: trigger cache invalidation on the running site.
"""

from .client import (
    RevalidationClient,
    RevalidationError,
    RevalidationRequest,
    revalidate_all,
    revalidate_events,
    revalidate_homepage,
    revalidate_posts,
    revalidate_products,
    trigger_revalidation,
)

__all__ = [
    "RevalidationClient",
    "RevalidationError",
    "RevalidationRequest",
    "revalidate_all",
    "revalidate_events",
    "revalidate_homepage",
    "revalidate_posts",
    "revalidate_products",
    "trigger_revalidation",
]
