"""
Site caching package.

Holds fetched CMS content labelled with tags and page paths. Entries are
short-lived and dropped explicitly through revalidation.
"""

from .tag_cache import TagCache

__all__ = ["TagCache"]
