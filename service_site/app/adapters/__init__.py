"""
Adapters package for the Site Service.

Contains HTTP client wrappers for external dependencies (the headless
CMS). Adapters encapsulate base URLs, request shapes and the mapping of
transport failures to shared errors.

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .cms_client import CMSClient

__all__ = ["CMSClient"]
