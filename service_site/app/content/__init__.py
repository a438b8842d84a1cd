"""
Content package: CMS record models and cached news queries.
"""

from .models import Author, Category, Image, ImageAsset, NewsPost, Slug
from .queries import NewsQueries

__all__ = ["Author", "Category", "Image", "ImageAsset", "NewsPost", "Slug", "NewsQueries"]
