"""
Shared configuration management for the content site.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SITE_",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Public site
    site_base_url: str = Field(default="http://localhost:8000")
    site_name: str = Field(default="Djaouli Entertainment")

    # Headless CMS
    cms_project_id: str = Field(default="local")
    cms_dataset: str = Field(default="production")
    cms_api_version: str = Field(default="2024-01-01")
    cms_token: Optional[str] = Field(default=None)
    cms_use_cdn: bool = Field(default=True)

    # Content cache
    cache_ttl_seconds: int = Field(default=3600)

    # Revalidation
    revalidate_secret: Optional[str] = Field(default=None)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
