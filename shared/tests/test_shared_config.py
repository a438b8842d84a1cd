"""
Unit tests for shared configuration.
"""

from shared.config import BaseConfig, get_config


def test_defaults():
    config = get_config("site", 8000)

    assert config.service_name == "site"
    assert config.port == 8000
    assert config.host == "0.0.0.0"
    assert config.site_base_url == "http://localhost:8000"
    assert config.revalidate_secret is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SITE_CMS_DATASET", "staging")
    monkeypatch.setenv("SITE_CACHE_TTL_SECONDS", "120")
    monkeypatch.setenv("SITE_CMS_USE_CDN", "false")

    config = BaseConfig()

    assert config.cms_dataset == "staging"
    assert config.cache_ttl_seconds == 120
    assert config.cms_use_cdn is False


def test_keyword_overrides_win():
    config = get_config("site", 8000, site_name="Test Site", log_level="debug")

    assert config.site_name == "Test Site"
    assert config.log_level == "debug"
