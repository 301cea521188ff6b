"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from coves.config import Settings, ThreadingSettings
from coves.domain.value import CommentSort


class TestSettings:
    """Tests for Settings loading."""

    def test_threading_defaults(self):
        settings = Settings()

        assert settings.threading.max_depth == 6
        assert settings.threading.page_size == 50
        assert settings.threading.cache_size == 15
        assert settings.threading.default_sort == CommentSort.HOT

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("THREADING__MAX_DEPTH", "3")
        monkeypatch.setenv("COVES__BASE_URL", "https://appview.example")

        settings = Settings()

        assert settings.threading.max_depth == 3
        assert settings.coves.base_url == "https://appview.example"

    def test_production_uses_https(self):
        settings = Settings(environment="production", host="threads.example")

        assert settings.api.base_url == "https://threads.example"

    def test_development_includes_port(self):
        settings = Settings(environment="development", host="localhost", port=9000)

        assert settings.api.base_url == "http://localhost:9000"

    def test_rejects_negative_depth(self):
        with pytest.raises(ValidationError):
            ThreadingSettings(max_depth=-1)

    def test_rejects_oversized_page(self):
        with pytest.raises(ValidationError):
            ThreadingSettings(page_size=101)
