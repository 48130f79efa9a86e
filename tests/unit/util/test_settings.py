"""Unit tests for settings loading and startup checks."""

import pytest

from gather.config import AISettings, AuthSettings, Settings
from gather.util.di.core import check_settings
from gather.util.error import ConfigurationError


class TestCheckSettings:
    def test_production_requires_jwt_secret(self):
        settings = Settings(
            environment="production", auth=AuthSettings(), ai=AISettings(api_key="k")
        )

        with pytest.raises(ConfigurationError) as exc_info:
            check_settings(settings)

        assert exc_info.value.setting == "AUTH__JWT_SECRET"

    def test_production_with_secret_passes(self):
        settings = Settings(
            environment="production",
            auth=AuthSettings(jwt_secret="s3cret"),
            ai=AISettings(api_key="k"),
        )

        check_settings(settings)

    def test_default_secret_allowed_outside_production(self):
        check_settings(Settings(environment="development", auth=AuthSettings()))

    def test_timeout_must_be_positive(self):
        settings = Settings(environment="test", ai=AISettings(timeout_seconds=0))

        with pytest.raises(ConfigurationError) as exc_info:
            check_settings(settings)

        assert exc_info.value.setting == "AI__TIMEOUT_SECONDS"
        assert str(exc_info.value) == "AI__TIMEOUT_SECONDS must be positive"

    def test_missing_api_key_only_warns(self):
        check_settings(Settings(environment="test", ai=AISettings(api_key=None)))


class TestApiSettings:
    def test_local_urls_use_http_and_port(self):
        settings = Settings(environment="development", host="localhost", port=8000)

        assert settings.api.base_url == "http://localhost:8000"
        assert settings.api.frontend_url == "http://localhost:3000"

    def test_deployed_urls_use_https(self):
        settings = Settings(
            environment="staging",
            host="api.gather.example",
            frontend_host="gather.example",
        )

        assert settings.api.base_url == "https://api.gather.example"
        assert settings.api.frontend_url == "https://gather.example"
