"""Tests for urlshort.config — ShortenerConfig defaults and validation."""

import pytest

from urlshort.config import DEFAULT_CONFIG, REDIRECT_STATUSES, ShortenerConfig
from urlshort.errors import ConfigurationError


class TestShortenerConfig:
    def test_defaults(self) -> None:
        config = ShortenerConfig()
        assert config.redirect_status == 302
        assert config.log_level == "warning"
        assert config == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        config = ShortenerConfig()
        with pytest.raises(AttributeError):
            config.redirect_status = 301  # type: ignore[misc]

    @pytest.mark.parametrize("status", sorted(REDIRECT_STATUSES))
    def test_accepts_redirect_statuses(self, status: int) -> None:
        assert ShortenerConfig(redirect_status=status).redirect_status == status

    @pytest.mark.parametrize("status", [200, 300, 304, 404, 500])
    def test_rejects_other_statuses(self, status: int) -> None:
        with pytest.raises(ConfigurationError, match="redirect_status"):
            ShortenerConfig(redirect_status=status)

    def test_log_level_case_insensitive(self) -> None:
        assert ShortenerConfig(log_level="DEBUG").log_level == "DEBUG"

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log_level"):
            ShortenerConfig(log_level="verbose")
