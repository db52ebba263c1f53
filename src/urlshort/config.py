"""Shortener configuration.

ShortenerConfig is a frozen dataclass: immutable after creation, checked
once in ``__post_init__``.
"""

from dataclasses import dataclass

from urlshort.errors import ConfigurationError

# 3xx codes that carry a Location header and mean "go over there"
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class ShortenerConfig:
    """Shortener configuration. Immutable after creation.

    Defaults match plain temporary redirects::

        config = ShortenerConfig(redirect_status=308, log_level="debug")
    """

    redirect_status: int = 302
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if self.redirect_status not in REDIRECT_STATUSES:
            allowed = ", ".join(str(s) for s in sorted(REDIRECT_STATUSES))
            msg = f"redirect_status must be one of {allowed}, got {self.redirect_status!r}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ShortenerConfig()
