"""urlshort exception hierarchy.

Shared by the parsers, the config layer, and the CLI so every module
raises and catches the same types.
"""


class UrlshortError(Exception):
    """Base for all urlshort-specific errors."""


class ConfigurationError(UrlshortError):
    """Raised when a ``ShortenerConfig`` value is invalid.

    Surfaces at construction time, before any handler is built.
    """


class DecodeError(UrlshortError, ValueError):
    """Raw record data could not be decoded into path/URL records.

    Raised for malformed syntax, a document of the wrong shape, or a field
    holding a collection where a string is expected. When the failure came
    from the YAML or JSON library, its exception is chained as
    ``__cause__`` and also available as ``cause``.
    """

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause

    def __str__(self) -> str:
        return self.detail
