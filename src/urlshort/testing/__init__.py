"""Test utilities for urlshort handlers.

Provides an in-memory ASGI test client and redirect assertions::

    from urlshort.testing import TestClient, assert_redirects
"""

from urlshort.testing.assertions import assert_delegated, assert_redirects
from urlshort.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_delegated",
    "assert_redirects",
]
