"""HTTP client helpers."""

from .factories import create_client_session, create_secure_connector, create_ssl_context

__all__ = [
    "create_client_session",
    "create_secure_connector",
    "create_ssl_context",
]
