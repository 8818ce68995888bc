"""Factories for aiohttp sessions that verify TLS against certifi."""

import ssl
import typing as t

import aiohttp
import certifi


def create_ssl_context() -> ssl.SSLContext:
    """Create an SSL context using certifi's CA bundle.

    Python builds do not always ship usable system certificates (notably on
    macOS), so certifi gives the same trust store on every platform.
    """
    return ssl.create_default_context(cafile=certifi.where())


def create_secure_connector(
    ssl: ssl.SSLContext | None = None,
    **connector_kwargs: t.Any,
) -> aiohttp.TCPConnector:
    """Create a TCP connector bound to a certifi-backed SSL context.

    Args:
        ssl: SSL context to use. Defaults to ``create_ssl_context()``.
        **connector_kwargs: Passed through to ``aiohttp.TCPConnector``.
    """
    return aiohttp.TCPConnector(ssl=ssl or create_ssl_context(), **connector_kwargs)


def create_client_session(**session_kwargs: t.Any) -> aiohttp.ClientSession:
    """Create a ClientSession over a secure connector.

    Must be called from inside a running event loop.
    """
    return aiohttp.ClientSession(connector=create_secure_connector(), **session_kwargs)
