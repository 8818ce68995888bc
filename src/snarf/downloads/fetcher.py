"""HTTP fetcher that streams a response body into a file.

This module provides the Fetcher class, the only component that talks to the
network. It is used both for feed documents and for media enclosures.
"""

import asyncio
import typing as t
from pathlib import Path

import aiofiles
import aiohttp
from aiofiles.threadpool.binary import AsyncBufferedIOBase

from ..domain.exceptions import FetchError
from ..infrastructure.logging import get_logger
from ..storage.filestore import FileStore

if t.TYPE_CHECKING:
    import loguru


class Fetcher:
    """Blocking-until-done retrieval of a URL into a local file.

    Features:
    - Streams the body in chunks so large media never sits in memory
    - Treats any status outside 200-299 as a failure
    - Removes the partially written file when a fetch fails
    - Raises a single FetchError type with a categorised message

    There is no retry and no timeout: a stalled server stalls the caller.
    """

    def __init__(
        self,
        client: aiohttp.ClientSession,
        logger: "loguru.Logger" = get_logger(__name__),
        file_store: FileStore | None = None,
        chunk_size: int = 1024,
    ) -> None:
        """Initialise the fetcher.

        Args:
            client: Open aiohttp ClientSession used for every request
            logger: Logger instance for recording fetch events and errors
            file_store: Used to clean up partial files. If None, one is
                created with the same logger.
            chunk_size: Bytes read from the response per iteration
        """
        self.client = client
        self.logger = logger
        self.file_store = file_store or FileStore(logger)
        self.chunk_size = chunk_size

    async def _write_chunk_to_file(
        self, chunk: bytes, file_handle: AsyncBufferedIOBase
    ) -> None:
        await file_handle.write(chunk)

    def _describe_error(self, exception: Exception, url: str) -> str:
        """Build a human-readable message for a failed fetch.

        Categorises exceptions by type so the message says whether the
        network, the server or the local disk was at fault.
        """
        match exception:
            # Network connection errors - issues establishing connection
            case aiohttp.ClientSSLError():
                error_category = "SSL/TLS error connecting to"
            case aiohttp.ClientConnectorError():
                error_category = "Failed to connect to"
            case aiohttp.ClientOSError():
                error_category = "Network error connecting to"
            case aiohttp.ClientConnectionError():
                error_category = "Connection error fetching"

            # HTTP response errors - server responded but with error
            case aiohttp.ClientResponseError():
                error_category = f"HTTP {exception.status} error from"
            case aiohttp.ClientPayloadError():
                error_category = "Invalid response payload from"

            case asyncio.TimeoutError():
                error_category = "Timeout fetching"

            # File system errors - issues writing to disk
            case FileNotFoundError():
                error_category = "Could not create file for"
            case PermissionError():
                error_category = "Permission denied writing file for"
            case OSError():
                error_category = "File system error fetching"

            case Exception():
                error_category = "Unexpected error fetching"
                self.logger.debug(
                    f"Uncaught exception of type {type(exception).__name__}: {exception}"
                )

        return f"{error_category} {url}: {exception}"

    async def fetch(self, url: str, destination_path: Path) -> Path:
        """Retrieve ``url`` and write its body to ``destination_path``.

        An existing file at the destination is overwritten.

        Args:
            url: HTTP/HTTPS URL to fetch
            destination_path: Local file to write; its directory must exist

        Returns:
            The destination path.

        Raises:
            FetchError: On transport failure, a non-2xx status or a disk
                error while writing. The original exception is chained.

        Example:
            ```python
            async with aiohttp.ClientSession() as session:
                fetcher = Fetcher(session)
                await fetcher.fetch("https://example.com/ep1.mp3", Path("./ep1.mp3"))
            ```
        """
        self.logger.debug(f"Starting fetch: {url} -> {destination_path}")

        try:
            async with aiofiles.open(destination_path, "wb") as file_handle:
                async with self.client.get(url) as response:
                    # Raises ClientResponseError for 4xx/5xx
                    response.raise_for_status()
                    # 1xx and 3xx that were not followed are failures too
                    if not 200 <= response.status <= 299:
                        raise aiohttp.ClientResponseError(
                            response.request_info,
                            response.history,
                            status=response.status,
                            message=response.reason or "Unexpected status",
                        )

                    async for chunk in response.content.iter_chunked(self.chunk_size):
                        await self._write_chunk_to_file(chunk, file_handle)

            self.logger.debug(f"Fetch completed successfully: {destination_path}")
            return destination_path

        except asyncio.CancelledError:
            await self.file_store.remove(destination_path)
            raise

        except Exception as fetch_error:
            await self.file_store.remove(destination_path)

            message = self._describe_error(fetch_error, url)
            self.logger.error(message)

            status = (
                fetch_error.status
                if isinstance(fetch_error, aiohttp.ClientResponseError)
                else None
            )
            raise FetchError(url, message, status=status) from fetch_error
