"""Async filesystem primitives used by the feed cache and the workers.

All calls go through aiofiles so the event loop never blocks on disk I/O.
"""

import typing as t
from pathlib import Path

import aiofiles
import aiofiles.os

from ..domain.exceptions import FileSystemError
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


class FileStore:
    """Existence checks, timestamps and directory creation on local disk.

    Errors from the operating system are raised as FileSystemError so
    callers deal with a single exception type for disk problems.
    """

    def __init__(self, logger: "loguru.Logger" = get_logger(__name__)) -> None:
        self.logger = logger

    @staticmethod
    def join(directory: Path, name: str) -> Path:
        return directory / name

    async def exists(self, path: Path) -> bool:
        return await aiofiles.os.path.exists(path)

    async def ensure_directory(self, path: Path) -> Path:
        """Create ``path`` and any missing parents.

        Succeeds when the directory already exists.

        Raises:
            FileSystemError: If the directory cannot be created, e.g. a
                regular file occupies the path or permission is denied.
        """
        try:
            await aiofiles.os.makedirs(path, exist_ok=True)
        except OSError as exc:
            raise FileSystemError(path, f"Could not create directory ({exc.strerror or exc})") from exc
        return path

    async def modified_at(self, path: Path) -> float:
        """Return the last modification time of ``path`` as a POSIX timestamp.

        Raises:
            FileSystemError: If the file cannot be inspected.
        """
        try:
            stat_result = await aiofiles.os.stat(path)
        except OSError as exc:
            raise FileSystemError(path, f"Could not inspect file ({exc.strerror or exc})") from exc
        return stat_result.st_mtime

    async def read_bytes(self, path: Path) -> bytes:
        """Read a whole file.

        Raises:
            FileSystemError: If the file cannot be read.
        """
        try:
            async with aiofiles.open(path, "rb") as file_handle:
                return await file_handle.read()
        except OSError as exc:
            raise FileSystemError(path, f"Could not read file ({exc.strerror or exc})") from exc

    async def remove(self, path: Path) -> None:
        """Remove ``path`` if it exists.

        Failures are logged rather than raised; this is used for cleanup
        where the caller is already handling a more important error.
        """
        try:
            if await aiofiles.os.path.exists(path):
                await aiofiles.os.remove(path)
                self.logger.debug(f"Removed {path}")
        except Exception as cleanup_error:
            self.logger.warning(f"Failed to remove {path}: {cleanup_error}")
