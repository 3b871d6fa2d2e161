"""Line source for directive files."""

import logging
from pathlib import Path
from types import TracebackType
from typing import IO, Iterator, Optional

from splurge_sshd_config.constants import Constants
from splurge_sshd_config.exceptions import FileOperationError

logger = logging.getLogger(__name__)


class FileLineSource:
    """Reads a directive file one line at a time.

    Lines keep their line terminator. Bytes that are not valid UTF-8 are
    carried through as surrogate escapes instead of failing the read. A
    physical line longer than ``max_line_size - 1`` bytes is cut to that
    length and the rest of it is discarded.

    Use as a context manager so the file is closed on every exit path.
    """

    def __init__(
        self,
        filename: str,
        *,
        max_line_size: int = Constants.MAX_LINE_SIZE()
    ) -> None:
        """Initialize the line source.

        Args:
            filename: Path of the directive file
            max_line_size: Line buffer size, terminator included
        """
        self._path = Path(filename)
        self._max_line_size = max_line_size
        self._handle: Optional[IO[str]] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._handle is None

    def open(self) -> None:
        """Open the file.

        Raises:
            FileOperationError: If the file cannot be opened
        """
        try:
            self._handle = self._path.open(encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            logger.error(f"Unable to open SSHD config file {self._path}")
            raise FileOperationError(f"Unable to open SSHD config file {self._path}: {e}") from e

    def close(self) -> None:
        """Close the file if it is open."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "FileLineSource":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType]
    ) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        if self._handle is None:
            raise FileOperationError(f"SSHD config file {self._path} is not open")

        limit = self._max_line_size - 1
        line_number = 0
        try:
            for line in self._handle:
                line_number += 1
                encoded = line.encode("utf-8", errors="surrogateescape")
                if len(encoded) > limit:
                    logger.debug(
                        f"Truncating line {line_number} to {limit} bytes",
                        extra={"line_number": line_number, "event": "line_truncated"},
                    )
                    line = encoded[:limit].decode("utf-8", errors="surrogateescape")
                yield line
        except OSError as e:
            raise FileOperationError(f"Failed to read SSHD config file {self._path}: {e}") from e
