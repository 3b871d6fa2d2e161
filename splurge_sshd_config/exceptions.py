"""Custom exceptions for the Splurge SSHD Config system."""

from typing import Optional


class SshdConfigError(Exception):
    """Base exception for all SSHD config errors.

    Errors raised while a specific directive line was being applied carry
    the 1-based ``line_number`` and the ``line`` text; both stay ``None``
    for errors that are not tied to a line.
    """

    def __init__(
        self,
        message: str = "",
        *,
        line_number: Optional[int] = None,
        line: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class BadArgumentError(SshdConfigError):
    """Raised when an argument is missing or a line is malformed."""


class EmptyValueError(BadArgumentError):
    """Raised when a directive carries no value after its keyword."""


class MemoryExhaustionError(SshdConfigError):
    """Raised when storage for the config or a value cannot be allocated."""


class UnrecognizedDirectiveError(SshdConfigError):
    """Raised when a line matches no known directive."""


class InvalidValueError(SshdConfigError):
    """Raised when a directive value fails its typed parser."""


class FileOperationError(SshdConfigError):
    """Raised when the config source cannot be opened or read."""


class HostKeyError(SshdConfigError):
    """Raised when the host private key cannot be loaded."""
