"""Error kinds raised while validating and hashing files."""
from __future__ import annotations

import errno as errno_codes
from typing import Optional


class FileHashError(Exception):
    """Base class for all filehash errors."""


class FilePathError(FileHashError):
    """An error tied to a specific file argument."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class FileNotFound(FilePathError):
    def __init__(self, path: str, reason: str = "No such file or directory") -> None:
        super().__init__(path, f"Cannot access file '{path}': {reason}")
        self.reason = reason


class IsDirectory(FilePathError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"'{path}' is a directory, not a file")


class NotRegularFile(FilePathError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"'{path}' is not a regular file")


class OpenFailed(FilePathError):
    """The file could not be opened for reading.

    ``errno`` keeps the OS error code so callers can tell a missing file
    from a permission problem.
    """

    def __init__(self, path: str, reason: str, errno: Optional[int] = None) -> None:
        super().__init__(path, f"Cannot open file '{path}': {reason}")
        self.reason = reason
        self.errno = errno

    @property
    def not_found(self) -> bool:
        return self.errno == errno_codes.ENOENT

    @property
    def permission_denied(self) -> bool:
        return self.errno in (errno_codes.EACCES, errno_codes.EPERM)


class ReadFailed(FilePathError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(path, f"Cannot read file '{path}': {reason}")
        self.reason = reason


class UnsupportedAlgorithm(FileHashError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported hash algorithm: '{name}'")
        self.name = name
