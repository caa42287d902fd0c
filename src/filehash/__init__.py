"""Compute MD5, SHA1 and SHA256 digests of files."""
from __future__ import annotations

from filehash.errors import (
    FileHashError,
    FileNotFound,
    IsDirectory,
    NotRegularFile,
    OpenFailed,
    ReadFailed,
    UnsupportedAlgorithm,
)
from filehash.models import ALL_ALGORITHMS, DigestResult, HashAlgorithm, HashOptions
from filehash.utils.formatting import format_result
from filehash.utils.hashing import compute_checksum, compute_digest
from filehash.utils.validation import validate_file

__version__ = "1.0.0"

__all__ = [
    "ALL_ALGORITHMS",
    "DigestResult",
    "FileHashError",
    "FileNotFound",
    "HashAlgorithm",
    "HashOptions",
    "IsDirectory",
    "NotRegularFile",
    "OpenFailed",
    "ReadFailed",
    "UnsupportedAlgorithm",
    "compute_checksum",
    "compute_digest",
    "format_result",
    "validate_file",
]
