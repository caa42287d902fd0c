"""File hashing helpers."""
from __future__ import annotations

import logging
import os

from filehash.errors import OpenFailed, ReadFailed
from filehash.models import DigestResult, HashAlgorithm

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def compute_digest(
    path: str | os.PathLike[str],
    algorithm: HashAlgorithm | str = HashAlgorithm.MD5,
    chunk_size: int = CHUNK_SIZE,
) -> DigestResult:
    """Stream a file through ``algorithm`` and return its digest.

    The file is read ``chunk_size`` bytes at a time, so memory use does not
    grow with file size. Each call gets its own hashing context and file
    handle.

    Raises:
        OpenFailed: the file could not be opened.
        ReadFailed: reading failed part way through.
        UnsupportedAlgorithm: ``algorithm`` names an unknown algorithm.
    """
    if not isinstance(algorithm, HashAlgorithm):
        algorithm = HashAlgorithm.from_name(algorithm)
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    name = os.fspath(path)
    hasher = algorithm.new()
    try:
        file_handle = open(name, "rb")
    except OSError as exc:
        raise OpenFailed(name, exc.strerror or str(exc), exc.errno) from exc

    with file_handle:
        try:
            for chunk in iter(lambda: file_handle.read(chunk_size), b""):
                hasher.update(chunk)
        except OSError as exc:
            raise ReadFailed(name, exc.strerror or str(exc)) from exc

    result = DigestResult(algorithm=algorithm, path=name, digest=hasher.digest())
    logger.debug("%s digest computed for %s", algorithm.display_name, name)
    return result


def compute_checksum(
    path: str | os.PathLike[str],
    algorithm: str = "sha256",
    chunk_size: int = CHUNK_SIZE,
) -> str:
    """Return the hex digest for a file."""

    return compute_digest(path, algorithm, chunk_size).hexdigest
