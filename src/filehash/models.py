"""Data models shared by the digest engine, formatter and CLI."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum

from filehash.errors import UnsupportedAlgorithm


class HashAlgorithm(str, Enum):
    """Supported digest algorithms."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def digest_size(self) -> int:
        """Length of the binary digest in bytes."""
        return _DIGEST_SIZES[self]

    def new(self):
        """Return a fresh incremental hashing context."""
        return hashlib.new(self.value)

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """Look up an algorithm by value or display name, e.g. "sha256" or "SHA-256"."""

        key = name.strip().lower().replace("-", "").replace("_", "")
        for algorithm in cls:
            if key == algorithm.value:
                return algorithm
        raise UnsupportedAlgorithm(name)


_DISPLAY_NAMES = {
    HashAlgorithm.MD5: "MD5",
    HashAlgorithm.SHA1: "SHA1",
    HashAlgorithm.SHA256: "SHA256",
}

_DIGEST_SIZES = {
    HashAlgorithm.MD5: 16,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.SHA256: 32,
}

# Pass order for --all.
ALL_ALGORITHMS: tuple[HashAlgorithm, ...] = (
    HashAlgorithm.MD5,
    HashAlgorithm.SHA1,
    HashAlgorithm.SHA256,
)


@dataclass(frozen=True)
class DigestResult:
    """Digest of a single file under a single algorithm."""

    algorithm: HashAlgorithm
    path: str
    digest: bytes

    def __post_init__(self) -> None:
        expected = self.algorithm.digest_size
        if len(self.digest) != expected:
            raise ValueError(
                f"{self.algorithm.display_name} digest must be {expected} bytes, "
                f"got {len(self.digest)}"
            )

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True)
class HashOptions:
    """Parsed command-line configuration for one invocation."""

    algorithm: HashAlgorithm = HashAlgorithm.MD5
    all_algorithms: bool = False
    files: tuple[str, ...] = ()

    @property
    def algorithms(self) -> tuple[HashAlgorithm, ...]:
        if self.all_algorithms:
            return ALL_ALGORITHMS
        return (self.algorithm,)
