"""Render digests and errors as text lines."""
from __future__ import annotations

from filehash.errors import FileHashError
from filehash.models import DigestResult


def format_result(result: DigestResult) -> str:
    """Return ``ALGO (hexdigest) = filename`` with a trailing newline."""
    return f"{result.algorithm.display_name} ({result.hexdigest}) = {result.path}\n"


def format_error(error: FileHashError) -> str:
    return f"Error: {error}"
