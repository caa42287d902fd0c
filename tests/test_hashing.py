import errno
import hashlib
import io
import os
from pathlib import Path

import pytest

from filehash.errors import OpenFailed, ReadFailed, UnsupportedAlgorithm
from filehash.models import DigestResult, HashAlgorithm
from filehash.utils import hashing
from filehash.utils.hashing import compute_checksum, compute_digest

EMPTY_DIGESTS = {
    HashAlgorithm.MD5: "d41d8cd98f00b204e9800998ecf8427e",
    HashAlgorithm.SHA1: "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    HashAlgorithm.SHA256: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
}


def test_compute_checksum(tmp_path: Path) -> None:
    file_path = tmp_path / "sample.txt"
    file_path.write_text("fpga")
    digest = compute_checksum(file_path)
    assert digest == compute_checksum(file_path)
    assert len(digest) == 64
    assert digest == hashlib.sha256(b"fpga").hexdigest()


@pytest.mark.parametrize(
    ("algorithm", "size"),
    [(HashAlgorithm.MD5, 16), (HashAlgorithm.SHA1, 20), (HashAlgorithm.SHA256, 32)],
)
def test_digest_length(sample_file: Path, algorithm: HashAlgorithm, size: int) -> None:
    result = compute_digest(sample_file, algorithm)
    assert isinstance(result, DigestResult)
    assert result.algorithm is algorithm
    assert len(result.digest) == size


@pytest.mark.parametrize("algorithm", list(HashAlgorithm))
def test_empty_file_vectors(empty_file: Path, algorithm: HashAlgorithm) -> None:
    assert compute_digest(empty_file, algorithm).hexdigest == EMPTY_DIGESTS[algorithm]


def test_digest_is_deterministic(sample_file: Path) -> None:
    first = compute_digest(sample_file, HashAlgorithm.SHA256)
    second = compute_digest(sample_file, HashAlgorithm.SHA256)
    assert first == second


def test_result_keeps_path_as_given(sample_file: Path) -> None:
    result = compute_digest(str(sample_file))
    assert result.path == str(sample_file)
    assert result.algorithm is HashAlgorithm.MD5


def test_chunked_read_matches_single_read(tmp_path: Path) -> None:
    payload = os.urandom(3 * hashing.CHUNK_SIZE + 123)
    file_path = tmp_path / "large.bin"
    file_path.write_bytes(payload)

    for algorithm in HashAlgorithm:
        expected = hashlib.new(algorithm.value, payload).digest()
        assert compute_digest(file_path, algorithm).digest == expected
        assert compute_digest(file_path, algorithm, chunk_size=7).digest == expected


def test_reads_in_bounded_chunks(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    file_path = tmp_path / "large.bin"
    file_path.write_bytes(b"x" * (hashing.CHUNK_SIZE * 2 + 1))
    sizes: list[int] = []
    real_open = open

    class RecordingReader(io.BufferedReader):
        def read(self, size: int = -1) -> bytes:
            sizes.append(size)
            return super().read(size)

    def recording_open(name, mode="r"):
        return RecordingReader(real_open(name, mode, buffering=0))

    monkeypatch.setattr(hashing, "open", recording_open, raising=False)
    compute_digest(file_path)
    assert sizes and all(size == hashing.CHUNK_SIZE for size in sizes)


def test_algorithm_can_be_named(sample_file: Path) -> None:
    by_name = compute_digest(sample_file, "SHA-256")
    assert by_name.algorithm is HashAlgorithm.SHA256
    assert by_name == compute_digest(sample_file, HashAlgorithm.SHA256)


def test_unknown_algorithm_rejected(sample_file: Path) -> None:
    with pytest.raises(UnsupportedAlgorithm):
        compute_digest(sample_file, "sha512")


def test_chunk_size_must_be_positive(sample_file: Path) -> None:
    with pytest.raises(ValueError):
        compute_digest(sample_file, chunk_size=0)


def test_missing_file_raises_open_failed(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(OpenFailed) as exc_info:
        compute_digest(missing)
    assert exc_info.value.not_found
    assert not exc_info.value.permission_denied
    assert exc_info.value.path == str(missing)


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read anything")
def test_unreadable_file_raises_permission_denied(sample_file: Path) -> None:
    sample_file.chmod(0)
    try:
        with pytest.raises(OpenFailed) as exc_info:
            compute_digest(sample_file)
    finally:
        sample_file.chmod(0o644)
    assert exc_info.value.permission_denied


def test_read_error_raises_read_failed(sample_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    closed: list[bool] = []

    class FailingReader(io.BytesIO):
        def read(self, size: int = -1) -> bytes:
            raise OSError(errno.EIO, "Input/output error")

        def close(self) -> None:
            closed.append(True)
            super().close()

    monkeypatch.setattr(hashing, "open", lambda name, mode="r": FailingReader(), raising=False)
    with pytest.raises(ReadFailed) as exc_info:
        compute_digest(sample_file)
    assert "Input/output error" in str(exc_info.value)
    assert closed == [True]


def test_each_call_uses_a_fresh_context(tmp_path: Path) -> None:
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"alpha")
    second.write_bytes(b"beta")

    compute_digest(first, HashAlgorithm.SHA1)
    result = compute_digest(second, HashAlgorithm.SHA1)
    assert result.digest == hashlib.sha1(b"beta").digest()


def test_compute_checksum_accepts_str_path(sample_file: Path) -> None:
    assert compute_checksum(str(sample_file), "md5") == hashlib.md5(b"0123456789").hexdigest()
