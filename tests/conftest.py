from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    file_path = tmp_path / "sample.txt"
    file_path.write_bytes(b"0123456789")
    return file_path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    file_path = tmp_path / "empty.bin"
    file_path.write_bytes(b"")
    return file_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
