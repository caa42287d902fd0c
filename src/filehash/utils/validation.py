"""Checks run on a path before it is hashed."""
from __future__ import annotations

import errno
import logging
import os
import stat

from filehash.errors import FileNotFound, IsDirectory, NotRegularFile

logger = logging.getLogger(__name__)


def validate_file(path: str | os.PathLike[str]) -> None:
    """Ensure ``path`` names a regular file.

    Symlinks are followed, so a link to a regular file is accepted.

    Raises:
        FileNotFound: the path cannot be stat'ed.
        IsDirectory: the path is a directory.
        NotRegularFile: the path is a device, FIFO, socket or symlink loop.
    """
    name = os.fspath(path)
    try:
        mode = os.stat(name).st_mode
    except OSError as exc:
        if exc.errno == errno.ELOOP:
            raise NotRegularFile(name) from exc
        raise FileNotFound(name, exc.strerror or str(exc)) from exc

    if stat.S_ISDIR(mode):
        raise IsDirectory(name)
    if not stat.S_ISREG(mode):
        raise NotRegularFile(name)
    logger.debug("Validated %s", name)
