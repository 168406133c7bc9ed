"""Create uniquely named, not-yet-complete cache files."""

from __future__ import annotations

import os
import stat
import threading
import time
from typing import BinaryIO

FINAL_MODE = 0o664
"""Permissions of a cache file once it has been completely written."""

_WIP_MODE = FINAL_MODE | stat.S_ISGID
_FLAGS = os.O_RDWR | os.O_CREAT | os.O_EXCL
_ATTEMPTS = 10000
_MASK32 = 0xFFFFFFFF


class TempFileError(OSError):
    """A temp file could not be created."""


class TempFileCreator:
    """Makes temp files named ``<base>-<random>`` using a fast LCG for the random part."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._state = seed & _MASK32
        self._lock = threading.Lock()

    def random_suffix(self) -> str:
        """Return the next nine-digit pseudo-random string."""
        with self._lock:
            self._state = (self._state * 1664525 + 1013904223) & _MASK32
            value = self._state
        return f"{value % 1_000_000_000:09d}"

    def create(self, base: str, legacy: bool = False) -> tuple[BinaryIO, str]:
        """Create a new file ``<base>-<random>`` (with ``.v1`` if ``legacy``).

        The file has the setgid bit set to mark it incomplete; chmod it to
        :data:`FINAL_MODE` once written. Returns the open file and the
        random string.
        """
        for _ in range(_ATTEMPTS):
            random = self.random_suffix()
            name = f"{base}-{random}.v1" if legacy else f"{base}-{random}"
            try:
                fd = os.open(name, _FLAGS, _WIP_MODE)
            except FileExistsError:
                continue
            except OSError as exc:
                raise TempFileError(f"Unexpected error opening temp file: {exc}") from exc
            return os.fdopen(fd, "w+b"), random

        raise TempFileError("Failed to create a temp file")