"""Helpers for writing tests against the cache."""

from __future__ import annotations

import hashlib
import logging
import os


def random_data_and_hash(size: int) -> tuple[bytes, str]:
    """Return ``size`` random bytes and their lower-case hex SHA-256."""
    data = os.urandom(size)
    return data, hashlib.sha256(data).hexdigest()


def silent_logger() -> logging.Logger:
    """Return a logger that discards everything it is given."""
    logger = logging.getLogger("remotecache.silent")
    logger.propagate = False
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger