"""Background workers that push cache entries to a proxy backend."""

from __future__ import annotations

import logging
import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, BinaryIO

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadRequest:
    """One cache entry waiting to be uploaded."""

    hash: str
    logical_size: int
    size_on_disk: int
    kind: Any
    reader: BinaryIO


class Uploader(ABC):
    """Something that can upload a single cache entry."""

    @abstractmethod
    def upload_file(self, item: UploadRequest) -> None:
        """Upload ``item`` to the backend."""


def _worker(uploader: Uploader, upload_queue: queue.Queue) -> None:
    while True:
        item = upload_queue.get()
        try:
            uploader.upload_file(item)
        except Exception:
            _log.exception("upload of %s failed", getattr(item, "hash", item))
        finally:
            upload_queue.task_done()


def start_uploaders(
    uploader: Uploader, num_uploaders: int, max_queued_uploads: int
) -> queue.Queue | None:
    """Start ``num_uploaders`` daemon threads draining a bounded queue.

    Returns the queue to put :class:`UploadRequest` items on, or ``None``
    when either count is not positive.
    """
    if max_queued_uploads <= 0 or num_uploaders <= 0:
        return None

    upload_queue: queue.Queue = queue.Queue(maxsize=max_queued_uploads)
    for number in range(num_uploaders):
        threading.Thread(
            target=_worker,
            args=(uploader, upload_queue),
            name=f"uploader-{number}",
            daemon=True,
        ).start()
    return upload_queue