"""Parse cache request paths of the form ``[instance/](ac|cas)/<sha256>``."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_BLOB_NAME_SHA256 = re.compile(r"/?(.*/)?(ac/|cas/)([a-f0-9]{64})")

_HTML_ESCAPES = str.maketrans(
    {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}
)


class EntryKind(str, enum.Enum):
    """The kind of a cache entry."""

    AC = "ac"
    CAS = "cas"
    RAW = "raw"

    def __str__(self) -> str:
        return self.value


class RequestURLError(ValueError):
    """A request path does not name a cache entry."""


@dataclass(frozen=True)
class ParsedRequest:
    """The entry a request path refers to."""

    kind: EntryKind
    hash: str
    instance: str


def _escape_html(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def parse_request_url(url: str, validate_ac: bool) -> ParsedRequest:
    """Parse the kind, hash and instance name from a request path.

    ``ac/`` paths are :attr:`EntryKind.AC` when ``validate_ac`` is true and
    :attr:`EntryKind.RAW` otherwise.
    """
    match = _BLOB_NAME_SHA256.fullmatch(url)
    if match is None or "\n" in url:
        raise RequestURLError(
            f"resource name must be a SHA256 hash in hex, got '{_escape_html(url)}'"
        )

    instance_part, kind_part, hash_ = match.groups()
    instance = (instance_part or "").removesuffix("/")

    if kind_part == "cas/":
        kind = EntryKind.CAS
    elif validate_ac:
        kind = EntryKind.AC
    else:
        kind = EntryKind.RAW
    return ParsedRequest(kind, hash_, instance)


def blob_path(kind: EntryKind, hash_: str) -> str:
    """Return the canonical ``/<kind>/<hash>`` path of an entry."""
    return f"/{kind.value}/{hash_}"