"""Check the immediate fields of an ActionResult before it is stored."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

HASH_KEY_REGEX = re.compile(r"[a-f0-9]{64}")
"""Cache keys must be lower-case hex SHA-256 sums."""


class ValidationError(ValueError):
    """An ActionResult or Digest is malformed."""


@dataclass
class Digest:
    """A content digest: a SHA-256 hash and a size in bytes."""

    hash: str
    size_bytes: int = 0


@dataclass
class OutputFile:
    """A file produced by an action."""

    path: str = ""
    digest: Digest | None = None
    is_executable: bool = False


@dataclass
class OutputDirectory:
    """A directory produced by an action, stored as a Tree blob."""

    path: str = ""
    tree_digest: Digest | None = None


@dataclass
class OutputSymlink:
    """A symbolic link produced by an action."""

    path: str = ""
    target: str = ""


@dataclass
class ActionResult:
    """The outcome of an action, as kept in the action cache."""

    output_files: list[OutputFile | None] = field(default_factory=list)
    output_directories: list[OutputDirectory | None] = field(default_factory=list)
    output_file_symlinks: list[OutputSymlink | None] = field(default_factory=list)
    output_symlinks: list[OutputSymlink | None] = field(default_factory=list)
    output_directory_symlinks: list[OutputSymlink | None] = field(default_factory=list)
    exit_code: int = 0
    stdout_digest: Digest | None = None
    stderr_digest: Digest | None = None


def _quote(text: str) -> str:
    return json.dumps(text)


def validate_digest(digest: Digest | None) -> None:
    """Check a digest's size and hash; ``None`` is accepted."""
    if digest is None:
        return
    if digest.size_bytes < 0:
        raise ValidationError("Digest has negative SizeBytes")
    if not isinstance(digest.hash, str) or not HASH_KEY_REGEX.fullmatch(digest.hash):
        raise ValidationError(f"Invalid hash: {_quote(str(digest.hash))}")


def _check_digest(digest: Digest, context: str) -> None:
    try:
        validate_digest(digest)
    except ValidationError as exc:
        raise ValidationError(f"{context}: {exc}") from exc


def _check_symlinks(
    symlinks: list[OutputSymlink | None], field_name: str, description: str
) -> None:
    for link in symlinks:
        if link is None:
            raise ValidationError(f"None OutputSymlink in {field_name}")
        if link.path == "":
            raise ValidationError(f"empty path in {field_name}")
        if link.target == "":
            raise ValidationError(f"empty target in {field_name}")
        if link.path.startswith("/"):
            raise ValidationError(f"absolute path in {description}: {_quote(link.path)}")


def validate_action_result(action_result: ActionResult | None) -> ActionResult:
    """Validate the fields of ``action_result`` without looking up its blobs.

    Returns the action result unchanged; raises :class:`ValidationError`.
    """
    if action_result is None:
        raise ValidationError("None ActionResult")

    for output in action_result.output_files:
        if output is None:
            raise ValidationError("None output file")
        if output.path == "":
            raise ValidationError("empty path")
        if output.path.startswith("/"):
            raise ValidationError(f"absolute path in output file: {_quote(output.path)}")
        if output.digest is None:
            raise ValidationError(f"None Digest for path {_quote(output.path)}")
        _check_digest(output.digest, f"invalid Digest for path {_quote(output.path)}")

    for directory in action_result.output_directories:
        if directory is None:
            raise ValidationError("None output directory")
        if directory.path.startswith("/"):
            raise ValidationError(
                f"absolute path in output directory: {_quote(directory.path)}"
            )
        if directory.tree_digest is None:
            raise ValidationError(
                f"None tree digest for output directory: {_quote(directory.path)}"
            )
        _check_digest(
            directory.tree_digest, f"Invalid TreeDigest for path {_quote(directory.path)}"
        )

    _check_symlinks(
        action_result.output_file_symlinks, "OutputFileSymlinks", "output file symlink"
    )
    _check_symlinks(action_result.output_symlinks, "OutputSymlinks", "output symlink")
    _check_symlinks(
        action_result.output_directory_symlinks,
        "OutputDirectorySymlinks",
        "output directory symlink",
    )

    _check_digest(action_result.stdout_digest, "invalid StdoutDigest")
    _check_digest(action_result.stderr_digest, "invalid StderrDigest")
    return action_result