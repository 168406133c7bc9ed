"""Help text formatting for the command line."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from dataclasses import dataclass
from typing import Any, Iterable

DEFAULT_WIDTH = 10000
"""Width used when the console width cannot be found."""

MINIMUM_WIDTH = 30
"""Help text is never wrapped narrower than this."""

HELP_TITLE = "remotecache - A remote build cache for Bazel and other REAPI clients"

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass
class Flag:
    """A command line option, rendered the way the help page lists it."""

    name: str
    usage: str = ""
    value: Any = None
    env_vars: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    default_text: str = ""
    takes_value: bool | None = None
    show_default: bool = True

    def _needs_value(self) -> bool:
        if self.takes_value is not None:
            return self.takes_value
        return not isinstance(self.value, bool)

    def _default_string(self) -> str:
        if self.default_text:
            return self.default_text
        if not self.show_default or self.value is None:
            return ""
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, str):
            if self.value == "":
                return ""
            escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(self.value)

    def _placeholder_and_usage(self) -> tuple[str, str]:
        start = self.usage.find("`")
        if start >= 0:
            end = self.usage.find("`", start + 1)
            if end >= 0:
                name = self.usage[start + 1 : end]
                return name, self.usage[:start] + name + self.usage[end + 1 :]
        return "", self.usage

    def __str__(self) -> str:
        placeholder, usage = self._placeholder_and_usage()
        if self._needs_value() and not placeholder:
            placeholder = "value"
        if not self._needs_value():
            placeholder = ""

        default = self._default_string()
        if default:
            usage += f" (default: {default})"
        usage = usage.strip()

        names = []
        for name in (self.name, *self.aliases):
            prefix = "-" if len(name) == 1 else "--"
            names.append(f"{prefix}{name} {placeholder}" if placeholder else f"{prefix}{name}")
        text = f"{', '.join(names)}\t{usage}"

        if self.env_vars:
            text += " [" + ", ".join(f"${var}" for var in self.env_vars) + "]"
        return text


HELP_FLAG = Flag("help", "show help", value=False, aliases=("h",), show_default=False)


def wrap_line(text: str, wrap_at: int, padding: str) -> str:
    """Wrap one line at word boundaries, starting wrapped lines with ``padding``.

    Whitespace is not preserved exactly.
    """
    offset = len(padding)
    if wrap_at <= offset:
        return text

    target_width = wrap_at - offset
    if len(text) <= target_width:
        return text

    words = text.split()
    if not words:
        return text

    wrapped = words[0]
    space_left = target_width - len(wrapped)
    for word in words[1:]:
        if len(word) + 1 > space_left:
            wrapped += "\n" + padding + word
            space_left = target_width - len(word)
        else:
            wrapped += " " + word
            space_left -= 1 + len(word)
    return wrapped


def wrap(text: str, offset: int, wrap_at: int) -> str:
    """Wrap possibly multi-line ``text`` at ``wrap_at``, indenting continuations by ``offset``."""
    prefix = " " * offset
    return "\n".join(
        (prefix if number else "") + wrap_line(line, wrap_at, prefix)
        for number, line in enumerate(text.split("\n"))
    )


def _parse_width(text: str) -> int | None:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return max(int(text), MINIMUM_WIDTH)


def console_width() -> int:
    """Return the terminal width, from ``COLUMNS`` or ``tput cols``."""
    columns = os.environ.get("COLUMNS", "")
    if columns:
        width = _parse_width(columns)
        if width is not None:
            return width

    try:
        output = subprocess.run(
            ["tput", "cols"],
            stdin=sys.stdin,
            capture_output=True,
            check=True,
            text=True,
        ).stdout
    except (OSError, ValueError, subprocess.SubprocessError):
        return DEFAULT_WIDTH

    width = _parse_width(output)
    return DEFAULT_WIDTH if width is None else width


def _align_columns(text: str, minwidth: int = 1, padding: int = 2) -> str:
    """Align tab-separated cells of consecutive lines into space-padded columns."""
    lines = [line.split("\t") for line in text.split("\n")]
    widths: list[int] = []
    out: list[str] = []

    def emit(first: int, last: int) -> None:
        for cells in lines[first:last]:
            parts = []
            for column, cell in enumerate(cells):
                parts.append(cell)
                if column < len(widths):
                    parts.append(" " * (widths[column] - len(cell)))
            out.append("".join(parts))

    def layout(first: int, last: int) -> None:
        column = len(widths)
        current = first
        while current < last:
            if column >= len(lines[current]) - 1:
                current += 1
                continue
            emit(first, current)
            first = current
            width = minwidth
            while current < last and column < len(lines[current]) - 1:
                width = max(width, len(lines[current][column]) + padding)
                current += 1
            widths.append(width)
            layout(first, current)
            widths.pop()
            first = current
        emit(first, last)

    layout(0, len(lines))
    return "\n".join(out)


def format_help(app_name: str, flags: Iterable[Flag], width: int | None = None) -> str:
    """Render the help page for ``app_name`` with ``flags`` and the help flag."""
    if width is None:
        width = console_width()
    options = [*flags, HELP_FLAG]
    body = "\n   ".join(wrap(str(flag), 6, width) + "\n" for flag in options)
    text = (
        f"{HELP_TITLE}\n\n"
        f"USAGE:\n   {app_name} [options]\n\n"
        f"OPTIONS:\n   {body}"
    )
    return _align_columns(text)