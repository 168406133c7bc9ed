"""Attach context to errors raised while serving a request."""

from __future__ import annotations


class AnnotatedError(Exception):
    """An error wrapped with a prefix and, optionally, the reason its request ended."""

    def __init__(
        self,
        prefix: str,
        error: BaseException,
        reason: BaseException | None = None,
    ) -> None:
        self.prefix = prefix
        self.error = error
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        message = f"{self.prefix}: {self.error}"
        if self.reason is None:
            return message
        return f"{message} ({self.reason})"


def annotate_error(
    prefix: str,
    err: BaseException,
    cancelled_reason: BaseException | None = None,
) -> AnnotatedError:
    """Wrap ``err`` with ``prefix``.

    If the request was cancelled or timed out, ``cancelled_reason`` names why
    and is added to the message.
    """
    annotated = AnnotatedError(prefix, err, cancelled_reason)
    annotated.__cause__ = err
    return annotated