"""Error record and constructors.

Usage:
    >>> from errchain import new, propagate
    >>> def load(path):
    ...     try:
    ...         return read(path)
    ...     except OSError as e:
    ...         raise propagate(e, "could not load %s", path)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from errchain.types import Origin

from .capture import capture_origin

logger = logging.getLogger(__name__)


def _format_message(message: str, args: tuple) -> str:
    # Same argument handling as logging.LogRecord.getMessage
    if not args:
        return str(message)
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return str(message) % args
    except (TypeError, ValueError, KeyError) as e:
        # Keep the record: a bad format must not lose the cause
        logger.debug("message %r does not match its arguments: %s", message, e)
        return f"{message} {args!r}"


class Error(Exception):
    """Error record: a message, an optional cause and the call site.

    Records are immutable. The cause may be another Error or any foreign
    exception; exception causes are also set as ``__cause__`` so Python
    tracebacks show the chain.

    When ``origin`` is omitted the caller of ``Error(...)`` is captured.
    Subclasses overriding ``__init__`` should pass ``origin`` (for example
    ``capture_origin(1)`` from their own ``__init__``'s caller).

    Attributes:
        message: Text for this link
        cause: Wrapped error (None for a root record)
        origin: Captured call site (empty if unavailable)
    """

    def __init__(
        self,
        message: str = "",
        cause: Optional[BaseException] = None,
        origin: Optional[Origin] = None,
    ):
        if origin is None:
            origin = capture_origin(1)
        super().__init__(message)
        self._message = message
        self._cause = cause
        self._origin = origin
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @property
    def origin(self) -> Origin:
        return self._origin

    @property
    def file(self) -> str:
        return self._origin.file

    @property
    def function(self) -> str:
        return self._origin.function

    @property
    def line(self) -> int:
        return self._origin.line

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped error, or None for a root record."""
        return self._cause

    def to_dict(self) -> dict:
        """Convert the chain to nested dictionaries (for structured logs)."""
        cause: Any = None
        if isinstance(self._cause, Error):
            cause = self._cause.to_dict()
        elif self._cause is not None:
            cause = {
                "type": type(self._cause).__name__,
                "message": str(self._cause),
            }
        return {
            "message": self._message,
            "origin": self._origin.to_dict(),
            "cause": cause,
        }

    def __str__(self) -> str:
        from .format import render

        return render(self)

    def __format__(self, format_spec: str) -> str:
        from .format import render, split_format_spec

        mode, rest = split_format_spec(format_spec)
        return format(render(self, mode), rest)

    def __repr__(self) -> str:
        parts = [repr(self._message)]
        if self._cause is not None:
            parts.append(f"cause={self._cause!r}")
        if self._origin:
            parts.append(f"origin={self._origin.location()!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


def create(cause: Optional[BaseException], message: str, *args: Any) -> Error:
    """Build a record wrapping ``cause`` (which may be None).

    The origin is the caller of ``create``.
    """
    return Error(_format_message(message, args), cause, capture_origin(1))


def new(message: str, *args: Any) -> Error:
    """Build a root record with no cause.

    ``args`` are merged into ``message`` with the % operator, as in logging.

    Example:
        >>> err = new("user %s not found", user_id)
    """
    return Error(_format_message(message, args), None, capture_origin(1))


def propagate(cause: Optional[BaseException], message: str, *args: Any) -> Optional[Error]:
    """Wrap ``cause`` with a new message, or return None when there is no cause.

    This lets a call site forward the result of a fallible call
    unconditionally:

        >>> return propagate(check_schema(doc), "invalid document %s", name)
    """
    if cause is None:
        return None

    return Error(_format_message(message, args), cause, capture_origin(1))
