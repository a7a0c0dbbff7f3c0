"""Rendering of error chains.

Two modes (see ``FormatType``):

FULL::

    could not create service
     --- at app/service.py:12 (new_service) ---
    Caused by: could not connect to database
     --- at app/db.py:40 (Repository.connect) ---

SHORT::

    could not create service: could not connect to database

Format specs select a mode per call: ``f"{err:+}"`` is FULL and
``f"{err:#}"`` is SHORT. The remainder of the spec (fill, alignment,
width, precision) applies to the rendered text.
"""

from __future__ import annotations

from typing import Optional

from errchain import config
from errchain.types import FormatType, FormatTypeLike

from .error import Error

_FLAGS = {"+": FormatType.FULL, "#": FormatType.SHORT}
_ALIGN = "<>^="


def split_format_spec(format_spec: str) -> tuple[Optional[FormatType], str]:
    """Split leading mode flags off ``format_spec``.

    A flag character directly followed by an alignment character is a fill
    character and is left in place ("#>40" pads with "#"). Both flags
    together ("+#", "#+") cancel out and the default mode applies.
    """
    mode: Optional[FormatType] = None
    flags = ""
    while (
        format_spec
        and format_spec[0] in _FLAGS
        and format_spec[0] not in flags
        and not (len(format_spec) > 1 and format_spec[1] in _ALIGN)
    ):
        flags += format_spec[0]
        format_spec = format_spec[1:]

    if len(flags) == 1:
        mode = _FLAGS[flags]
    return mode, format_spec


def format_full(err: Error) -> str:
    """Render every link with its origin, joined by "Caused by: "."""
    s = ""

    def newline() -> str:
        if s != "" and not s.endswith("\n"):
            return "\n"
        return ""

    curr: Optional[Error] = err
    while curr is not None:
        s += curr.message

        origin = curr.origin
        if origin.file:
            s += newline()
            if origin.function:
                s += f" --- at {origin.file}:{origin.line} ({origin.function}) ---"
            else:
                s += f" --- at {origin.file}:{origin.line} ---"

        nxt = curr.cause
        if nxt is not None:
            s += newline()
            if not isinstance(nxt, Error):
                s += "Caused by: " + str(nxt)
            elif nxt.message != "":
                s += "Caused by: "

        curr = nxt if isinstance(nxt, Error) else None

    return s


def format_short(err: Error) -> str:
    """Join all messages with ": ", skipping empty ones."""
    parts: list[str] = []

    curr = err
    while True:
        if curr.message:
            parts.append(curr.message)
        if isinstance(curr.cause, Error):
            curr = curr.cause
        else:
            break

    if curr.cause is not None:
        text = str(curr.cause)
        if text:
            parts.append(text)

    return ": ".join(parts)


def render(err: Error, mode: Optional[FormatTypeLike] = None) -> str:
    """Render ``err`` in ``mode``, or in ``config.DEFAULT_FORMAT``."""
    if mode is None:
        mode = config.DEFAULT_FORMAT
    if FormatType.parse(mode) is FormatType.FULL:
        return format_full(err)
    return format_short(err)
