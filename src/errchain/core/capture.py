"""Call-site capture for error records."""

from __future__ import annotations

import inspect
import logging
from types import FrameType
from typing import Optional

from errchain import config
from errchain.types import Origin

logger = logging.getLogger(__name__)


def simplify_function_name(name: str, module: Optional[str] = None) -> str:
    """Reduce a qualified function name to "Class.method" or "function".

    - "pkg/mod.func" -> "func" (path and module prefix)
    - "outer.<locals>.inner" -> "outer.inner"
    - "(*Receiver).method" -> "Receiver.method"
    """
    name = name[name.rfind("/") + 1:]
    if module and name.startswith(module + "."):
        name = name[len(module) + 1:]
    name = name.replace("<locals>.", "")
    name = name.replace("(", "", 1)
    name = name.replace("*", "", 1)
    name = name.replace(")", "", 1)
    return name


def capture_origin(depth: int = 1) -> Origin:
    """Capture the call site ``depth`` frames above the caller.

    ``depth=0`` is the function calling ``capture_origin``, ``depth=1`` its
    caller, and so on. An empty Origin is returned when the frame cannot be
    resolved.
    """
    frame: Optional[FrameType] = inspect.currentframe()
    target = frame
    try:
        for _ in range(depth + 1):
            if target is None:
                break
            target = target.f_back

        if target is None:
            logger.debug("caller frame unavailable at depth %d, origin left empty", depth)
            return Origin()

        code = target.f_code
        qualname = getattr(code, "co_qualname", code.co_name)
        return Origin(
            file=config.strip_path(code.co_filename),
            function=simplify_function_name(qualname, target.f_globals.get("__name__")),
            line=target.f_lineno,
        )
    finally:
        del frame, target
