"""Chain walkers.

A chain is followed link by link with ``unwrap``:

- Error records unwrap to their cause.
- Foreign objects with an ``unwrap()`` method unwrap through it.
- Foreign exceptions raised with ``raise X from Y`` unwrap to ``Y``.

Foreign errors can also take part in ``is_`` and ``as_`` by implementing
``matches(target)`` and ``as_target(target_type)`` (see
``errchain.types.protocols``).
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, TypeVar

from .error import Error

logger = logging.getLogger(__name__)

T = TypeVar("T")


def unwrap(err: Any) -> Optional[Any]:
    """Return the error directly wrapped by ``err``, or None."""
    if isinstance(err, Error):
        return err.cause

    unwrap_fn = getattr(err, "unwrap", None)
    if callable(unwrap_fn):
        return unwrap_fn()

    if isinstance(err, BaseException):
        return err.__cause__

    return None


def cause(err: Any) -> Any:
    """Return the root cause of ``err``.

    Only Error links are followed; the first foreign error (or an Error
    without a cause) is the result.
    """
    while isinstance(err, Error) and err.cause is not None:
        err = err.cause
    return err


def iter_chain(err: Any) -> Iterator[Any]:
    """Yield ``err`` and every error reachable from it through ``unwrap``.

    Each link is yielded once; a cycle (``__cause__`` is reassignable) ends
    the walk.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def is_(err: Any, target: Any) -> bool:
    """Report whether ``target`` appears anywhere in the chain of ``err``.

    A None target matches only a None error. Each link is compared with
    ``==`` and, when it implements ``matches``, asked whether it matches
    the target.
    """
    if target is None:
        return err is None

    for link in iter_chain(err):
        if link is target or link == target:
            return True

        matches = getattr(link, "matches", None)
        if callable(matches) and matches(target):
            return True

    return False


def _is_valid_target(target_type: Any) -> bool:
    if not isinstance(target_type, type):
        return False
    if issubclass(target_type, BaseException):
        return True
    # Interfaces: ABCs and runtime-checkable Protocols. Plain Protocols
    # reject isinstance() with TypeError.
    try:
        isinstance(None, target_type)
    except TypeError:
        return False
    return getattr(target_type, "__abstractmethods__", None) is not None or getattr(
        target_type, "_is_protocol", False
    )


def as_(err: Any, target_type: type[T]) -> Optional[T]:
    """Return the first link in the chain of ``err`` that is a ``target_type``.

    ``target_type`` must be an exception class or an interface (ABC or
    runtime-checkable Protocol); any other target returns None without
    walking the chain. A link implementing ``as_target`` may answer for
    itself.

    Example:
        >>> path_error = as_(err, FileNotFoundError)
        >>> if path_error is not None:
        ...     print(path_error.filename)
    """
    if not _is_valid_target(target_type):
        logger.debug("as_ called with invalid target %r", target_type)
        return None

    for link in iter_chain(err):
        if isinstance(link, target_type):
            return link

        as_target = getattr(link, "as_target", None)
        if callable(as_target):
            converted = as_target(target_type)
            if converted is not None:
                return converted

    return None
