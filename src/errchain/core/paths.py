"""Source path normalization.

Captured file paths are absolute. Stripping a known source root keeps the
rendered output stable across machines and checkouts.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, Iterable, Optional

from errchain.types import STRIP_ROOTS_ENV_VAR

PathStripper = Callable[[str], str]


def _normalize_root(root: str) -> str:
    root = os.path.normpath(os.path.abspath(root))
    return root.rstrip(os.sep) or os.sep


def default_strip_roots() -> list[str]:
    """Return ERRCHAIN_STRIP_ROOTS if set, else the entries of sys.path."""
    env_roots = os.environ.get(STRIP_ROOTS_ENV_VAR)
    if env_roots:
        return [r for r in env_roots.split(os.pathsep) if r]
    return [p for p in sys.path if p]


def strip_roots(path: str, roots: Iterable[str]) -> str:
    """Remove the longest root in ``roots`` that contains ``path``.

    Example:
        >>> strip_roots("/srv/app/src/pkg/mod.py", ["/srv/app", "/srv/app/src"])
        'pkg/mod.py'
    """
    normalized = sorted({_normalize_root(r) for r in roots}, key=len, reverse=True)
    for root in normalized:
        prefix = root if root.endswith(os.sep) else root + os.sep
        if path.startswith(prefix) and len(path) > len(prefix):
            return path[len(prefix):]
    return path


def make_path_stripper(roots: Optional[Iterable[str]] = None) -> PathStripper:
    """Build a stripper bound to a fixed list of roots.

    Args:
        roots: Source roots; None re-reads ``default_strip_roots()`` on
            every call

    Returns:
        Function mapping an absolute path to its root-relative form
    """
    if roots is None:
        return default_strip_path

    fixed = list(roots)

    def _strip(path: str) -> str:
        return strip_roots(path, fixed)

    return _strip


def default_strip_path(path: str) -> str:
    """Strip the longest matching default root from ``path``."""
    return strip_roots(path, default_strip_roots())
