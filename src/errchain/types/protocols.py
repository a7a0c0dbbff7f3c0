"""errchain Types - Chain Capabilities.

Foreign error types take part in ``unwrap``, ``is_`` and ``as_`` by
implementing any of these methods. None of them needs to inherit from
anything; the walkers look the methods up at call time.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Causable(Protocol):
    """Error that exposes the error it wraps."""

    def unwrap(self) -> Optional[BaseException]:
        ...


@runtime_checkable
class Matchable(Protocol):
    """Error that decides for itself whether it is equivalent to a target."""

    def matches(self, target: Any) -> bool:
        ...


@runtime_checkable
class AsTargetable(Protocol):
    """Error that can present itself as another type.

    ``as_target`` returns the converted value, or None when the
    conversion does not apply.
    """

    def as_target(self, target_type: type) -> Optional[Any]:
        ...
