"""Core: error record, capture, walkers and formatters."""

from errchain.core.paths import (
    PathStripper,
    default_strip_path,
    default_strip_roots,
    make_path_stripper,
    strip_roots,
)
from errchain.core.capture import (
    capture_origin,
    simplify_function_name,
)
from errchain.core.error import (
    Error,
    create,
    new,
    propagate,
)
from errchain.core.walk import (
    as_,
    cause,
    is_,
    iter_chain,
    unwrap,
)
from errchain.core.format import (
    format_full,
    format_short,
    render,
    split_format_spec,
)

__all__ = [
    # Record and constructors
    "Error",
    "new",
    "propagate",
    "create",
    # Walkers
    "unwrap",
    "cause",
    "is_",
    "as_",
    "iter_chain",
    # Formatters
    "format_full",
    "format_short",
    "render",
    "split_format_spec",
    # Capture
    "capture_origin",
    "simplify_function_name",
    # Paths
    "PathStripper",
    "default_strip_path",
    "default_strip_roots",
    "make_path_stripper",
    "strip_roots",
]
