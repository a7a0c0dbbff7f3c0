"""Errors with causal chains and call-site origins.

Every record carries a message, an optional cause and the file, line and
function where it was created. Chains render either as a full trace or as
a single summary line.

Basic Usage:
    >>> import errchain
    >>> def new_repository():
    ...     return errchain.new("could not connect to database")
    >>> def new_service():
    ...     return errchain.propagate(new_repository(), "could not create service")
    >>> err = new_service()
    >>> print(err)
    could not create service
     --- at app.py:4 (new_service) ---
    Caused by: could not connect to database
     --- at app.py:2 (new_repository) ---
    >>> print(f"{err:#}")
    could not create service: could not connect to database

Chain Walking:
    >>> errchain.cause(err)           # root cause
    >>> errchain.is_(err, sentinel)   # sentinel anywhere in the chain?
    >>> errchain.as_(err, OSError)    # first OSError in the chain, or None

Configuration:
    >>> from errchain import config, ErrchainSettings
    >>> config.configure(ErrchainSettings.from_env())
"""

__version__ = "1.0.0"

from errchain.types import (
    # Enums
    FormatType,
    # Data models
    Origin,
    ErrchainSettings,
    # Chain capabilities
    Causable,
    Matchable,
    AsTargetable,
    # Exceptions
    ErrchainError,
    InvalidConfigError,
)

# Configuration
from errchain import config
from errchain.config import configure, reset

# Core
from errchain.core import (
    Error,
    as_,
    capture_origin,
    cause,
    create,
    format_full,
    format_short,
    is_,
    iter_chain,
    make_path_stripper,
    new,
    propagate,
    render,
    unwrap,
)

__all__ = [
    # Version
    "__version__",
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
    # Formatting
    "FormatType",
    "render",
    "format_full",
    "format_short",
    # Data models
    "Origin",
    "ErrchainSettings",
    # Chain capabilities
    "Causable",
    "Matchable",
    "AsTargetable",
    # Configuration
    "config",
    "configure",
    "reset",
    # Capture
    "capture_origin",
    # Paths
    "make_path_stripper",
    # Exceptions
    "ErrchainError",
    "InvalidConfigError",
]
