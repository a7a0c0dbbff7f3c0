"""errchain Types - Shared type definitions.

Package Structure:
    - config.py: FormatType enum and ErrchainSettings
    - origin.py: Origin (captured call site)
    - protocols.py: Chain capabilities for foreign errors
    - exceptions.py: Library failures (ErrchainError and subclasses)

Usage:
    >>> from errchain.types import FormatType, ErrchainSettings, Origin
    >>> from errchain.types import ErrchainError, InvalidConfigError
"""

# Configuration
from .config import (
    FormatType,
    FormatTypeLike,
    ErrchainSettings,
    FORMAT_ENV_VAR,
    STRIP_ROOTS_ENV_VAR,
)

# Data models
from .origin import Origin

# Chain capabilities
from .protocols import (
    Causable,
    Matchable,
    AsTargetable,
)

# Exceptions
from .exceptions import (
    ErrchainError,
    InvalidConfigError,
)

__all__ = [
    # Configuration
    "FormatType",
    "FormatTypeLike",
    "ErrchainSettings",
    "FORMAT_ENV_VAR",
    "STRIP_ROOTS_ENV_VAR",
    # Data models
    "Origin",
    # Chain capabilities
    "Causable",
    "Matchable",
    "AsTargetable",
    # Exceptions
    "ErrchainError",
    "InvalidConfigError",
]
