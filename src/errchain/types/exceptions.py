"""errchain Types - Exception Classes.

Failures raised by the library itself. Error chains built by users are
``errchain.Error`` records, not these.
"""

from __future__ import annotations


class ErrchainError(Exception):
    """Base exception for all errchain failures."""
    pass


class InvalidConfigError(ErrchainError, ValueError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")
