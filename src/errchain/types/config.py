"""errchain Types - Configuration.

This module defines the rendering mode enum and the settings object used to
configure the process-wide defaults in ``errchain.config``.

Settings can be built from a dict, from environment variables or from a
YAML file:

    ERRCHAIN_FORMAT        "full" or "short"
    ERRCHAIN_STRIP_ROOTS   source roots separated by os.pathsep
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .exceptions import InvalidConfigError

FORMAT_ENV_VAR = "ERRCHAIN_FORMAT"
STRIP_ROOTS_ENV_VAR = "ERRCHAIN_STRIP_ROOTS"


class FormatType(Enum):
    """Rendering mode for an error chain.

    Attributes:
        FULL: One block per link with its origin, joined by "Caused by: "
        SHORT: All messages on a single line, joined by ": "
    """
    FULL = "full"
    SHORT = "short"

    @classmethod
    def parse(cls, value: Union[str, FormatType]) -> FormatType:
        """Accept a member, its value or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise InvalidConfigError(
            f"unknown format {value!r}, expected one of "
            + ", ".join(m.value for m in cls)
        )


# Type alias
FormatTypeLike = Union[FormatType, str]


@dataclass
class ErrchainSettings:
    """Settings applied by ``errchain.config.configure``.

    Attributes:
        default_format: Mode used by str() and by render() without a mode
        strip_roots: Source roots removed from captured file paths
            (None = ERRCHAIN_STRIP_ROOTS or sys.path)

    Example:
        >>> settings = ErrchainSettings(
        ...     default_format=FormatType.SHORT,
        ...     strip_roots=["/srv/app/src"],
        ... )
    """
    default_format: FormatType = FormatType.FULL
    strip_roots: Optional[list[str]] = None

    def __post_init__(self) -> None:
        self.default_format = FormatType.parse(self.default_format)
        if self.strip_roots is not None:
            if isinstance(self.strip_roots, str):
                raise InvalidConfigError("strip_roots must be a list of paths, not a string")
            self.strip_roots = [str(root) for root in self.strip_roots]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "default_format": self.default_format.value,
            "strip_roots": list(self.strip_roots) if self.strip_roots is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> ErrchainSettings:
        """Create from dictionary."""
        data = data or {}
        if not isinstance(data, Mapping):
            raise InvalidConfigError(f"settings must be a mapping, got {type(data).__name__}")
        return cls(
            default_format=data.get("default_format", FormatType.FULL),
            strip_roots=data.get("strip_roots"),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ErrchainSettings:
        """Create from ERRCHAIN_* environment variables."""
        env = os.environ if environ is None else environ
        roots = env.get(STRIP_ROOTS_ENV_VAR)
        return cls(
            default_format=env.get(FORMAT_ENV_VAR) or FormatType.FULL,
            strip_roots=[r for r in roots.split(os.pathsep) if r] if roots else None,
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> ErrchainSettings:
        """Load settings from a YAML file.

        The file may hold the settings at the top level or under an
        ``errchain`` key.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if isinstance(data, Mapping) and "errchain" in data:
            data = data["errchain"]
        return cls.from_dict(data)
