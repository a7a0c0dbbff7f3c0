"""errchain Configuration.

Process-wide defaults read by the constructors and formatters:

    DEFAULT_FORMAT  mode used by str(err) and render(err) without a mode
    strip_path      function applied to every captured file path

Both are plain module attributes and may be reassigned directly. Set them
once at startup, before errors are created from several threads:

    >>> from errchain import config, FormatType
    >>> config.DEFAULT_FORMAT = FormatType.SHORT
    >>> config.strip_path = lambda p: p.rsplit("/", 1)[-1]

Or apply a settings object:

    >>> config.configure(ErrchainSettings.from_env())

Passing a mode explicitly (render(err, FormatType.SHORT), f"{err:#}") is
preferred over changing the global default.
"""

from __future__ import annotations

import logging
from typing import Optional

from errchain.core.paths import PathStripper, default_strip_path, make_path_stripper
from errchain.types import ErrchainSettings, FormatType, FormatTypeLike

logger = logging.getLogger(__name__)

DEFAULT_FORMAT: FormatType = FormatType.FULL

strip_path: PathStripper = default_strip_path


def configure(
    settings: Optional[ErrchainSettings] = None,
    *,
    default_format: Optional[FormatTypeLike] = None,
    strip: Optional[PathStripper] = None,
) -> None:
    """Apply settings to the process-wide defaults.

    Args:
        settings: Settings object (format and strip roots)
        default_format: Override for the default format
        strip: Custom path stripper, takes precedence over strip roots
    """
    global DEFAULT_FORMAT, strip_path

    if settings is not None:
        DEFAULT_FORMAT = settings.default_format
        strip_path = make_path_stripper(settings.strip_roots)
    if default_format is not None:
        DEFAULT_FORMAT = FormatType.parse(default_format)
    if strip is not None:
        strip_path = strip

    logger.debug("errchain configured: default_format=%s", DEFAULT_FORMAT.value)


def reset() -> None:
    """Restore the built-in defaults."""
    global DEFAULT_FORMAT, strip_path

    DEFAULT_FORMAT = FormatType.FULL
    strip_path = default_strip_path
