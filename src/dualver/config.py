# SPDX-License-Identifier: MIT
"""Parser configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class ParserConfig:
    """Options that influence how literals are read.

    Attributes:
        warn_single_component: Issue a SingleComponentVersionWarning for dotted
            literals with a single component, such as ``v7``
        strip_whitespace: Strip surrounding whitespace from text literals
            before classifying them
    """

    warn_single_component: bool = True
    strip_whitespace: bool = True

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables."""
        return cls(
            warn_single_component=_env_flag("DUALVER_WARN_SINGLE_COMPONENT", True),
            strip_whitespace=_env_flag("DUALVER_STRIP_WHITESPACE", True),
        )


_config: Optional[ParserConfig] = None


def get_config() -> ParserConfig:
    """Return the process-wide default configuration.

    Built from the environment the first time it is requested.
    """
    global _config
    if _config is None:
        _config = ParserConfig.from_env()
    return _config


def set_config(config: Optional[ParserConfig]) -> None:
    """Replace the process-wide default. ``None`` re-reads the environment on next use."""
    global _config
    _config = config
