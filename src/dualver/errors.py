# SPDX-License-Identifier: MIT
"""Exceptions and warnings raised while parsing and comparing versions."""

from __future__ import annotations

from typing import Any


class VersionError(Exception):
    """Base class for all dualver errors."""

    pass


class MalformedVersionLiteral(VersionError, ValueError):
    """Raised when a literal matches neither the decimal nor the dotted grammar."""

    def __init__(self, literal: str, message: str = ""):
        self.literal = literal
        self.message = message or f"Malformed version literal: {literal!r}"
        super().__init__(self.message)


class UnsupportedCoercion(VersionError, TypeError):
    """Raised when a value cannot be reduced to a version literal at all."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or (
            f"Cannot interpret {type(value).__name__} value {value!r} as a version"
        )
        super().__init__(self.message)


class SingleComponentVersionWarning(UserWarning):
    """Issued for a dotted literal that carries only one component (e.g. ``v7``)."""
