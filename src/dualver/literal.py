# SPDX-License-Identifier: MIT
"""Version literals and their classification.

A literal is either numeric (``1.002``, ``5``) or text (``"v1.2.3"``,
``"1.002_003"``). Both are reduced to text once and then classified into one
of two grammars:

- DIRECT_DOTTED: a leading ``v``, or two or more ``.`` separators. Each
  component is written out literally (``v1.2.3`` -> 1, 2, 3).
- DECIMAL_GROUPED: a plain number with at most one ``.``. The fractional
  digits are read in groups of three (``1.002003`` -> 1, 2, 3).

An ``_`` in the final segment marks an alpha (pre-release) version.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from .config import ParserConfig, get_config
from .errors import MalformedVersionLiteral, UnsupportedCoercion

log = logging.getLogger(__name__)

ALPHA_MARKER = "_"
SEPARATOR = "."

# Characters allowed after the optional leading "v"
_BODY_CHARS = re.compile(r"[0-9._]*")
SEGMENT_SPLIT = re.compile(r"[._]")


@dataclass(frozen=True, slots=True)
class NumericLiteral:
    """A version written as a native number, e.g. ``1.002`` or ``5``."""

    value: Union[int, float, Decimal]

    @property
    def text(self) -> str:
        return _number_to_text(self.value)


@dataclass(frozen=True, slots=True)
class TextLiteral:
    """A version written as a string, e.g. ``"v1.2.3"``."""

    value: str

    @property
    def text(self) -> str:
        return self.value


Literal = Union[NumericLiteral, TextLiteral]


class LiteralKind(enum.Enum):
    """Which grammar a literal is read with."""

    DIRECT_DOTTED = "dotted"
    DECIMAL_GROUPED = "decimal"


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying a literal.

    Attributes:
        kind: Grammar the body is read with
        text: Literal text after whitespace handling
        has_v: Whether the literal started with ``v`` or ``V``
        body: Digits and separators following the optional ``v``
        alpha_index: Position of the alpha marker within ``body``, if any
    """

    kind: LiteralKind
    text: str
    has_v: bool
    body: str
    alpha_index: Optional[int] = None

    @property
    def is_alpha(self) -> bool:
        return self.alpha_index is not None


def _number_to_text(value: Union[int, float, Decimal]) -> str:
    if isinstance(value, bool):
        raise UnsupportedCoercion(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedVersionLiteral(repr(value), f"Version number must be finite, got {value!r}")
        # repr() is the shortest text that round-trips, so 0.96 stays "0.96"
        text = repr(value)
        if "e" in text or "E" in text:
            text = format(Decimal(text), "f")
        return text
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise MalformedVersionLiteral(str(value), f"Version number must be finite, got {value}")
        return format(value, "f")
    raise UnsupportedCoercion(value)


def as_literal(value: object) -> Literal:
    """Lift a raw Python value into a version literal.

    Args:
        value: A string, an int, a float, a Decimal, or an existing literal

    Returns:
        A TextLiteral for strings, a NumericLiteral for numbers

    Raises:
        UnsupportedCoercion: If the value is not a string or a number
            (booleans are not numbers here)

    Examples:
        >>> as_literal("v1.2.3")
        TextLiteral(value='v1.2.3')
        >>> as_literal(1.002)
        NumericLiteral(value=1.002)
    """
    if isinstance(value, (NumericLiteral, TextLiteral)):
        return value
    if isinstance(value, str):
        return TextLiteral(value)
    if isinstance(value, bool):
        raise UnsupportedCoercion(value)
    if isinstance(value, (int, float, Decimal)):
        return NumericLiteral(value)
    raise UnsupportedCoercion(value)


def classify(literal: Literal, config: Optional[ParserConfig] = None) -> Classification:
    """Decide which grammar applies to a literal and validate its shape.

    Raises:
        MalformedVersionLiteral: If the literal matches neither grammar
    """
    config = config or get_config()
    text = literal.text
    if isinstance(literal, TextLiteral) and config.strip_whitespace:
        text = text.strip()

    if not text:
        raise MalformedVersionLiteral(text, "Version literal cannot be empty")

    has_v = text[0] in "vV"
    body = text[1:] if has_v else text

    if "v" in body or "V" in body:
        raise MalformedVersionLiteral(text, f"'v' is only allowed at the start of {text!r}")

    if not _BODY_CHARS.fullmatch(body):
        bad = next(ch for ch in body if not (ch.isascii() and (ch.isdigit() or ch in "._")))
        raise MalformedVersionLiteral(text, f"Unexpected character {bad!r} in {text!r}")

    if not any(ch.isdigit() for ch in body):
        raise MalformedVersionLiteral(text, f"No digits in {text!r}")

    if body.count(ALPHA_MARKER) > 1:
        raise MalformedVersionLiteral(text, f"More than one alpha marker in {text!r}")

    alpha_index: Optional[int] = None
    if ALPHA_MARKER in body:
        alpha_index = body.index(ALPHA_MARKER)
        last_dot = body.rfind(SEPARATOR)
        if last_dot < 0 or alpha_index < last_dot:
            raise MalformedVersionLiteral(
                text, f"Alpha marker must be in the final segment of {text!r}"
            )

    for segment in SEGMENT_SPLIT.split(body):
        if not segment:
            raise MalformedVersionLiteral(
                text, f"Separators must have digits on both sides in {text!r}"
            )

    if has_v or body.count(SEPARATOR) >= 2:
        kind = LiteralKind.DIRECT_DOTTED
    else:
        kind = LiteralKind.DECIMAL_GROUPED

    log.debug("classified %r as %s", text, kind.value)
    return Classification(
        kind=kind,
        text=text,
        has_v=has_v,
        body=body,
        alpha_index=alpha_index,
    )
