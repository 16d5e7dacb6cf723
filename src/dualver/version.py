# SPDX-License-Identifier: MIT
"""The Version value type and its two constructors, ``parse`` and ``declare``."""

from __future__ import annotations

import dataclasses
import operator
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from . import render
from .components import extract_components
from .config import ParserConfig, get_config
from .errors import MalformedVersionLiteral, UnsupportedCoercion
from .literal import Literal, LiteralKind, TextLiteral, as_literal, classify

# Conservative subsets of the two grammars
STRICT_DECIMAL_PATTERN = re.compile(r"(?:0|[1-9][0-9]*)(?:\.[0-9]+)?")
STRICT_DOTTED_PATTERN = re.compile(r"v(?:0|[1-9][0-9]*)(?:\.[0-9]{1,3}){2,}")


def _ordering(op: Callable[[int, int], bool]) -> Callable[["Version", Any], bool]:
    def method(self: "Version", other: Any) -> bool:
        from .compare import compare_versions

        return op(compare_versions(self, other), 0)

    method.__name__ = f"__{op.__name__}__"
    return method


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A version number, whether written as a decimal or as a dotted identifier.

    Attributes:
        components: Integer components, most significant first (never empty)
        qv: True if the version is a dotted-decimal identifier
        alpha: True if the source literal carried an alpha marker (``_``)
        original_literal: Text the version was parsed from, kept only for
            ``stringify``; ignored by comparison and hashing

    Comparison is structural: trailing zero components are insignificant and
    an alpha version sorts just below the same components without the marker.
    """

    components: tuple[int, ...]
    qv: bool = False
    alpha: bool = False
    original_literal: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        components = tuple(self.components)
        if not components:
            raise ValueError("Version must have at least one component")
        for part in components:
            if isinstance(part, bool) or not isinstance(part, int) or part < 0:
                raise ValueError(f"Version components must be non-negative integers, got {part!r}")
        object.__setattr__(self, "components", components)

    @classmethod
    def parse(cls, literal: Any, config: Optional[ParserConfig] = None) -> "Version":
        """Alias of the module-level ``parse``."""
        return parse(literal, config=config)

    @classmethod
    def declare(cls, literal: Any, config: Optional[ParserConfig] = None) -> "Version":
        """Alias of the module-level ``declare``."""
        return declare(literal, config=config)

    def is_alpha(self) -> bool:
        return self.alpha

    def is_qv(self) -> bool:
        return self.qv

    def normal(self) -> str:
        return render.normal(self)

    def numify(self) -> str:
        return render.numify(self)

    def stringify(self) -> str:
        return render.stringify(self)

    def __str__(self) -> str:
        return render.stringify(self)

    def __hash__(self) -> int:
        from .compare import version_key

        return hash(version_key(self))

    def __eq__(self, other: Any) -> bool:
        from .compare import compare_versions

        try:
            return compare_versions(self, other) == 0
        except UnsupportedCoercion:
            return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __lt__ = _ordering(operator.lt)
    __le__ = _ordering(operator.le)
    __gt__ = _ordering(operator.gt)
    __ge__ = _ordering(operator.ge)


def _to_literal(value: Any) -> Literal:
    try:
        return as_literal(value)
    except UnsupportedCoercion as exc:
        raise MalformedVersionLiteral(
            repr(value), f"Version must be a string or a number, got {type(value).__name__}"
        ) from exc


def _build(value: Any, config: Optional[ParserConfig], force_qv: bool) -> Version:
    config = config or get_config()
    classification = classify(_to_literal(value), config)
    components = extract_components(classification, config)
    qv = force_qv or classification.kind is LiteralKind.DIRECT_DOTTED
    return Version(
        components=components,
        qv=qv,
        alpha=classification.is_alpha,
        original_literal=classification.text,
    )


def parse(literal: Any, config: Optional[ParserConfig] = None) -> Version:
    """Parse a decimal or dotted-decimal version literal.

    A literal with a leading ``v`` or with two or more dots is dotted;
    anything else is a decimal whose fraction is read in 3-digit groups.

    Args:
        literal: A string, an int, a float or a Decimal
        config: Parser options; defaults to the process-wide configuration

    Returns:
        The parsed Version

    Raises:
        MalformedVersionLiteral: If the literal matches neither grammar

    Examples:
        >>> parse("v1.2.3").components
        (1, 2, 3)
        >>> parse("1.0023").components
        (1, 2, 300)
        >>> parse(0.96).components
        (0, 960)
    """
    return _build(literal, config, force_qv=False)


def declare(literal: Any, config: Optional[ParserConfig] = None) -> Version:
    """Parse a literal and mark the result as a dotted-decimal identifier.

    Components are derived exactly as ``parse`` derives them; only the
    ``qv`` flag is forced. ``declare("1.2")`` is therefore ``v1.200.0``.

    Raises:
        MalformedVersionLiteral: If the literal matches neither grammar
    """
    return _build(literal, config, force_qv=True)


qv = declare


def coerce(value: Any, config: Optional[ParserConfig] = None) -> Version:
    """Return ``value`` as a Version, parsing it if it is not one already.

    Raises:
        UnsupportedCoercion: If the value is neither a Version nor a literal
        MalformedVersionLiteral: If the value is a literal but malformed
    """
    if isinstance(value, Version):
        return value
    return parse(as_literal(value), config=config)


def is_lax(literal: Any) -> bool:
    """Check whether ``parse`` accepts a literal.

    Examples:
        >>> is_lax("v1.2_3")
        True
        >>> is_lax("1.2.")
        False
    """
    config = dataclasses.replace(get_config(), warn_single_component=False)
    try:
        parse(literal, config=config)
    except (MalformedVersionLiteral, UnsupportedCoercion):
        return False
    return True


def is_strict(literal: Any) -> bool:
    """Check whether a literal is in the conservative form recommended to authors.

    Strict decimals have no leading zeros and no alpha marker (``1.002003``);
    strict dotted versions have a leading ``v``, at least three components,
    at most three digits in every component after the first, and no alpha
    marker (``v1.2.3``).

    Examples:
        >>> is_strict("v1.2.3")
        True
        >>> is_strict("1.2.3")
        False
    """
    try:
        lit = as_literal(literal)
        text = lit.text
    except (MalformedVersionLiteral, UnsupportedCoercion):
        return False
    if isinstance(lit, TextLiteral) and get_config().strip_whitespace:
        text = text.strip()
    return bool(STRICT_DECIMAL_PATTERN.fullmatch(text) or STRICT_DOTTED_PATTERN.fullmatch(text))
