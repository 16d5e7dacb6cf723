# SPDX-License-Identifier: MIT
"""Decimal and dotted-decimal version numbers as one comparable value.

A version may be written as a plain decimal (``1.002003``) or as a dotted
identifier (``v1.2.3``). Both parse to the same Version, compare with each
other, and render back in either form.

Example:
    >>> from dualver import parse, declare, compare_versions
    >>>
    >>> version = parse("1.002003")
    >>> version.components
    (1, 2, 3)
    >>> version.normal()
    'v1.2.3'
    >>> parse("v1.2.300").numify()
    '1.0023'
    >>>
    >>> declare("1.2").normal()
    'v1.200.0'
    >>>
    >>> compare_versions("v1.2.3_4", "v1.2.3.4")
    <Ordering.LESS: -1>
"""

__version__ = "0.1.0"

from typing import Any

from .errors import (
    VersionError,
    MalformedVersionLiteral,
    UnsupportedCoercion,
    SingleComponentVersionWarning,
)
from .config import (
    ParserConfig,
    get_config,
    set_config,
)
from .literal import (
    NumericLiteral,
    TextLiteral,
    LiteralKind,
    as_literal,
    classify,
)
from .components import (
    extract_components,
    group_fraction,
    ungroup,
)
from .version import (
    Version,
    parse,
    declare,
    qv,
    coerce,
    is_lax,
    is_strict,
)
from .compare import (
    Ordering,
    compare_versions,
    version_key,
)
from .render import (
    normal,
    numify,
    stringify,
)


def is_alpha(version: Any) -> bool:
    """Return True if ``version`` (a Version or a literal) carries an alpha marker."""
    return coerce(version).is_alpha()


def is_qv(version: Any) -> bool:
    """Return True if ``version`` (a Version or a literal) is a dotted-decimal identifier."""
    return coerce(version).is_qv()


__all__ = [
    # Errors
    "VersionError",
    "MalformedVersionLiteral",
    "UnsupportedCoercion",
    "SingleComponentVersionWarning",
    # Configuration
    "ParserConfig",
    "get_config",
    "set_config",
    # Literals
    "NumericLiteral",
    "TextLiteral",
    "LiteralKind",
    "as_literal",
    "classify",
    "extract_components",
    "group_fraction",
    "ungroup",
    # Version parsing
    "Version",
    "parse",
    "declare",
    "qv",
    "coerce",
    "is_lax",
    "is_strict",
    "is_alpha",
    "is_qv",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    # Rendering
    "normal",
    "numify",
    "stringify",
]
