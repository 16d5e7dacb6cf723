# SPDX-License-Identifier: MIT
"""Version ordering.

Components are compared pairwise, the shorter sequence padded with zeros.
When all components are equal an alpha version is less than a non-alpha one.

Operands that are not Versions are parsed first, which is why a dotted
version can compare surprisingly against a decimal:

    v0.95.0 < 0.96    because 0.96 is (0, 960), not (0, 96)
"""

from __future__ import annotations

import enum
from typing import Any, Sequence, Union

from .version import Version, coerce


class Ordering(enum.IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _trimmed(components: Sequence[int]) -> tuple[int, ...]:
    end = len(components)
    while end > 1 and components[end - 1] == 0:
        end -= 1
    return tuple(components[:end])


def compare_components(
    left: Sequence[int], left_alpha: bool, right: Sequence[int], right_alpha: bool
) -> Ordering:
    """Three-way comparison of two component sequences and their alpha flags."""
    width = max(len(left), len(right))
    for index in range(width):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a != b:
            return Ordering.LESS if a < b else Ordering.GREATER
    if left_alpha != right_alpha:
        return Ordering.LESS if left_alpha else Ordering.GREATER
    return Ordering.EQUAL


def compare_versions(
    version1: Union[Version, str, int, float, Any], version2: Union[Version, str, int, float, Any]
) -> Ordering:
    """Compare two versions.

    Args:
        version1: First version (Version object or literal)
        version2: Second version (Version object or literal)

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER, which compare equal
        to -1, 0 and 1

    Raises:
        UnsupportedCoercion: If an operand is neither a Version nor a literal
        MalformedVersionLiteral: If a literal operand does not parse

    Examples:
        >>> compare_versions("v1.2.3", "v1.2.3_0")
        <Ordering.GREATER: 1>
        >>> compare_versions("1.002003", "v1.2.3")
        <Ordering.EQUAL: 0>
        >>> compare_versions("v0.95.0", 0.96)
        <Ordering.LESS: -1>
    """
    v1 = coerce(version1)
    v2 = coerce(version2)
    return compare_components(v1.components, v1.alpha, v2.components, v2.alpha)


def version_key(version: Union[Version, str, int, float, Any]) -> tuple:
    """Return a sort key consistent with ``compare_versions``.

    Trailing zero components are dropped, so (1, 2) and (1, 2, 0) share a key;
    the alpha flag comes last so an alpha version sorts first.

    Examples:
        >>> sorted(["v1.2.3", "1.002", "v1.2.3_0"], key=version_key)
        ['1.002', 'v1.2.3_0', 'v1.2.3']
    """
    v = coerce(version)
    return (_trimmed(v.components), 0 if v.alpha else 1)
