# SPDX-License-Identifier: MIT
"""Component extraction and the decimal grouping transform.

Decimal versions are read three fractional digits at a time, right-padding
with zeros, so that every decimal has an equivalent dotted form:

    1.2      -> 200    -> (1, 200)
    1.02     -> 020    -> (1, 20)
    1.002    -> 002    -> (1, 2)
    1.0023   -> 002300 -> (1, 2, 300)
    1.002003 -> 002003 -> (1, 2, 3)

``ungroup`` is the inverse used when rendering a version as a decimal.
"""

from __future__ import annotations

import sys
import warnings
from typing import Optional, Sequence

from .config import ParserConfig, get_config
from .errors import SingleComponentVersionWarning
from .literal import ALPHA_MARKER, SEPARATOR, Classification, LiteralKind, SEGMENT_SPLIT

GROUP_WIDTH = 3


def group_fraction(fraction: str) -> list[int]:
    """Split a run of fractional digits into 3-digit integer groups.

    The run is right-padded with ``0`` to a multiple of three first.

    Examples:
        >>> group_fraction("0023")
        [2, 300]
        >>> group_fraction("")
        []
    """
    remainder = len(fraction) % GROUP_WIDTH
    if remainder:
        fraction += "0" * (GROUP_WIDTH - remainder)
    return [
        int(fraction[i : i + GROUP_WIDTH]) for i in range(0, len(fraction), GROUP_WIDTH)
    ]


def ungroup(components: Sequence[int]) -> str:
    """Render components as a decimal number, the inverse of ``group_fraction``.

    Trailing fractional zeros are stripped; an empty fraction is dropped
    together with its ``.``.

    Examples:
        >>> ungroup([1, 2, 300])
        '1.0023'
        >>> ungroup([5, 0])
        '5'
    """
    head, *rest = components
    fraction = "".join(f"{part:03d}" for part in rest).rstrip("0")
    if not fraction:
        return str(head)
    return f"{head}{SEPARATOR}{fraction}"


def _extract_dotted(classification: Classification) -> list[int]:
    return [int(segment) for segment in SEGMENT_SPLIT.split(classification.body)]


def _extract_decimal(classification: Classification) -> list[int]:
    integer, _, fraction = classification.body.partition(SEPARATOR)
    return [int(integer), *group_fraction(fraction.replace(ALPHA_MARKER, ""))]


def _caller_stacklevel() -> int:
    """Return the ``stacklevel`` of the first frame outside this package.

    Counted from the function that calls this helper, which is level 1.
    """
    level = 1
    frame = sys._getframe(1)
    while frame is not None and frame.f_globals.get("__name__", "").partition(".")[0] == __package__:
        frame = frame.f_back
        level += 1
    return level


def extract_components(
    classification: Classification, config: Optional[ParserConfig] = None
) -> tuple[int, ...]:
    """Produce the ordered integer components of a classified literal.

    Args:
        classification: Output of ``classify``
        config: Parser options; defaults to the process-wide configuration

    Returns:
        Components, most significant first. Never empty.
    """
    config = config or get_config()
    if classification.kind is LiteralKind.DIRECT_DOTTED:
        components = _extract_dotted(classification)
        if len(components) == 1 and config.warn_single_component:
            warnings.warn(
                f"Dotted version {classification.text!r} has a single component; "
                f"write it as v{components[0]}.0.0",
                SingleComponentVersionWarning,
                stacklevel=_caller_stacklevel(),
            )
    else:
        components = _extract_decimal(classification)
    return tuple(components)
