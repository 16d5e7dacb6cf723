# SPDX-License-Identifier: MIT
"""Textual renderings of a Version.

- ``normal``: canonical dotted form, at least three components (``v1.2.0``)
- ``numify``: canonical decimal form (``1.002``)
- ``stringify``: the source literal when it still describes the value,
  otherwise ``normal`` for dotted versions and ``numify`` for decimals
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .components import extract_components, ungroup
from .config import ParserConfig
from .errors import MalformedVersionLiteral
from .literal import ALPHA_MARKER, SEPARATOR, LiteralKind, TextLiteral, classify

if TYPE_CHECKING:
    from .version import Version

log = logging.getLogger(__name__)

NORMAL_MIN_COMPONENTS = 3

# Re-reading the source literal must not warn a second time
_REPARSE_CONFIG = ParserConfig(warn_single_component=False, strip_whitespace=True)


def normal(version: "Version") -> str:
    """Render as ``v`` plus dotted components, padded to three.

    An alpha marker replaces the last ``.``. Placing it there keeps the
    output re-parseable even when padding components were appended.

    Examples:
        >>> from dualver import parse
        >>> normal(parse("1.002003"))
        'v1.2.3'
        >>> normal(parse("1.2"))
        'v1.200.0'
        >>> normal(parse("1.002_03"))
        'v1.2_30'
    """
    parts = [str(part) for part in version.components]
    parts.extend(["0"] * (NORMAL_MIN_COMPONENTS - len(parts)))
    if version.alpha:
        return "v" + SEPARATOR.join(parts[:-1]) + ALPHA_MARKER + parts[-1]
    return "v" + SEPARATOR.join(parts)


def numify(version: "Version") -> str:
    """Render as a decimal number, zero-padding every component after the first.

    The alpha marker is not part of the decimal value and is not rendered.

    Examples:
        >>> from dualver import parse
        >>> numify(parse("v1.2.3"))
        '1.002003'
        >>> numify(parse("v1.2.300"))
        '1.0023'
    """
    return ungroup(version.components)


def _source_text(version: "Version") -> Optional[str]:
    text = version.original_literal
    if not text:
        return None
    try:
        classification = classify(TextLiteral(text), _REPARSE_CONFIG)
        components = extract_components(classification, _REPARSE_CONFIG)
    except MalformedVersionLiteral:
        return None
    qv = classification.kind is LiteralKind.DIRECT_DOTTED
    if (
        components != version.components
        or classification.is_alpha != version.alpha
        or qv != version.qv
    ):
        return None
    if classification.has_v:
        return "v" + classification.body
    return classification.text


def stringify(version: "Version") -> str:
    """Render as close to the source literal as the value allows.

    Examples:
        >>> from dualver import parse, declare
        >>> stringify(parse("V1.2"))
        'v1.2'
        >>> stringify(declare("1.2"))
        'v1.200.0'
    """
    text = _source_text(version)
    if text is not None:
        return text
    log.debug("no usable source literal for %r, rendering canonically", version)
    return normal(version) if version.qv else numify(version)
