"""Build-engine literal escaping.

Characters with special meaning in build scripts (item separators,
wildcards, property and item references) are written as ``%XX`` with the
two-digit uppercase hex code, so a string survives as a literal value.
"""

from __future__ import annotations

import re

from itemctl.domain.itemset import require_text

SPECIAL_CHARACTERS = "%*?@$();'"

_ESCAPES: dict[str, str] = {ch: f"%{ord(ch):02X}" for ch in SPECIAL_CHARACTERS}
_ESCAPED = re.compile(r"%([0-9A-Fa-f]{2})")


def escape(in_string: str | None) -> str:
    """Escape every special character in *in_string*.

    Examples:
        >>> escape("hello how;are *you")
        'hello how%3Bare %2Ayou'
    """
    text = require_text(in_string, "in_string")
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape(in_string: str | None) -> str:
    """Decode ``%XX`` sequences produced by :func:`escape`."""
    text = require_text(in_string, "in_string")
    return _ESCAPED.sub(lambda m: chr(int(m.group(1), 16)), text)
