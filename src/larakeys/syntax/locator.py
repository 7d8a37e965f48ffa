"""Best-effort declaration lookup for translation keys.

Only the terminal segment of a dotted path is searched for, wrapped in any
of the PHP quote styles. The earliest occurrence in the file wins, which
may be a same-named key at another nesting depth. The result only steers
cursor placement; the resolved value never depends on it.

Python 3.13+.
"""

from __future__ import annotations

import re

from larakeys.constants import QUOTE_CHARS
from larakeys.localization.types import PhpSource
from larakeys.syntax.position import SourcePosition, position_at

__all__ = ["find_key_position"]


def find_key_position(source: PhpSource, path: str) -> SourcePosition | None:
    """Find where the terminal key of a dotted path is declared.

    Args:
        source: Full PHP source text
        path: Dotted lookup path inside the file (e.g., 'exceptions.graphql')

    Returns:
        Position of the opening quote of the first match, or None

    Example:
        >>> find_key_position("<?php\\nreturn [\\n    'failed' => 'x',\\n];", "failed")
        SourcePosition(line=2, column=4)
    """
    terminal = path.rsplit(".", 1)[-1]
    if not terminal:
        return None
    quotes = "".join(QUOTE_CHARS)
    pattern = re.compile(rf"([{re.escape(quotes)}]){re.escape(terminal)}\1")
    match = pattern.search(source)
    if match is None:
        return None
    return position_at(source, match.start())
