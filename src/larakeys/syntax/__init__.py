"""Translation file syntax package.

Provides the PHP array literal parser, declaration lookup, source position
helpers and call-site key extraction. Has no file-system access; the
runtime package feeds it source text.

Python 3.13+.
"""

from larakeys.localization.types import TranslationMapping

from .locator import find_key_position
from .parser import PhpArrayParser, parse_php_array, unescape_php_string
from .position import SourcePosition, column_offset, line_offset, position_at
from .references import (
    KeyReference,
    extract_translation_key,
    find_translation_key_at,
    iter_key_references,
)

__all__ = [
    "KeyReference",
    "PhpArrayParser",
    "SourcePosition",
    "column_offset",
    "extract_translation_key",
    "find_key_position",
    "find_translation_key_at",
    "iter_key_references",
    "line_offset",
    "parse",
    "parse_php_array",
    "position_at",
    "unescape_php_string",
]


def parse(source: str) -> TranslationMapping:
    """Parse translation file source into a nested mapping.

    Alias of parse_php_array() with default limits.

    Example:
        >>> from larakeys.syntax import parse
        >>> parse("<?php return ['failed' => 'Invalid credentials.'];")
        {'failed': 'Invalid credentials.'}
    """
    return PhpArrayParser().parse(source)
