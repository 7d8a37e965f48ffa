"""PHP array literal parser for Laravel translation files.

Laravel translation files are a constrained subset of PHP: a single
``<?php return [...];`` statement whose values are quoted strings or nested
arrays. This module extracts that structure with two independent pattern
passes instead of a PHP grammar.

Algorithm:
    1. Strip the open tag, closing tags, a leading ``return`` and trailing
       statement terminators (line-anchored textual stripping).
    2. Strip one enclosing ``[`` ``]`` layer.
    3. Flat pass: every ``'key' => 'value'`` pair becomes a leaf.
    4. Nested pass: every ``'key' => [ ... ]`` is parsed recursively and
       overwrites a flat leaf with the same key.

Known limitations:
    The nested pass matches reluctantly up to the FIRST ``]``; bracket depth
    is not counted. A ``]`` inside a string value or a deeper nested array
    terminates the capture early. Leaves from deeper levels may also surface
    at the outer level through the flat pass. Both behaviours are kept as-is
    so results stay predictable.

    ``array(...)`` syntax, constants, concatenation, heredocs and comments
    are not understood.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re

from larakeys.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from larakeys.localization.types import PhpSource, TranslationMapping

__all__ = ["PhpArrayParser", "parse_php_array", "unescape_php_string"]

logger = logging.getLogger(__name__)

_OPEN_TAG = re.compile(r"^<\?php\s*", re.MULTILINE)
_CLOSE_TAG = re.compile(r"\?>")
_RETURN = re.compile(r"^\s*return\s+", re.MULTILINE)
_TERMINATOR = re.compile(r";\s*$", re.MULTILINE)

# Quoted string: opening quote in group N, body allows backslash escapes and
# any character except the opening quote.
_FLAT_PAIR = re.compile(
    r"""(['"`])((?:\\.|(?!\1)[^\\])*?)\1\s*=>\s*(['"`])((?:\\.|(?!\3)[^\\])*?)\3""",
    re.DOTALL,
)
_NESTED_PAIR = re.compile(
    r"""(['"`])((?:\\.|(?!\1)[^\\])*?)\1\s*=>\s*\[(.*?)\]""",
    re.DOTALL,
)

_SINGLE_QUOTE_ESCAPE = re.compile(r"\\([\\'])")
_DOUBLE_QUOTE_ESCAPE = re.compile(r"\\(.)", re.DOTALL)

_DOUBLE_QUOTE_SEQUENCES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "e": "\x1b",
    "f": "\f",
    "\\": "\\",
    "$": "$",
    '"': '"',
    "`": "`",
}


def unescape_php_string(body: str, quote: str) -> str:
    """Unescape the body of a quoted PHP string literal.

    Single-quoted strings only honour ``\\\\`` and ``\\'``. Double-quoted and
    backtick strings honour the common control escapes; unknown escape
    sequences are kept literally, as PHP does.

    Args:
        body: Text between the quotes
        quote: The delimiter that enclosed the body

    Returns:
        Unescaped string

    Example:
        >>> unescape_php_string(r"It\\'s", "'")
        "It's"
        >>> unescape_php_string(r"a\\nb", "'")
        'a\\\\nb'
        >>> unescape_php_string(r"a\\nb", '"')
        'a\\nb'
    """
    if "\\" not in body:
        return body
    if quote == "'":
        return _SINGLE_QUOTE_ESCAPE.sub(r"\1", body)

    def _replace(match: re.Match[str]) -> str:
        char = match.group(1)
        return _DOUBLE_QUOTE_SEQUENCES.get(char, match.group(0))

    return _DOUBLE_QUOTE_ESCAPE.sub(_replace, body)


def _clean(source: str) -> str:
    cleaned = _OPEN_TAG.sub("", source)
    cleaned = _CLOSE_TAG.sub("", cleaned)
    cleaned = _RETURN.sub("", cleaned)
    cleaned = _TERMINATOR.sub("", cleaned).strip()
    if cleaned.startswith("[") and cleaned.endswith("]"):
        cleaned = cleaned[1:-1]
    return cleaned


class PhpArrayParser:
    """Pattern-based parser for ``<?php return [...];`` translation files.

    Never raises: oversized input, excessive nesting and internal failures
    all produce an empty mapping, logged at warning level.

    Attributes:
        max_source_size: Maximum accepted source length (default: 10 MB)
        max_nesting_depth: Maximum followed array nesting depth (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )

    @property
    def max_source_size(self) -> int:
        """Maximum accepted source length in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum followed array nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: PhpSource) -> TranslationMapping:
        """Parse translation file source into a nested mapping.

        Args:
            source: Full PHP source text

        Returns:
            Mapping of keys to strings or nested mappings; empty on failure

        Example:
            >>> PhpArrayParser().parse("<?php return ['failed' => 'Nope.'];")
            {'failed': 'Nope.'}
        """
        if len(source) > self._max_source_size:
            logger.warning(
                "Translation source of %d characters exceeds limit of %d; ignoring",
                len(source),
                self._max_source_size,
            )
            return {}
        try:
            return self._parse_literal(source, 0)
        except (RecursionError, re.error) as e:
            logger.warning("Failed to parse PHP array: %s", e)
            return {}

    def _parse_literal(self, source: str, depth: int) -> TranslationMapping:
        if depth > self._max_nesting_depth:
            logger.warning(
                "PHP array nesting exceeds %d levels; ignoring nested value",
                self._max_nesting_depth,
            )
            return {}

        cleaned = _clean(source)
        result: TranslationMapping = {}

        for match in _FLAT_PAIR.finditer(cleaned):
            key = unescape_php_string(match.group(2), match.group(1))
            result[key] = unescape_php_string(match.group(4), match.group(3))

        # Nested arrays win over flat values found for the same key.
        for match in _NESTED_PAIR.finditer(cleaned):
            key = unescape_php_string(match.group(2), match.group(1))
            result[key] = self._parse_literal(f"[{match.group(3)}]", depth + 1)

        return result


def parse_php_array(
    source: PhpSource, *, max_source_size: int | None = None
) -> TranslationMapping:
    """Parse translation file source into a nested mapping.

    Convenience function for PhpArrayParser().parse().

    Args:
        source: Full PHP source text
        max_source_size: Optional size limit override

    Returns:
        Mapping of keys to strings or nested mappings; empty on failure

    Example:
        >>> parse_php_array("<?php return ['a' => ['b' => 'v']];")
        {'b': 'v', 'a': {'b': 'v'}}

        The stray top-level 'b' comes from the flat pass; see module notes.
    """
    return PhpArrayParser(max_source_size=max_source_size).parse(source)
