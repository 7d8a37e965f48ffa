"""Position utilities for translation source text.

Converts character offsets into 0-based line/column positions used by host
navigation (go-to-definition) and CLI output.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "SourcePosition",
    "column_offset",
    "line_offset",
    "position_at",
]


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """0-based line and column inside a source file.

    Attributes:
        line: 0-based line number
        column: 0-based character offset from the start of the line
    """

    line: int = 0
    column: int = 0

    def format(self, *, zero_based: bool = True) -> str:
        """Format as ``line:column``.

        Example:
            >>> SourcePosition(1, 4).format(zero_based=False)
            '2:5'
        """
        if zero_based:
            return f"{self.line}:{self.column}"
        return f"{self.line + 1}:{self.column + 1}"


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> line_offset("line1\\nline2\\nline3", 6)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> column_offset("hello\\nworld", 10)
        4
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))
    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def position_at(source: str, pos: int) -> SourcePosition:
    """Convert a character offset into a SourcePosition."""
    return SourcePosition(line_offset(source, pos), column_offset(source, pos))
