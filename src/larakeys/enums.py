"""Enumerations for larakeys type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class ChangeKind(StrEnum):
    """Kind of file-system change reported to the translation store.

    StrEnum provides automatic string conversion: str(ChangeKind.ADDED) == "added"
    """

    ADDED = "added"
    """A translation file was created."""

    MODIFIED = "modified"
    """A translation file was written to."""

    DELETED = "deleted"
    """A translation file was removed."""


__all__ = [
    "ChangeKind",
]
