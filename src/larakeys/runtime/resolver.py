"""Dotted path resolution against parsed translation trees.

Python 3.13+.
"""

from __future__ import annotations

from larakeys.localization.types import TranslationNode

__all__ = ["resolve_key"]


def resolve_key(root: TranslationNode, path: str) -> str | None:
    """Resolve a dotted path to a leaf string.

    Only leaf strings are ever returned; a path that stops on a nested
    mapping, runs past a leaf, or names a missing key yields None. The empty
    path names the root itself, which is never a leaf.

    Args:
        root: Parsed translation tree
        path: Dotted lookup path (e.g., 'exceptions.graphql')

    Returns:
        Leaf string or None

    Example:
        >>> tree = {"exceptions": {"graphql": "GraphQL error occurred"}}
        >>> resolve_key(tree, "exceptions.graphql")
        'GraphQL error occurred'
        >>> resolve_key(tree, "exceptions") is None
        True
    """
    if not path:
        return None
    current = root
    for segment in path.split("."):
        if not isinstance(current, dict) or segment not in current:
            return None
        current = current[segment]
    return current if isinstance(current, str) else None
