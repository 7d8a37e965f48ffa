"""Translation call-site extraction.

Hosts hand over a text fragment around the cursor; these helpers pull out
the dotted key from the helper calls Laravel code uses to translate:

    __('auth.failed')          trans("auth.failed")
    @lang('auth.failed')       trans_choice('cart.items', $count)
    Lang::get('auth.failed')

Scanning a whole document for occurrences is left to the host.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from larakeys.localization.types import TranslationKey

__all__ = [
    "KeyReference",
    "extract_translation_key",
    "find_translation_key_at",
    "iter_key_references",
]

# Keys are limited to word characters, dots and dashes. The negative
# lookbehind keeps identifiers such as ``mytrans(`` from matching.
_CALL_SITE = re.compile(
    r"""(?<![\w$>:@])(?:__|trans_choice|trans|@lang|Lang::get)\(\s*(['"])(?P<key>[\w.-]+)\1""",
)


@dataclass(frozen=True, slots=True)
class KeyReference:
    """A translation key found inside a helper call.

    Attributes:
        key: Dotted translation key
        start: Offset of the first character of the call
        end: Offset just past the closing quote of the key
    """

    key: TranslationKey
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        """Check whether an offset falls inside the call text."""
        return self.start <= offset < self.end


def iter_key_references(text: str) -> list[KeyReference]:
    """Return every translation call found in text, in order."""
    return [
        KeyReference(match.group("key"), match.start(), match.end())
        for match in _CALL_SITE.finditer(text)
    ]


def extract_translation_key(text: str) -> TranslationKey | None:
    """Extract the key from the first translation call in text.

    Args:
        text: Source fragment such as ``__('auth.failed')``

    Returns:
        Dotted key, or None when no call is present

    Example:
        >>> extract_translation_key("{{ __('auth.failed') }}")
        'auth.failed'
        >>> extract_translation_key("@lang(\\"nav.home\\")")
        'nav.home'
        >>> extract_translation_key("__($dynamic)") is None
        True
    """
    match = _CALL_SITE.search(text)
    return match.group("key") if match else None


def find_translation_key_at(text: str, offset: int) -> KeyReference | None:
    """Find the translation call under a cursor offset.

    Args:
        text: Line or document text
        offset: Cursor offset into text

    Returns:
        The reference whose call text contains offset, or None
    """
    for reference in iter_key_references(text):
        if reference.contains(offset):
            return reference
        if reference.start > offset:
            break
    return None
