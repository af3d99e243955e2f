"""
Identifier case conversion.

Model names may use any identifier casing (``UserAccount``, ``HTTPRoute``,
``legacy_table``); generated module names are always lower-case words joined
by underscores.

Word boundaries (applied in order):
1) Any run of characters that are not letters or digits separates words
2) A lower-case letter or digit followed by an upper-case letter
3) The last upper-case letter of an acronym followed by a lower-case letter
   (``HTTPServer`` -> ``http_server``)
"""

import re
from typing import List

_SEPARATORS = re.compile(r"[\W_]+")


def _split_camel(chunk: str) -> List[str]:
    words: List[str] = []
    start = 0
    for idx in range(1, len(chunk)):
        prev, cur = chunk[idx - 1], chunk[idx]
        nxt = chunk[idx + 1] if idx + 1 < len(chunk) else ""

        if cur.isupper() and (prev.islower() or prev.isdigit()):
            words.append(chunk[start:idx])
            start = idx
        elif cur.isupper() and prev.isupper() and nxt.islower():
            words.append(chunk[start:idx])
            start = idx
    words.append(chunk[start:])
    return words


def split_words(name: str) -> List[str]:
    """
    Split an identifier into its words, preserving their original casing.

    Examples:
        >>> split_words("UserAccount")
        ['User', 'Account']
        >>> split_words("XMLHttpRequest")
        ['XML', 'Http', 'Request']
    """
    words: List[str] = []
    for chunk in _SEPARATORS.split(name):
        if chunk:
            words.extend(_split_camel(chunk))
    return words


def to_snake_case(name: str) -> str:
    """
    Convert an identifier to lower-case/underscore form.

    The conversion is deterministic and idempotent: converting an already
    snake-cased name returns it unchanged.

    Examples:
        >>> to_snake_case("UserAccount")
        'user_account'
        >>> to_snake_case("HTTPServer")
        'http_server'
        >>> to_snake_case("user_account")
        'user_account'
    """
    return "_".join(word.lower() for word in split_words(name))


__all__ = ["split_words", "to_snake_case"]
