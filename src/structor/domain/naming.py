from __future__ import annotations

import string

FALLBACK_NAME = "Untitled"

_ASCII_LETTERS = frozenset(string.ascii_letters)
_SUFFIX_ALPHABET = string.ascii_lowercase


def sanitize_name(raw: str | None) -> str:
    """
    Keep ASCII letters only and ensure a non-empty result.

    Examples:
        >>> sanitize_name("Ele9gant_Floral!!")
        'ElegantFloral'
        >>> sanitize_name("1234")
        'Untitled'
        >>> sanitize_name("Café Noir")
        'CafNoir'
    """
    letters = "".join(ch for ch in (raw or "") if ch in _ASCII_LETTERS)
    return letters if letters else FALLBACK_NAME


def letter_suffix(position: int) -> str:
    """
    Bijective base-26 numbering: 0 -> 'a', 25 -> 'z', 26 -> 'aa', 27 -> 'ab'.
    """
    if position < 0:
        raise ValueError(f"Suffix position must be >= 0, got {position}")
    letters: list[str] = []
    n = position
    while True:
        n, rem = divmod(n, 26)
        letters.append(_SUFFIX_ALPHABET[rem])
        if n == 0:
            break
        n -= 1
    return "".join(reversed(letters))


def uniquify(base: str, used_names: set[str]) -> str:
    """
    Return a name not present in ``used_names`` and reserve it there.

    Example:
        used = {"Foo"}
        uniquify("Foo", used)
        # 'Fooa', and used == {"Foo", "Fooa"}
    """
    candidate = base
    if candidate in used_names:
        candidate = _next_available_name(base, used_names)
    used_names.add(candidate)
    return candidate


def _next_available_name(base: str, used_names: set[str]) -> str:
    position = 0
    while True:
        candidate = f"{base}{letter_suffix(position)}"
        if candidate not in used_names:
            return candidate
        position += 1
