"""
Palindrome checker module.

This module provides functionality to check if a string is a palindrome,
ignoring case, spaces, and punctuation.

Two normalization modes are supported:
    - "unicode": keep letters and digits from any script (default)
    - "ascii":   keep only A-Z, a-z and 0-9

Known limitation: comparison works per code point. Text written with
combining marks (e.g. "e" + U+0301) loses the marks during normalization,
and multi-code-point grapheme clusters are not kept together when reversed.
"""

import re

UNICODE = "unicode"
ASCII = "ascii"
MODES = (UNICODE, ASCII)

_NON_ASCII_ALNUM = re.compile(r'[^a-zA-Z0-9]')


def _require_str(text):
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")


def normalize(text: str, mode: str = UNICODE) -> str:
    """
    Reduce text to its canonical comparison form.

    Every character that is not a letter or digit is removed and the
    remaining letters are lower-cased. Relative order is preserved.

    Args:
        text (str): Raw input text. May be empty.
        mode (str): "unicode" or "ascii".

    Returns:
        str: The normalized text (possibly empty).

    Raises:
        TypeError: If text is not a string.
        ValueError: If mode is not a known normalization mode.

    Examples:
        >>> normalize("A man, a plan")
        'amanaplan'
        >>> normalize("!!!")
        ''
        >>> normalize("Ñandú 42")
        'ñandú42'
        >>> normalize("Ñandú 42", mode="ascii")
        'and42'
    """
    _require_str(text)

    if mode == ASCII:
        return _NON_ASCII_ALNUM.sub('', text).lower()
    if mode != UNICODE:
        raise ValueError(f"Unknown normalization mode: {mode!r}. Valid: {', '.join(MODES)}")

    # Fold case first; some characters expand to a letter plus a combining
    # mark when folded, and the mark must not survive into the output.
    return ''.join(ch for ch in text.casefold() if ch.isalnum())


def is_palindrome(text: str, mode: str = UNICODE) -> bool:
    """
    Check if a string is a palindrome.

    A palindrome is a word, phrase, number, or other sequence of characters
    that reads the same forward and backward. This function ignores case,
    spaces, and punctuation when checking. Text with no letters or digits
    (including the empty string) is considered a palindrome.

    Args:
        text (str): The string to check for palindrome property.
        mode (str): Normalization mode, see normalize().

    Returns:
        bool: True if the string is a palindrome, False otherwise.

    Examples:
        >>> is_palindrome("racecar")
        True
        >>> is_palindrome("palabra")
        False
        >>> is_palindrome("Anita lava la tina")
        True
        >>> is_palindrome("")
        True
    """
    return check(text, mode)[1]


def check(text: str, mode: str = UNICODE):
    """
    Normalize text and test it in one pass.

    Returns:
        tuple: (normalized text, True if it reads the same reversed)
    """
    cleaned_text = normalize(text, mode)

    # Check if the cleaned text is equal to its reverse
    return cleaned_text, cleaned_text == cleaned_text[::-1]
