"""
Character values according to the tables in ISO 6346.

Digits keep their face value and letters start at 10, skipping every
multiple of 11:

    0-9 -> 0-9
    A   -> 10
    B-K -> 12-21
    L-U -> 23-32
    V-Z -> 34-38
"""

from mrn_generator.errors import NotAlphanumericError


def character_value(char: str) -> int:
    """
    Return the checksum weight of a single character.

    Args:
        char: One ASCII digit or letter

    Returns:
        Character value used by the weighted checksum

    Raises:
        NotAlphanumericError: If char is not an ASCII digit or letter
    """
    if len(char) != 1 or not char.isascii() or not char.isalnum():
        raise NotAlphanumericError(char)

    if char.isdigit():
        return ord(char) - ord("0")
    if char == "A":
        return 10
    elif "B" <= char <= "K":
        return ord(char) - 54
    elif "L" <= char <= "U":
        return ord(char) - 53
    # V-Z, and lowercase letters which land past the uppercase table
    return ord(char) - 52


def capitalize(s: str) -> str:
    """Uppercase ASCII letters, leaving every other character untouched."""
    return "".join(c.upper() if c.isascii() else c for c in s)


def replace_last_char(s: str, char: str) -> str:
    return s[:-1] + char
