"""
Digit Tables
============
Character ↔ digit conversion and the fixed tables of legal subtractive
pairs and legal repetitions.

    I=1   V=5   X=10   L=50   C=100   D=500   M=1000
"""

from __future__ import annotations

from typing import Optional

# ─── Character Tables ─────────────────────────────────────────────────────────

ROMAN_DIGITS: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

DIGIT_CHARACTERS: dict[int, str] = {v: k for k, v in ROMAN_DIGITS.items()}

LINE_TERMINATORS = ("\n", "\r")

# ─── Legal Combinations ──────────────────────────────────────────────────────

# prefix → allowed suffixes
LEGAL_PAIRS: dict[int, frozenset[int]] = {
    1: frozenset({5, 10}),
    10: frozenset({50, 100}),
    100: frozenset({500, 1000}),
}

# V, L and D never repeat
SINGLE_DIGITS = frozenset({5, 50, 500})

# I, X and C repeat at most three times
MAX_REPEATS = 3

UNBOUNDED_DIGIT = 1000

# Largest-first table used for canonical rendering
_RENDER_TABLE = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def parse_roman_character(c: str) -> Optional[int]:
    """Digit value of a roman letter, or None if ``c`` is not one."""
    return ROMAN_DIGITS.get(c)


def digit_to_roman(d: int) -> str:
    """
    Convert a canonical digit value back to its letter.

    Only 1, 5, 10, 50, 100, 500 and 1000 are accepted. Anything else is a
    caller bug rather than bad user input.
    """
    try:
        return DIGIT_CHARACTERS[d]
    except KeyError:
        raise ValueError(f"{d!r} is not a roman digit value") from None


def valid_pair(prefix: int, suffix: int) -> bool:
    """Whether ``prefix`` may precede ``suffix`` subtractively (IV yes, LC no)."""
    return suffix in LEGAL_PAIRS.get(prefix, ())


def valid_repeats(digit: int, count: int) -> bool:
    """Whether ``digit`` may appear ``count`` times in a row (III yes, LL no)."""
    if count <= 0:
        return False

    if digit in SINGLE_DIGITS:
        return count == 1
    if digit == UNBOUNDED_DIGIT:
        return True
    if digit in DIGIT_CHARACTERS:
        return count <= MAX_REPEATS
    return False


def is_line_end(text: str, pos: int) -> bool:
    """True at the end of ``text`` or on a line terminator."""
    return pos >= len(text) or text[pos] in LINE_TERMINATORS


def int_to_roman(value: int) -> str:
    """
    Render a positive integer as its canonical roman numeral.

    Thousands are written as repeated M, so there is no upper bound.
    """
    if value < 1:
        raise ValueError(f"cannot render {value} as a roman numeral")

    parts = []
    for magnitude, letters in _RENDER_TABLE:
        count, value = divmod(value, magnitude)
        parts.append(letters * count)
    return "".join(parts)
