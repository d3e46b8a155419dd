"""
Tokenizer
=========
Splits a roman numeral into tokens, left to right, one token per call.

A token is either a subtractive prefix-suffix pair (the IV in MMDIV), a run
of repeated digits (the MM), or a lonely digit (the D), which is a trivial
repeat. Pairs and repeats that can never be legal (LL, XM, IIII) are
rejected here; ordering between tokens is the validator's job.
"""

from __future__ import annotations

import logging
from typing import Iterator, Union

from .digits import is_line_end, parse_roman_character, valid_pair, valid_repeats
from .errors import (
    EndOfInputError,
    InvalidCharacterError,
    InvalidPairError,
    InvalidRepeatCountError,
)
from .models import PairToken, RepeatToken

logger = logging.getLogger(__name__)


def _digit_at(text: str, pos: int) -> int:
    digit = parse_roman_character(text[pos])
    if digit is None:
        raise InvalidCharacterError(text[pos], pos)
    return digit


def consume_next_token(
    text: str,
    pos: int = 0,
) -> tuple[Union[RepeatToken, PairToken], int]:
    """
    Read the token starting at ``text[pos]``.

    Args:
        text: The full input line.
        pos: Index of the first unconsumed character.

    Returns:
        ``(token, consumed)`` where ``consumed`` is the number of characters
        the token spans (always at least 1).

    Raises:
        EndOfInputError: Nothing left before the end or a line terminator.
        InvalidCharacterError: A character outside IVXLCDM.
        InvalidPairError: A subtractive pair not in the legal table.
        InvalidRepeatCountError: A run longer than its digit allows.
    """
    if is_line_end(text, pos):
        raise EndOfInputError(pos)

    first = _digit_at(text, pos)

    # Last character of the line
    if is_line_end(text, pos + 1):
        return RepeatToken(digit=first, count=1), 1

    second = _digit_at(text, pos + 1)

    if first < second:
        if not valid_pair(first, second):
            raise InvalidPairError(text[pos:pos + 2], pos)
        return PairToken(prefix=first, suffix=second), 2

    if first > second:
        # Lonely character; the next call picks up the second one
        return RepeatToken(digit=first, count=1), 1

    end = pos + 2
    while not is_line_end(text, end) and text[end] == text[pos]:
        end += 1
    count = end - pos

    if not valid_repeats(first, count):
        raise InvalidRepeatCountError(text[pos], count, pos)
    return RepeatToken(digit=first, count=count), count


def tokenize(text: str) -> Iterator[Union[RepeatToken, PairToken]]:
    """
    Yield every token of a line in order, without checking their sequence.

    Stops silently at the end of the line; raises on the first bad token.
    """
    pos = 0
    while not is_line_end(text, pos):
        token, consumed = consume_next_token(text, pos)
        logger.debug(f"Token {token} at position {pos}")
        pos += consumed
        yield token
