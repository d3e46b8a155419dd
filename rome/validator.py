"""
Sequence Validator
==================
Checks that each token may follow the one before it.

Two rules cover every ordering constraint:
    1. The leading digit must strictly decrease from token to token
       (XXX may be followed by IX because X > I).
    2. After V, L or D the trailing digit of the next token must also be
       smaller (V may not be followed by IV, since V is not greater than V).

Together these reject sequences that would have been tokenized differently
(XX followed by X would have been XXX) and impossible combinations, without a
table per pair of token kinds. Expanded (A+ means A, AA or AAA):

    I+ IV IX   terminal
    V          I+
    X+ XL XC   I+ IV V IX
    L          I+ IV V IX X+
    C+ CD CM   I+ IV V IX X+ XL L XC
    D          I+ IV V IX X+ XL L XC C+
    M+         anything
"""

from __future__ import annotations

import logging
from typing import Union

from .digits import SINGLE_DIGITS
from .errors import InvalidSequenceError
from .models import PairToken, RepeatToken

logger = logging.getLogger(__name__)

AnyToken = Union[RepeatToken, PairToken]


def valid_sequence(first: AnyToken, second: AnyToken) -> bool:
    """Whether ``second`` may directly follow ``first``."""
    first_prefix = first.leading

    if first_prefix in SINGLE_DIGITS:
        return first_prefix > second.trailing

    return first_prefix > second.leading


class SequenceValidator:
    """
    Validates adjacent token pairs and reports the offending tokens.
    """

    def check(self, first: AnyToken, second: AnyToken, position: int = 0):
        """
        Raise if ``second`` may not follow ``first``.

        Args:
            first: The previously accepted token.
            second: The token just read.
            position: Index in the input where ``second`` starts.

        Raises:
            InvalidSequenceError: Carrying both tokens in roman form.
        """
        if not valid_sequence(first, second):
            logger.debug(f"Rejected sequence {first} → {second} at {position}")
            raise InvalidSequenceError(str(first), str(second), position)
