"""
Parse Errors
============
Exceptions raised by the tokenizer, the sequence validator and the
accumulator. Every one of them is a plain validation failure for a single
input line; none is retriable.
"""

from __future__ import annotations

from .models import ErrorKind, ParseError


class RomanNumeralError(ValueError):
    """Base class for malformed roman numeral input."""

    kind: ErrorKind

    def __init__(self, message: str, position: int = 0):
        super().__init__(message)
        self.message = message
        self.position = position

    def to_model(self) -> ParseError:
        return ParseError(
            kind=self.kind,
            message=self.message,
            position=self.position,
        )


class EmptyInputError(RomanNumeralError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self):
        super().__init__("input is empty", 0)


class EndOfInputError(RomanNumeralError):
    kind = ErrorKind.END_OF_INPUT

    def __init__(self, position: int):
        super().__init__(f"unexpected end of input at position {position}", position)


class InvalidCharacterError(RomanNumeralError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, position: int):
        self.character = character
        super().__init__(
            f"invalid character: {character!r} at position {position}",
            position,
        )


class InvalidPairError(RomanNumeralError):
    kind = ErrorKind.INVALID_PAIR

    def __init__(self, pair: str, position: int):
        self.pair = pair
        super().__init__(f"invalid pair: {pair} at position {position}", position)


class InvalidRepeatCountError(RomanNumeralError):
    kind = ErrorKind.INVALID_REPEAT_COUNT

    def __init__(self, character: str, count: int, position: int):
        self.character = character
        self.count = count
        super().__init__(
            f"character {character} cannot appear {count} times in a row "
            f"(position {position})",
            position,
        )


class InvalidSequenceError(RomanNumeralError):
    kind = ErrorKind.INVALID_SEQUENCE

    def __init__(self, first: str, second: str, position: int):
        self.first = first
        self.second = second
        super().__init__(
            f"{first} cannot be followed by {second} (position {position})",
            position,
        )
