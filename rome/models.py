"""
Data Models
===========
Pydantic models for tokens and parse results.
All models are serializable to JSON for the CLI and the HTTP API.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .digits import DIGIT_CHARACTERS, digit_to_roman, valid_pair, valid_repeats


# ─── Enums ────────────────────────────────────────────────────────────────────


class ErrorKind(str, Enum):
    """Reasons a numeral is rejected."""
    EMPTY_INPUT = "empty_input"
    END_OF_INPUT = "end_of_input"
    INVALID_CHARACTER = "invalid_character"
    INVALID_PAIR = "invalid_pair"
    INVALID_REPEAT_COUNT = "invalid_repeat_count"
    INVALID_SEQUENCE = "invalid_sequence"


# ─── Token Models ─────────────────────────────────────────────────────────────


class RepeatToken(BaseModel):
    """
    One or more identical letters in a row (I, XX, MMM).
    A lone letter is a trivial repeat with count 1.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["repeat"] = "repeat"
    digit: int
    count: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_repeat(self) -> RepeatToken:
        if self.digit not in DIGIT_CHARACTERS:
            raise ValueError(f"{self.digit} is not a roman digit value")
        if not valid_repeats(self.digit, self.count):
            raise ValueError(
                f"{digit_to_roman(self.digit)} cannot repeat {self.count} times"
            )
        return self

    @computed_field
    @property
    def value(self) -> int:
        return self.digit * self.count

    @property
    def leading(self) -> int:
        return self.digit

    @property
    def trailing(self) -> int:
        return self.digit

    def __str__(self) -> str:
        return digit_to_roman(self.digit) * self.count


class PairToken(BaseModel):
    """Subtractive prefix-suffix pair (IV, XC, CM)."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["pair"] = "pair"
    prefix: int
    suffix: int

    @model_validator(mode="after")
    def check_pair(self) -> PairToken:
        if not valid_pair(self.prefix, self.suffix):
            raise ValueError(
                f"{self.prefix} cannot prefix {self.suffix} subtractively"
            )
        return self

    @computed_field
    @property
    def value(self) -> int:
        return self.suffix - self.prefix

    @property
    def leading(self) -> int:
        return self.prefix

    @property
    def trailing(self) -> int:
        return self.suffix

    def __str__(self) -> str:
        return digit_to_roman(self.prefix) + digit_to_roman(self.suffix)


Token = Annotated[Union[RepeatToken, PairToken], Field(discriminator="kind")]


# ─── Result Models ────────────────────────────────────────────────────────────


class ParseError(BaseModel):
    """Why a numeral was rejected, and where."""
    kind: ErrorKind
    message: str
    position: int = Field(default=0, ge=0)


class ParseResult(BaseModel):
    """
    Outcome of parsing one line.
    Exactly one of ``value`` and ``error`` is set.
    """
    input: str
    value: Optional[int] = Field(default=None, ge=0)
    error: Optional[ParseError] = None
    tokens: list[Token] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_outcome(self) -> ParseResult:
        if (self.value is None) == (self.error is None):
            raise ValueError("a parse result carries either a value or an error")
        return self

    @computed_field
    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str, value: int, tokens: list) -> ParseResult:
        return cls(input=text, value=value, tokens=tokens)

    @classmethod
    def failure(cls, text: str, error: ParseError) -> ParseResult:
        return cls(input=text, error=error)
