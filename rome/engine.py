"""
Roman Numeral Engine
====================
Entry point that drives the tokenizer and the sequence validator over one
line of input and adds up the token values.

Usage:
    result = parse_roman_number("MCMXCIX")
    result.value   # 1999

    engine = ParserEngine(ParserConfig(log_level="DEBUG"))
    results = engine.parse_many(open("numerals.txt"))

Architecture:
    line → Tokenizer → Token → SequenceValidator → tally → ParseResult
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .digits import is_line_end
from .errors import EmptyInputError, RomanNumeralError
from .models import ParseResult
from .tokenizer import consume_next_token
from .validator import SequenceValidator

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def accumulate(text: str) -> tuple[int, list]:
    """
    Parse a line into its value and the tokens it was built from.

    Raises:
        RomanNumeralError: On the first tokenizer or sequence failure.
    """
    if is_line_end(text, 0):
        raise EmptyInputError()

    validator = SequenceValidator()

    prev, pos = consume_next_token(text, 0)
    tokens = [prev]
    tally = prev.value

    while not is_line_end(text, pos):
        token, consumed = consume_next_token(text, pos)
        assert consumed > 0, "tokenizer consumed no input"

        validator.check(prev, token, pos)

        pos += consumed
        tally += token.value
        tokens.append(token)
        prev = token

    return tally, tokens


def parse_roman_number(text: str) -> ParseResult:
    """
    Parse one line (optionally ending in a newline) into a ParseResult.

    Malformed numerals never raise; the result carries the first failure.
    """
    try:
        value, tokens = accumulate(text)
    except RomanNumeralError as e:
        return ParseResult.failure(text, e.to_model())
    return ParseResult.success(text, value, tokens)


def roman_to_int(text: str) -> int:
    """Parse a numeral and return its value, raising RomanNumeralError."""
    value, _ = accumulate(text)
    return value


@dataclass
class ParserConfig:
    """Configuration for the parser engine."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Input handling
    strip_whitespace: bool = False


class ParserEngine:
    """
    Configured parser with logging.

    Holds no per-parse state, so one engine can serve many threads.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self._setup_logging()

    def _setup_logging(self):
        """
        Attach handlers to the ``rome`` logger.

        Engines share that logger, so a handler is only added when an
        equivalent one is not already attached. No console handler is added
        when the root logger already has one, since records propagate there.
        """
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

        package_logger = logging.getLogger("rome")
        package_logger.setLevel(log_level)

        has_console = any(
            type(h) is logging.StreamHandler for h in package_logger.handlers
        )
        if not has_console and not logging.getLogger().handlers:
            console = logging.StreamHandler()
            console.setLevel(log_level)
            console.setFormatter(formatter)
            package_logger.addHandler(console)

        if not self.config.log_file:
            return

        log_path = os.path.abspath(self.config.log_file)
        file_handler = next(
            (
                h for h in package_logger.handlers
                if isinstance(h, logging.FileHandler)
                and h.baseFilename == log_path
            ),
            None,
        )
        if file_handler is None:
            Path(log_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        file_handler.setLevel(log_level)

    def parse(self, text: str) -> ParseResult:
        """
        Parse a single numeral.

        Args:
            text: One line of input, with or without its terminator.

        Returns:
            ParseResult with either the value or the first failure.
        """
        if self.config.strip_whitespace:
            text = text.strip()

        result = parse_roman_number(text)

        if result.ok:
            logger.debug(f"Parsed {text!r} → {result.value}")
        else:
            logger.info(f"Rejected {text!r}: {result.error.message}")

        return result

    def parse_many(self, lines: Iterable[str]) -> list[ParseResult]:
        """Parse each non-blank line independently."""
        results = [self.parse(line) for line in lines if line.strip()]

        failed = sum(1 for r in results if not r.ok)
        logger.info(
            f"Parsed {len(results)} numerals: "
            f"{len(results) - failed} valid, {failed} invalid"
        )
        return results
