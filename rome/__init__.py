"""
Roman Numeral Parser
====================
Strict conversion of roman numerals to integers, with a descriptive reason
for every rejected input.

Architecture:
    - Tokenizer: Splits the numeral into pairs (IV) and repeat runs (XXX)
    - Sequence Validator: Enforces the ordering between adjacent tokens
    - Engine: Sums token values and reports the first failure

Version: 1.0.0
"""

__version__ = "1.0.0"

from .digits import int_to_roman
from .engine import ParserConfig, ParserEngine, parse_roman_number, roman_to_int
from .errors import RomanNumeralError
from .models import ParseResult

__all__ = [
    "ParseResult",
    "ParserConfig",
    "ParserEngine",
    "RomanNumeralError",
    "int_to_roman",
    "parse_roman_number",
    "roman_to_int",
]
