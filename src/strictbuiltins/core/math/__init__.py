"""
Core math modules для strictbuiltins

Floor-арифметика, форматирование в системах счисления и строгий разбор целых.
"""

# Numeric Primitives
from strictbuiltins.core.math.numeric_primitives import (
    # Constants
    RADIX_PREFIXES,
    ZERO_DIVISION_MESSAGE,
    # Floor arithmetic
    floor_divmod,
    floor_mod,
    # Radix formatting
    radix_format,
    to_bin,
    to_hex,
    to_oct,
)

# Integer Parser
from strictbuiltins.core.math.integer_parser import (
    DEFAULT_BASE,
    DIGITS,
    MARKER_BASES,
    MAX_BASE,
    MIN_BASE,
    parse_int,
)

__all__ = [
    # Numeric Primitives — Constants
    "RADIX_PREFIXES",
    "ZERO_DIVISION_MESSAGE",
    # Numeric Primitives — Floor arithmetic
    "floor_divmod",
    "floor_mod",
    # Numeric Primitives — Radix formatting
    "radix_format",
    "to_bin",
    "to_hex",
    "to_oct",
    # Integer Parser — Constants
    "DEFAULT_BASE",
    "DIGITS",
    "MARKER_BASES",
    "MAX_BASE",
    "MIN_BASE",
    # Integer Parser — Functions
    "parse_int",
]
