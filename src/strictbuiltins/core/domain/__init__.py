"""
Value objects: ArithmeticProgression (range).
"""

from strictbuiltins.core.domain.arithmetic_range import (
    ZERO_STEP_MESSAGE,
    ArithmeticProgression,
    make_range,
)

__all__ = [
    "ZERO_STEP_MESSAGE",
    "ArithmeticProgression",
    "make_range",
]
