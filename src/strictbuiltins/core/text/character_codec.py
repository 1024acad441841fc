"""
Character Codec — Конверсия code point ↔ символ

to_char (chr) и code_point (ord) взаимно обратны на всём диапазоне
[0, CODE_POINT_LIMIT). Длина строки считается в code points, а не в
code units: "💩" — один символ.
"""

import numbers
from typing import Final

from strictbuiltins.core.errors import InvalidArgumentType, InvalidArgumentValue, type_name

# Верхняя граница Unicode (исключительно)
CODE_POINT_LIMIT: Final[int] = 0x110000


def to_char(code: object) -> str:
    """
    Символ для заданного code point.

    Args:
        code: Целое число в [0, 0x110000)

    Returns:
        Строка из одного символа

    Raises:
        InvalidArgumentType: code не число или не целое
        InvalidArgumentValue: code вне [0, 0x110000)

    Examples:
        >>> to_char(8364)
        '€'
    """
    if isinstance(code, bool) or not isinstance(code, numbers.Real):
        raise InvalidArgumentType(f"an integer is required (got type {type_name(code)})")

    if not isinstance(code, numbers.Integral):
        raise InvalidArgumentType(f"integer argument expected, got {type_name(code)}")

    if code < 0 or code >= CODE_POINT_LIMIT:
        raise InvalidArgumentValue(f"chr() arg not in range({CODE_POINT_LIMIT:#x})")

    return chr(code)


def code_point(*args: object) -> int:
    """
    Code point единственного символа строки.

    Raises:
        InvalidArgumentType: Число аргументов != 1, аргумент не строка,
            либо строка длиной не в один code point
    """
    if len(args) != 1:
        raise InvalidArgumentType(f"ord() takes exactly one argument ({len(args)} given)")

    char = args[0]
    if not isinstance(char, str):
        raise InvalidArgumentType(
            f"ord() expected string of length 1, but {type_name(char)} found"
        )

    if len(char) != 1:
        raise InvalidArgumentType(
            f"ord() expected a character, but string of length {len(char)} found"
        )

    return ord(char)
