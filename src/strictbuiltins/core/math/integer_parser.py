"""
Integer Parser — Строгий разбор целых чисел

Конверсия строк, чисел и bool в точное целое:
- Основание из диапазона [2, 36], основание 0 (вывод по префиксу) не поддерживается
- Префиксы 0b/0o/0x допускаются только при совпадающем явном основании
- Каждая цифра проверяется против основания, частичный разбор запрещён
- Ведущие нули игнорируются (не означают восьмеричную запись)

Числа (не строки):
- int возвращается без изменений, bool → 0/1
- ±inf → Overflow, NaN → InvalidArgumentValue
- Прочие вещественные и Decimal усекаются к нулю: -32.5 → -32

ВАЖНО: усечение к нулю здесь намеренно отличается от floor-семантики
floor_divmod. Оба поведения сохраняются независимо.
"""

import logging
import math
import numbers
from decimal import Decimal
from typing import Final

from strictbuiltins.core.errors import (
    InvalidArgumentType,
    InvalidArgumentValue,
    Overflow,
    Unsupported,
    type_name,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36
DEFAULT_BASE: Final[int] = 10

# Алфавит цифр: значение цифры равно её индексу
DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Префикс литерала → единственное допустимое основание
MARKER_BASES: Final[dict[str, int]] = {"0b": 2, "0o": 8, "0x": 16}


# =============================================================================
# РАЗБОР
# =============================================================================


def _invalid_literal(value: str, base: int) -> InvalidArgumentValue:
    logger.debug(
        "Rejected int() literal %r with base %d", value, base, extra={"literal": value, "base": base}
    )
    return InvalidArgumentValue(f"invalid literal for int() with base {base}: '{value}'")


def _truncate_real(value: numbers.Real | Decimal) -> int:
    """Усечение вещественного или Decimal к нулю с проверкой на inf/NaN"""
    if isinstance(value, Decimal):
        # Без конверсии во float: Decimal("1e400") конечен
        infinite, nan = value.is_infinite(), value.is_nan()
    else:
        infinite, nan = math.isinf(value), math.isnan(value)

    if infinite:
        raise Overflow("cannot convert float infinity to integer")

    if nan:
        raise InvalidArgumentValue("cannot convert float NaN to integer")

    return math.trunc(value)


def _parse_digits(digits: str, base: int) -> int | None:
    """
    Разбор строки цифр в заданном основании.

    Returns:
        Значение или None, если строка пуста или содержит недопустимую цифру
    """
    if not digits:
        return None

    result = 0
    for char in digits:
        digit = DIGITS.find(char)
        if digit < 0 or digit >= base:
            return None
        result = result * base + digit

    return result


def _parse_literal(value: str, base: int) -> int:
    """
    Разбор строкового литерала.

    Args:
        value: Исходная строка (для сообщения об ошибке сохраняется как есть)
        base: Основание

    Returns:
        Целое значение литерала

    Raises:
        InvalidArgumentValue: При несовпадении префикса и основания или
            недопустимой цифре
    """
    text = value.strip().lower()

    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    marker = text[:2]
    if marker in MARKER_BASES:
        if base != MARKER_BASES[marker]:
            raise _invalid_literal(value, base)
        text = text[2:]

    magnitude = _parse_digits(text, base)
    if magnitude is None:
        raise _invalid_literal(value, base)

    return sign * magnitude


def parse_int(value: object, base: int | None = None) -> int:
    """
    Конверсия значения в точное целое.

    Args:
        value: Строка, число (включая Decimal) или bool
        base: Основание для строк (default: 10). None означает "не задано".

    Returns:
        Целое число

    Raises:
        InvalidArgumentType: Основание задано для не-строки, основание не целое,
            либо тип value не поддерживается
        Unsupported: base == 0
        InvalidArgumentValue: Основание вне [2, 36], NaN, невалидный литерал
        Overflow: value равно ±inf

    Examples:
        >>> parse_int("0b1111", 2)
        15
        >>> parse_int("  -0xff  ", 16)
        -255
        >>> parse_int(-32.5)
        -32
        >>> parse_int("012345")
        12345
    """
    if base is not None and not isinstance(value, str):
        raise InvalidArgumentType("int() can't convert non-string with explicit base")

    if base is None:
        base = DEFAULT_BASE

    if isinstance(base, bool) or not isinstance(base, numbers.Integral):
        raise InvalidArgumentType(f"'{type_name(base)}' object cannot be interpreted as an integer")

    if base == 0:
        raise Unsupported("interpretation as a code literal not supported yet")

    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidArgumentValue(f"int() base must be >= {MIN_BASE} and <= {MAX_BASE}")

    if isinstance(value, bool):
        return 1 if value else 0

    if isinstance(value, numbers.Integral):
        return value if type(value) is int else int(value)

    if isinstance(value, (numbers.Real, Decimal)):
        return _truncate_real(value)

    if isinstance(value, str):
        return _parse_literal(value, int(base))

    raise InvalidArgumentType(
        "int() argument must be a string, a bytes-like object or a number, "
        f"not '{type_name(value)}'"
    )
