"""
Numeric Primitives — Floor-модуло, divmod и форматирование в системах счисления

Модуль обеспечивает арифметику с семантикой floor-деления:
- floor_mod: остаток со знаком делителя (а не делимого)
- floor_divmod: пара (floor(a / b), floor_mod(a, b))
- radix_format: запись целого в системе счисления 2/8/16 с префиксом
- hex/oct/bin: публичные обёртки над radix_format с проверкой числа аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль всегда поднимает DivisionByZero (никаких fallback)
2. sign(floor_mod(a, b)) == sign(b) или результат равен 0
3. q * b + r == a (с точностью до округления float)
4. Знак ставится перед префиксом: -0x2a, а не 0x-2a
"""

import math
import numbers
from typing import Final, SupportsIndex

from strictbuiltins.core.errors import DivisionByZero, InvalidArgumentType, InvalidArgumentValue, type_name

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Префиксы литералов для поддерживаемых оснований
RADIX_PREFIXES: Final[dict[int, str]] = {2: "b", 8: "o", 16: "x"}

ZERO_DIVISION_MESSAGE: Final[str] = "integer division or modulo by zero"


# =============================================================================
# FLOOR-MOD / FLOOR-DIVMOD
# =============================================================================


def _is_integral(value: object) -> bool:
    # bool тоже Integral: divmod(True, 2) == (0, 1)
    return isinstance(value, numbers.Integral)


def floor_mod(a: float, b: float) -> float:
    """
    Остаток от деления со знаком делителя.

    Формула: ((a mod b) + b) mod b, где mod — усекающий остаток (math.fmod).
    Для целых операндов результат вычисляется точно целочисленной арифметикой.

    Args:
        a: Делимое
        b: Делитель (не ноль)

    Returns:
        Остаток r: sign(r) == sign(b) или r == 0

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> floor_mod(7, 3)
        1
        >>> floor_mod(-7, 3)
        2
        >>> floor_mod(7, -3)
        -2
    """
    if b == 0:
        raise DivisionByZero(ZERO_DIVISION_MESSAGE)

    if _is_integral(a) and _is_integral(b):
        # Целочисленный остаток Python уже имеет знак делителя
        return a % b

    return math.fmod(math.fmod(a, b) + b, b)


def floor_divmod(a: float, b: float) -> tuple[float, float]:
    """
    Частное и остаток с семантикой floor-деления.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        (quotient, remainder):
        - quotient = floor(a / b) (int для целых операндов, float иначе);
          для вещественных выводится из остатка: round((a - r) / b)
        - remainder = floor_mod(a, b)

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> floor_divmod(3, 4)
        (0, 3)
        >>> floor_divmod(-7, 2)
        (-4, 1)
        >>> floor_divmod(5.5, 2)
        (2.0, 1.5)
    """
    if b == 0:
        raise DivisionByZero(ZERO_DIVISION_MESSAGE)

    if _is_integral(a) and _is_integral(b):
        return a // b, a % b

    remainder = floor_mod(a, b)
    quotient = float(round((a - remainder) / b))
    return quotient, remainder


# =============================================================================
# ФОРМАТИРОВАНИЕ В СИСТЕМАХ СЧИСЛЕНИЯ
# =============================================================================


def _as_index(n: object) -> int:
    """
    Приведение к целому через index-capability.

    bool не считается целым числом: hex(True) отклоняется.
    """
    if isinstance(n, bool):
        raise InvalidArgumentType(f"'{type_name(n)}' object cannot be interpreted as an integer")

    if _is_integral(n):
        return int(n)

    if isinstance(n, SupportsIndex):
        return n.__index__()

    raise InvalidArgumentType(f"'{type_name(n)}' object cannot be interpreted as an integer")


def radix_format(n: object, base: int, prefix: str) -> str:
    """
    Запись целого числа в системе счисления 2, 8 или 16.

    Модуль числа записывается в основании base, знак ставится перед "0<prefix>".

    Args:
        n: Целое число или объект с __index__
        base: Основание (2, 8 или 16)
        prefix: Буква префикса ("b", "o" или "x")

    Returns:
        Строка вида "-"? "0" prefix digits

    Raises:
        InvalidArgumentType: Если n не целое и не поддерживает __index__
        InvalidArgumentValue: Если base не из {2, 8, 16}

    Examples:
        >>> radix_format(255, 16, "x")
        '0xff'
        >>> radix_format(-42, 16, "x")
        '-0x2a'
    """
    if base not in RADIX_PREFIXES:
        raise InvalidArgumentValue(f"base must be one of {sorted(RADIX_PREFIXES)}, got {base}")

    value = _as_index(n)
    sign = "-" if value < 0 else ""
    return f"{sign}0{prefix}{format(abs(value), RADIX_PREFIXES[base])}"


def _check_single_argument(name: str, args: tuple) -> None:
    if len(args) != 1:
        raise InvalidArgumentType(f"{name}() takes exactly one argument ({len(args)} given)")


def to_hex(*args: object) -> str:
    """Шестнадцатеричная запись: hex(255) == '0xff'"""
    _check_single_argument("hex", args)
    return radix_format(args[0], 16, RADIX_PREFIXES[16])


def to_oct(*args: object) -> str:
    """Восьмеричная запись: oct(255) == '0o377'"""
    _check_single_argument("oct", args)
    return radix_format(args[0], 8, RADIX_PREFIXES[8])


def to_bin(*args: object) -> str:
    """Двоичная запись: bin(255) == '0b11111111'"""
    _check_single_argument("bin", args)
    return radix_format(args[0], 2, RADIX_PREFIXES[2])
