"""
Errors — Закрытая таксономия ошибок

Каждая ошибка библиотеки относится ровно к одному виду (ErrorKind) и несёт
сообщение. Классы исключений наследуют соответствующие исключения Python,
поэтому привычные `except TypeError` / `except ValueError` продолжают работать.

ВИДЫ ОШИБОК:
- INVALID_ARGUMENT_TYPE: неверный тип аргумента (сообщение содержит фактический тип)
- INVALID_ARGUMENT_VALUE: тип верный, значение вне домена
- DIVISION_BY_ZERO: делитель modulo/divmod равен нулю
- OVERFLOW: конверсия бесконечности в целое
- UNSUPPORTED: явно нереализованная ветка функциональности
"""

from enum import Enum
from typing import Any


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Вид ошибки"""

    INVALID_ARGUMENT_TYPE = "invalid_argument_type"
    INVALID_ARGUMENT_VALUE = "invalid_argument_value"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    UNSUPPORTED = "unsupported"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BuiltinsError(Exception):
    """
    Базовое исключение библиотеки.

    Подклассы фиксируют `kind`; набор подклассов закрыт и совпадает с ErrorKind.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentType(BuiltinsError, TypeError):
    kind = ErrorKind.INVALID_ARGUMENT_TYPE


class InvalidArgumentValue(BuiltinsError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT_VALUE


class DivisionByZero(BuiltinsError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO


class Overflow(BuiltinsError, OverflowError):
    kind = ErrorKind.OVERFLOW


class Unsupported(BuiltinsError, NotImplementedError):
    kind = ErrorKind.UNSUPPORTED


ERROR_CLASSES: dict[ErrorKind, type[BuiltinsError]] = {
    ErrorKind.INVALID_ARGUMENT_TYPE: InvalidArgumentType,
    ErrorKind.INVALID_ARGUMENT_VALUE: InvalidArgumentValue,
    ErrorKind.DIVISION_BY_ZERO: DivisionByZero,
    ErrorKind.OVERFLOW: Overflow,
    ErrorKind.UNSUPPORTED: Unsupported,
}


def type_name(value: Any) -> str:
    """Имя фактического типа значения для сообщений об ошибках"""
    return type(value).__name__
