"""
Тесты для таксономии ошибок

Проверяет:
1. Каждому ErrorKind соответствует ровно один класс исключения
2. Классы совместимы со встроенными исключениями Python
3. Сообщение доступно как .message и как str(exc)
"""

import pytest

from strictbuiltins.core.errors import (
    ERROR_CLASSES,
    BuiltinsError,
    DivisionByZero,
    ErrorKind,
    InvalidArgumentType,
    InvalidArgumentValue,
    Overflow,
    Unsupported,
    type_name,
)


class TestErrorTaxonomy:
    """Тесты для закрытого набора видов ошибок"""

    def test_every_kind_has_class(self) -> None:
        assert set(ERROR_CLASSES) == set(ErrorKind)

    @pytest.mark.parametrize("kind, error_class", list(ERROR_CLASSES.items()))
    def test_class_kind_matches(self, kind: ErrorKind, error_class: type[BuiltinsError]) -> None:
        assert error_class.kind is kind
        assert issubclass(error_class, BuiltinsError)

    @pytest.mark.parametrize(
        "error_class, builtin",
        [
            (InvalidArgumentType, TypeError),
            (InvalidArgumentValue, ValueError),
            (DivisionByZero, ZeroDivisionError),
            (Overflow, OverflowError),
            (Unsupported, NotImplementedError),
        ],
    )
    def test_builtin_compatibility(self, error_class: type[BuiltinsError], builtin: type[Exception]) -> None:
        with pytest.raises(builtin):
            raise error_class("boom")

    def test_message(self) -> None:
        error = InvalidArgumentValue("invalid literal for int() with base 10: 'x'")

        assert error.message == "invalid literal for int() with base 10: 'x'"
        assert str(error) == error.message
        assert error.kind == "invalid_argument_value"


class TestTypeName:
    """Тесты для type_name"""

    def test_names(self) -> None:
        assert type_name(1) == "int"
        assert type_name(1.5) == "float"
        assert type_name(None) == "NoneType"
        assert type_name(True) == "bool"
        assert type_name([]) == "list"
