"""
Тесты публичного API strictbuiltins

Сквозные сценарии через имена встроенных функций:
round-trip chr/ord, тождество divmod, длина и принадлежность range,
симметрия форматирования и разбора, zip/enumerate, ошибки.
"""

import math

import pytest

import strictbuiltins as sb
from strictbuiltins import (
    ArithmeticProgression,
    BuiltinsError,
    DivisionByZero,
    InvalidArgumentValue,
    Overflow,
)


class TestPublicNames:
    """Тесты для состава публичного API"""

    def test_all_exported(self) -> None:
        for name in sb.__all__:
            assert hasattr(sb, name)

    def test_version(self) -> None:
        assert sb.__version__ == "1.0.0"


class TestScenarios:
    """Сквозные сценарии"""

    def test_chr_ord_round_trip_samples(self) -> None:
        for code in (0, 65, 0x20AC, 0xD7FF, 0x1F4A9, 0x10FFFF):
            assert sb.ord(sb.chr(code)) == code

    @pytest.mark.parametrize("a, b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (5.5, 2), (-5.5, 2), (1e9, -7)])
    def test_divmod_identity(self, a: float, b: float) -> None:
        q, r = sb.divmod(a, b)
        assert q * b + r == pytest.approx(a)
        assert r == 0 or math.copysign(1, r) == math.copysign(1, b)

    def test_range_length(self) -> None:
        assert sb.range(0, 100, 1).length == 100
        assert sb.range(40, -40, -2).length == 40
        assert sb.range(0, 100, -2).length == 0

    def test_range_membership(self) -> None:
        progression = sb.range(0, 100, 3)
        assert isinstance(progression, ArithmeticProgression)
        assert progression.count(0) == 1
        assert progression.count(1) == 0
        assert progression.count(3) == 1
        assert sb.range(15, -15, -3).count(-3) == 1

    def test_range_iteration(self) -> None:
        assert sb.list(sb.range(-4, -10, -2)) == [-4, -6, -8]

    @pytest.mark.parametrize("n", [0, 1, 7, 255, 4096, 123456789])
    def test_format_parse_symmetry(self, n: int) -> None:
        for formatter, base in ((sb.hex, 16), (sb.oct, 8), (sb.bin, 2)):
            assert sb.int(formatter(n)[2:], base) == n
            if n:
                assert sb.int(formatter(-n)[3:], base) == n

    def test_strict_base_literal(self) -> None:
        with pytest.raises(InvalidArgumentValue):
            sb.int("0x1", 2)
        assert sb.int("0b1111", 2) == 15

    def test_zip_and_enumerate(self) -> None:
        assert sb.list(sb.zip([1, 2, 3], ["a", "b"])) == [(1, "a"), (2, "b")]
        assert sb.list(sb.enumerate(["a", "b", "c"], -1)) == [(-1, "a"), (0, "b"), (1, "c")]

    def test_len_sum_filter(self) -> None:
        progression = sb.range(10)
        assert sb.len(progression) == 10
        assert sb.sum(progression) == 45
        assert sb.list(sb.filter(lambda n: n % 3 == 0, progression)) == [0, 3, 6, 9]

    def test_iter(self) -> None:
        iterator = sb.iter("ab")
        assert next(iterator) == "a"
        assert next(iterator) == "b"

    def test_zero_division(self) -> None:
        with pytest.raises(DivisionByZero):
            sb.divmod(10, 0)

    def test_overflow_and_nan(self) -> None:
        with pytest.raises(Overflow):
            sb.int(float("inf"))
        with pytest.raises(InvalidArgumentValue):
            sb.int(float("nan"))

    def test_int_truncates_toward_zero(self) -> None:
        assert sb.int(-32.5) == -32
        assert sb.divmod(-32.5, 1)[0] == -33

    def test_open_round_trip(self) -> None:
        store: dict[str, str] = {}
        sb.open_("/tmp/file", "w", store).write("hallo")
        assert sb.open_("/tmp/file", "r", store).read() == "hallo"

    def test_all_errors_share_base(self) -> None:
        failing = [
            lambda: sb.int("zz"),
            lambda: sb.chr(-1),
            lambda: sb.ord(""),
            lambda: sb.range(0, 1, 0),
            lambda: sb.iter(5),
            lambda: sb.hex(1.5),
            lambda: sb.open_("/tmp", "q"),
        ]
        for call in failing:
            with pytest.raises(BuiltinsError):
                call()
