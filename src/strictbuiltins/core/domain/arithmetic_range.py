"""
ArithmeticProgression — Модель арифметической прогрессии (range)

Immutable Pydantic модель: start, stop (нормализованный), step (не ноль).
Длина вычисляется за O(1), проверка принадлежности (count) — тоже O(1),
без перебора элементов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. step != 0
2. step > 0 → stop >= start; step < 0 → stop <= start
   (stop прижимается к start при создании, прогрессия не "убегает" в бесконечность)
3. length = max(0, ceil((stop - start) / step))
4. Итерация не изменяет объект и может повторяться сколько угодно раз
"""

import logging
import numbers
from typing import Final, Iterator, SupportsIndex

from pydantic import BaseModel, Field, field_validator

from strictbuiltins.core.errors import InvalidArgumentType, InvalidArgumentValue, type_name
from strictbuiltins.core.math.numeric_primitives import floor_divmod

logger = logging.getLogger(__name__)

ZERO_STEP_MESSAGE: Final[str] = "range() arg 3 must not be zero"


# =============================================================================
# MODEL
# =============================================================================


class ArithmeticProgression(BaseModel):
    """
    Арифметическая прогрессия start, start + step, start + 2*step, ...

    Immutable модель (frozen=True). Порядок полей важен: stop валидируется
    после start и step, чтобы его можно было нормализовать.

    Публичный конструктор с таксономией ErrorKind — make_range(). Прямое
    создание модели сообщает о невалидных полях через pydantic ValidationError.
    """

    start: int = Field(..., description="Первый элемент прогрессии")
    step: int = Field(..., description="Шаг (не ноль)")
    stop: int = Field(..., description="Граница (исключительно), нормализованная к start")

    model_config = {"frozen": True, "strict": True}

    @field_validator("step")
    @classmethod
    def validate_step_nonzero(cls, v: int) -> int:
        """Шаг не может быть нулевым"""
        if v == 0:
            raise ValueError(ZERO_STEP_MESSAGE)
        return v

    @field_validator("stop")
    @classmethod
    def clamp_stop(cls, v: int, info) -> int:
        """
        Нормализация stop.

        Если stop лежит "не с той стороны" от start, он прижимается к start,
        и прогрессия становится пустой.
        """
        if "start" not in info.data or "step" not in info.data:
            return v

        start = info.data["start"]
        if info.data["step"] < 0:
            return min(v, start)
        return max(v, start)

    @property
    def length(self) -> int:
        """
        Количество элементов.

        length = floor((stop - start) / step) + (1, если остаток не ноль)
        """
        quotient, remainder = floor_divmod(self.stop - self.start, self.step)
        return quotient + (1 if remainder != 0 else 0)

    def count(self, value: object) -> int:
        """
        Число вхождений value (0 или 1).

        O(1): value - start делится на step без остатка, и номер шага
        лежит в [0, length).

        Args:
            value: Проверяемое значение

        Returns:
            1 если value принадлежит прогрессии, иначе 0
        """
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return 0

        quotient, remainder = floor_divmod(value - self.start, self.step)
        return 1 if remainder == 0 and 0 <= quotient < self.length else 0

    def __iter__(self) -> Iterator[int]:
        # Курсор в объекте не хранится: каждый вызов начинает новый обход
        length = self.length
        current = self.start
        produced = 0
        while produced < length:
            yield current
            current += self.step
            produced += 1

    def __len__(self) -> int:
        return self.length

    def __contains__(self, value: object) -> bool:
        return self.count(value) == 1

    def __repr__(self) -> str:
        return f"range({self.start}, {self.stop}, {self.step})"


# =============================================================================
# FACTORY
# =============================================================================


def _as_bound(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, SupportsIndex):
        raise InvalidArgumentType(f"'{type_name(value)}' object cannot be interpreted as an integer")
    return value.__index__()


def make_range(*args: object) -> ArithmeticProgression:
    """
    Создание прогрессии: range(stop), range(start, stop), range(start, stop, step).

    start по умолчанию 0, step по умолчанию 1.

    Args:
        *args: От 1 до 3 целых (или объектов с __index__)

    Returns:
        ArithmeticProgression

    Raises:
        InvalidArgumentType: Неверное число аргументов или аргумент не целый
        InvalidArgumentValue: step == 0

    Examples:
        >>> list(make_range(-4, -10, -2))
        [-4, -6, -8]
        >>> len(make_range(0, 100, -2))
        0
    """
    if not args:
        raise InvalidArgumentType("range expected at least 1 argument, got 0")

    if len(args) > 3:
        raise InvalidArgumentType(f"range expected at most 3 arguments, got {len(args)}")

    bounds = [_as_bound(arg) for arg in args]

    if len(bounds) == 1:
        start, stop, step = 0, bounds[0], 1
    elif len(bounds) == 2:
        start, stop, step = bounds[0], bounds[1], 1
    else:
        start, stop, step = bounds

    if step == 0:
        logger.debug("Rejected range(%d, %d, 0)", start, stop)
        raise InvalidArgumentValue(ZERO_STEP_MESSAGE)

    return ArithmeticProgression(start=start, stop=stop, step=step)
