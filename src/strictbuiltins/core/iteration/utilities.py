"""
Iteration Utilities — Обобщённая работа с итерируемыми объектами

Итерируемость определяется структурно: объект удовлетворяет протоколу
Sequenceable, если умеет выдавать новый однопроходный итератор (__iter__).
ArithmeticProgression, коллекции и генераторы — всё это Sequenceable.

Все производители последовательностей (zip_shortest, enumerate_from,
filter_by) ленивые и создаются заново при каждом вызове.
"""

from collections.abc import Callable, Iterable, Iterator, Sized
from typing import Any, Protocol, TypeVar, runtime_checkable

from strictbuiltins.core.errors import InvalidArgumentType, type_name

T = TypeVar("T")


# =============================================================================
# CAPABILITY
# =============================================================================


@runtime_checkable
class Sequenceable(Protocol[T]):
    """Объект, умеющий выдавать новый однопроходный итератор"""

    def __iter__(self) -> Iterator[T]: ...


# =============================================================================
# ITER / LIST
# =============================================================================


def get_iterator(iterable: object) -> Iterator[Any]:
    """
    Однопроходный итератор по объекту.

    Raises:
        InvalidArgumentType: Объект не Sequenceable
    """
    if not isinstance(iterable, Sequenceable):
        raise InvalidArgumentType(f"'{type_name(iterable)}' object is not iterable")
    return iter(iterable)


def to_list(iterable: object) -> list[Any]:
    """Жадное вычитывание get_iterator(iterable) в список"""
    return list(get_iterator(iterable))


# =============================================================================
# ZIP / ENUMERATE
# =============================================================================


def zip_shortest(*iterables: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """
    Кортежи из элементов на одинаковых позициях.

    Останавливается, как только исчерпан любой из входов.
    Без входов не выдаёт ничего.

    Examples:
        >>> list(zip_shortest([1, 2, 3], ["a", "b"]))
        [(1, 'a'), (2, 'b')]
    """
    iterators = [get_iterator(iterable) for iterable in iterables]
    return _zip_rows(iterators)


def _zip_rows(iterators: list[Iterator[Any]]) -> Iterator[tuple[Any, ...]]:
    if not iterators:
        return

    while True:
        row = []
        for iterator in iterators:
            try:
                row.append(next(iterator))
            except StopIteration:
                return
        yield tuple(row)


def enumerate_from(iterable: Iterable[T], start: int = 0) -> Iterator[tuple[int, T]]:
    """
    Пары (index, value).

    index начинается со start (может быть отрицательным) и растёт на 1
    на каждый элемент независимо от значений.

    Examples:
        >>> list(enumerate_from(["a", "b", "c"], -1))
        [(-1, 'a'), (0, 'b'), (1, 'c')]
    """
    return _count_pairs(get_iterator(iterable), start)


def _count_pairs(iterator: Iterator[T], start: int) -> Iterator[tuple[int, T]]:
    index = start
    for value in iterator:
        yield index, value
        index += 1


# =============================================================================
# LEN / SUM / FILTER
# =============================================================================


def length_of(collection: object) -> int:
    """
    Длина коллекции.

    Raises:
        InvalidArgumentType: Объект не имеет длины
    """
    if not isinstance(collection, Sized):
        raise InvalidArgumentType(f"object of type '{type_name(collection)}' has no len()")
    return len(collection)


def sum_of(iterable: Iterable[Any], start: Any = 0) -> Any:
    """Сумма элементов, начиная со start"""
    total = start
    for value in get_iterator(iterable):
        total = total + value
    return total


def filter_by(
    predicate: Callable[[T], Any] | None,
    iterable: Iterable[T],
) -> Iterator[T]:
    """
    Элементы, для которых predicate истинен.

    predicate=None означает "оставить истинные элементы".
    """
    return _keep_matching(predicate, get_iterator(iterable))


def _keep_matching(predicate: Callable[[T], Any] | None, iterator: Iterator[T]) -> Iterator[T]:
    for value in iterator:
        keep = value if predicate is None else predicate(value)
        if keep:
            yield value
