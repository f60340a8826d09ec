"""
Order Contract — Протокол отношения порядка

Любой объект с методом `compare(a, b) -> Sign` является ordering.
Комбинаторы (null handling, compound, by_key, reverse) принимают любой
объект, реализующий протокол, а не наследника базового класса.

КОНТРАКТ:
1. Reflexivity: compare(x, x) == Sign.ZERO для любого x в домене
2. Для total order: antisymmetry и transitivity на всём домене
3. Given order ослабляет контракт до partial order на конечном наборе
4. Нет side effects; ordering неизменяем после конструирования
"""

import functools
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from src.core.domain.sign import Sign
from src.core.errors import InvalidArgumentError

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Ordering(Protocol[T_contra]):
    """Трёхзначное отношение порядка над значениями одного типа"""

    def compare(self, a: T_contra, b: T_contra) -> Sign:
        ...


@runtime_checkable
class SupportsLessThan(Protocol):
    """Значение с собственным (natural) порядком через `<`"""

    def __lt__(self, other: Any) -> bool:
        ...


# =============================================================================
# VALIDATION
# =============================================================================


def require_ordering(ordering: Any, name: str = "ordering") -> Ordering:
    """
    Проверка, что аргумент реализует Ordering.

    Вызывается фабриками до построения relation (fail fast).

    Args:
        ordering: Проверяемый объект
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        ordering без изменений

    Raises:
        InvalidArgumentError: Если ordering is None или не имеет compare()
    """
    if ordering is None:
        raise InvalidArgumentError(f"{name} is required, got None")
    if not isinstance(ordering, Ordering):
        raise InvalidArgumentError(
            f"{name} must implement compare(a, b), got {type(ordering).__name__}"
        )
    return ordering


def require_projection(projection: Any, name: str = "projection") -> Callable[[Any], Any]:
    """
    Проверка, что projection задан и вызываем.

    Raises:
        InvalidArgumentError: Если projection is None или не callable
    """
    if projection is None:
        raise InvalidArgumentError(f"{name} is required, got None")
    if not callable(projection):
        raise InvalidArgumentError(
            f"{name} must be callable, got {type(projection).__name__}"
        )
    return projection


# =============================================================================
# SORT ADAPTER
# =============================================================================


def sort_key(ordering: Ordering[T]) -> Callable[[T], Any]:
    """
    Адаптер ordering к `key=` API стандартной библиотеки.

    Движок не реализует сортировку: результат передаётся в sorted(),
    list.sort(), heapq, bisect и т.п.

    Examples:
        >>> sorted(["bb", "a"], key=sort_key(by_key(len)))  # doctest: +SKIP
        ['a', 'bb']
    """
    require_ordering(ordering)
    return functools.cmp_to_key(ordering.compare)
