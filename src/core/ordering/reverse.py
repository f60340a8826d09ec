"""
Reverse Order — Обращение ordering

Свободный комбинатор вместо метода базового класса: принимает любой
объект, реализующий Ordering.
"""

from dataclasses import dataclass
from typing import Any

from src.core.domain.sign import Sign
from src.core.ordering.contract import Ordering, require_ordering


@dataclass(frozen=True)
class ReversedOrder:
    """Ordering с противоположным знаком сравнения"""

    ordering: Ordering

    def __post_init__(self) -> None:
        require_ordering(self.ordering)

    def compare(self, a: Any, b: Any) -> Sign:
        return Sign.of(self.ordering.compare(b, a))

    def __repr__(self) -> str:
        return f"reverse({self.ordering!r})"


def reverse(ordering: Ordering) -> Ordering:
    """
    Обращение ordering.

    reverse(reverse(o)) возвращает исходный o, поэтому двойное обращение
    структурно равно исходному ordering.

    Raises:
        InvalidArgumentError: Если ordering отсутствует
    """
    if isinstance(ordering, ReversedOrder):
        return ordering.ordering
    return ReversedOrder(ordering)
