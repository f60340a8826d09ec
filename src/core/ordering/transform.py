"""
Transform Order — Сравнение по ключу (key projection)

Ключ вычисляется из каждого значения через projection и сравнивается:
- by_key: natural order ключей
- by_key_with: заданным ordering над ключами

Projection для движка — black box (вызывается ровно один раз на операнд
в каждом compare), но вызывающий код должен считать его детерминированным.
Равенство relations требует идентичности projection (для функций это
identity объекта) и, для by_key_with, равенства ordering над ключами.
"""

from dataclasses import dataclass
from typing import Any, Callable, Final

from src.core.domain.sign import Sign
from src.core.ordering.contract import Ordering, require_ordering, require_projection
from src.core.ordering.natural import NATURAL_ORDER


@dataclass(frozen=True)
class ByKeyOrder:
    """
    Ordering по natural order ключа.

    Attributes:
        projection: value → key; ключи должны быть взаимно сравнимы
    """

    projection: Callable[[Any], Any]

    def __post_init__(self) -> None:
        require_projection(self.projection)

    def compare(self, a: Any, b: Any) -> Sign:
        # TypeError для несравнимых ключей пропагирует без изменений
        return NATURAL_ORDER.compare(self.projection(a), self.projection(b))

    def __repr__(self) -> str:
        return f"by_key({_describe(self.projection)})"


@dataclass(frozen=True)
class ByKeyWithOrder:
    """
    Ordering по ключу с явным ordering над ключами.

    Attributes:
        projection: value → key
        ordering: Ordering над ключами
    """

    projection: Callable[[Any], Any]
    ordering: Ordering

    def __post_init__(self) -> None:
        require_projection(self.projection)
        require_ordering(self.ordering)

    def compare(self, a: Any, b: Any) -> Sign:
        return Sign.of(self.ordering.compare(self.projection(a), self.projection(b)))

    def __repr__(self) -> str:
        return f"by_key_with({_describe(self.projection)}, {self.ordering!r})"


def _describe(projection: Callable[[Any], Any]) -> str:
    return getattr(projection, "__qualname__", None) or repr(projection)


# =============================================================================
# FACTORIES
# =============================================================================


def by_key(projection: Callable[[Any], Any]) -> ByKeyOrder:
    """
    Ordering по natural order значения projection(x).

    Raises:
        InvalidArgumentError: Если projection is None или не callable

    Examples:
        >>> by_key(len).compare("foo", "ab")
        <Sign.POSITIVE: 1>
    """
    return ByKeyOrder(projection)


def by_key_with(projection: Callable[[Any], Any], ordering: Ordering) -> ByKeyWithOrder:
    """
    Ordering по projection(x) с заданным ordering над ключами.

    Args:
        projection: value → key
        ordering: Ordering над ключами (например given_order или nulls_least)

    Raises:
        InvalidArgumentError: Если projection или ordering отсутствуют
    """
    return ByKeyWithOrder(projection, ordering)


# Сравнение по natural order строкового представления str(value)
STRING_FORM_ORDER: Final[ByKeyOrder] = ByKeyOrder(str)
