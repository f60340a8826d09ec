"""
Given Order — Partial order над явным конечным списком значений

Каждое различное значение получает ранг по порядку первого вхождения
в списке; сравнение — знак разности рангов. Сравнимы ТОЛЬКО значения,
равные (по ==) какому-либо элементу исходного списка.

Построение таблицы рангов (один проход):
- значение, равное непосредственно предыдущему элементу, не получает
  нового ранга (смежные дубликаты схлопываются в один ранг)
- иначе значение получает следующий свободный ранг
- если значение уже есть в таблице (несмежный дубликат) →
  DuplicateValueError с позициями обоих вхождений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица рангов строится один раз и больше не изменяется
2. Ранги плотные: 0, 1, 2, ... по числу различных значений
3. compare только читает таблицу, никогда не вставляет
4. Изменение исходного списка после конструирования не влияет на ordering
5. Значение вне таблицы → IncomparableValueError (а не тихий ZERO)
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping

from src.core.domain.sign import Sign
from src.core.errors import (
    DuplicateValueError,
    EmptyInputError,
    IncomparableValueError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


class GivenOrder:
    """
    Ordering по позиции значений в явном списке.

    Attributes:
        ranks: Read-only отображение value → rank
        values: Различные значения в порядке возрастания ранга
    """

    __slots__ = ("_ranks", "_values")

    def __init__(self, values_in_order: Iterable[Hashable]):
        """
        Args:
            values_in_order: Значения от наименьшего к наибольшему

        Raises:
            InvalidArgumentError: Если values_in_order is None
            DuplicateValueError: Если значение повторяется на несмежных позициях
            TypeError: Если значение не hashable
        """
        if values_in_order is None:
            raise InvalidArgumentError("values_in_order is required, got None")

        ranks = build_rank_table(values_in_order)

        self._ranks: Mapping[Hashable, int] = MappingProxyType(ranks)
        self._values: tuple[Hashable, ...] = tuple(ranks)

        logger.debug("Built given ordering over %d distinct values", len(ranks))

    @property
    def ranks(self) -> Mapping[Hashable, int]:
        return self._ranks

    @property
    def values(self) -> tuple[Hashable, ...]:
        return self._values

    def rank(self, value: Any) -> int:
        """
        Ранг значения.

        Raises:
            IncomparableValueError: Если значение вне домена ordering
        """
        try:
            return self._ranks[value]
        except (KeyError, TypeError):
            # TypeError: unhashable значение заведомо не входит в таблицу
            raise IncomparableValueError(value) from None

    def compare(self, a: Any, b: Any) -> Sign:
        return Sign.of(self.rank(a) - self.rank(b))

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._ranks
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._ranks)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, name):
            raise AttributeError(f"GivenOrder is immutable, cannot set {name!r}")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GivenOrder):
            return NotImplemented
        return dict(self._ranks) == dict(other._ranks)

    def __hash__(self) -> int:
        return hash(frozenset(self._ranks.items()))

    def __repr__(self) -> str:
        return f"given_order({list(self._values)!r})"


# =============================================================================
# RANK TABLE
# =============================================================================


def build_rank_table(
    values_in_order: Iterable[Hashable],
) -> dict[Hashable, int]:
    """
    Построение таблицы рангов за один проход.

    Args:
        values_in_order: Значения от наименьшего к наибольшему

    Returns:
        value → плотный ранг (0, 1, 2, ...)

    Raises:
        DuplicateValueError: Если значение повторяется на несмежных позициях

    Examples:
        >>> build_rank_table(["a", "a", "b"])
        {'a': 0, 'b': 1}
        >>> build_rank_table(["x", "y", "x"])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DuplicateValueError: Duplicate value at indices 0 and 2: 'x'
    """
    ranks: dict[Hashable, int] = {}
    first_indices: dict[Hashable, int] = {}
    previous: Any = None

    for index, value in enumerate(values_in_order):
        if index > 0 and value == previous:
            # Смежный дубликат: тот же ранг, новый ранг не расходуется
            continue

        if value in ranks:
            raise DuplicateValueError(value, first_indices[value], index)

        ranks[value] = len(ranks)
        first_indices[value] = index
        previous = value

    return ranks


# =============================================================================
# FACTORIES
# =============================================================================


def given_order(values_in_order: Iterable[Hashable]) -> GivenOrder:
    """
    Partial order по позиции значений в списке.

    Вход копируется в таблицу рангов: последующие изменения списка
    не влияют на ordering. None допустим как значение списка.

    Raises:
        InvalidArgumentError: Если values_in_order is None
        DuplicateValueError: Если значение повторяется на несмежных позициях

    Examples:
        >>> given_order(["LOW", "MEDIUM", "HIGH"]).compare("HIGH", "LOW")
        <Sign.POSITIVE: 1>
    """
    return GivenOrder(values_in_order)


def given_order_of(*values_in_order: Hashable) -> GivenOrder:
    """
    Partial order по порядку аргументов.

    Первый аргумент — наименьшее значение.

    Raises:
        EmptyInputError: Если не передано ни одного значения
        DuplicateValueError: Если значение повторяется на несмежных позициях
    """
    if not values_in_order:
        raise EmptyInputError("given_order_of requires at least one value")
    return GivenOrder(values_in_order)


def enum_order(enum_cls: type[Enum]) -> GivenOrder:
    """
    Partial order над членами Enum в порядке объявления.

    Алиасы (члены с тем же значением) не входят в итерацию Enum и
    сравниваются как канонический член.

    Raises:
        InvalidArgumentError: Если enum_cls не является Enum
        EmptyInputError: Если Enum не содержит членов
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise InvalidArgumentError(f"enum_cls must be an Enum class, got {enum_cls!r}")

    members = list(enum_cls)
    if not members:
        raise EmptyInputError(f"{enum_cls.__name__} has no members")

    return GivenOrder(members)
