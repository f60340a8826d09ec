"""
Compound Order — Лексикографическая комбинация orderings

Сравнивает по первому ordering, который различает значения; следующий
ordering используется только при равенстве всех предыдущих (tie-break).

CompoundOrder является VIEW над последовательностью вызывающего кода:
изменения списка после конструирования видны через relation (копия
не делается).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность никогда не None и не содержит None
2. Пустая последовательность → всегда ZERO
3. Идентичные ссылки → ZERO без обращения к компонентам

ВНИМАНИЕ (concurrency):
Структурное изменение списка (добавление/удаление/перестановка) во время
выполнения compare в другом потоке — ошибка вызывающего кода; поведение
не определено, как и при изменении коллекции во время итерации.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.core.domain.sign import Sign
from src.core.errors import InvalidArgumentError
from src.core.ordering.contract import Ordering, require_ordering

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CompoundOrder:
    """
    Ordering с tie-break по последовательности orderings.

    Attributes:
        orderings: Последовательность orderings (live view, не копия)
    """

    orderings: Sequence[Ordering]

    def __post_init__(self) -> None:
        if self.orderings is None:
            raise InvalidArgumentError("orderings is required, got None")
        if not isinstance(self.orderings, Sequence) or isinstance(self.orderings, str):
            raise InvalidArgumentError(
                f"orderings must be a sequence, got {type(self.orderings).__name__}"
            )
        for index, ordering in enumerate(self.orderings):
            require_ordering(ordering, name=f"orderings[{index}]")

    def compare(self, a: Any, b: Any) -> Sign:
        if a is b:
            return Sign.ZERO

        for ordering in self.orderings:
            result = ordering.compare(a, b)
            if result != Sign.ZERO:
                return Sign.of(result)

        return Sign.ZERO

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundOrder):
            return NotImplemented
        return list(self.orderings) == list(other.orderings)

    def __hash__(self) -> int:
        # Хэш текущего содержимого view
        return hash(tuple(self.orderings))

    def __repr__(self) -> str:
        return f"compound({list(self.orderings)!r})"


# =============================================================================
# FACTORIES
# =============================================================================


def compound(orderings: Sequence[Ordering]) -> CompoundOrder:
    """
    Compound ordering как view над последовательностью.

    Args:
        orderings: Orderings в порядке приоритета (первый — primary key)

    Returns:
        CompoundOrder, отражающий последующие изменения orderings

    Raises:
        InvalidArgumentError: Если orderings is None, не sequence или содержит
            элемент без compare()

    Examples:
        >>> by_length_then_text = compound([by_key(len), natural_order()])  # doctest: +SKIP
    """
    order = CompoundOrder(orderings)
    logger.debug("Built compound ordering with %d components", len(orderings))
    return order


def compound_of(primary: Ordering, secondary: Ordering, *rest: Ordering) -> CompoundOrder:
    """
    Compound ordering из фиксированного набора orderings.

    Список строится здесь и принадлежит relation, поэтому view-семантика
    вызывающего кода не касается.

    Args:
        primary: Основной ordering
        secondary: Tie-break для primary
        *rest: Дополнительные tie-break orderings
    """
    return compound([primary, secondary, *rest])
