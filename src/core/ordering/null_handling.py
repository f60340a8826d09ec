"""
Null-Handling Order — Декоратор, задающий позицию None

Оборачивает любой ordering так, что отсутствующее значение (None)
сортируется строго первым (NULLS_LEAST) или строго последним
(NULLS_GREATEST) относительно всех присутствующих значений.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обёрнутый ordering никогда не получает None
2. compare(None, None) == ZERO
3. Если None ровно один, результат зависит только от полярности
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from src.core.domain.sign import Sign
from src.core.errors import InvalidArgumentError
from src.core.ordering.contract import Ordering, require_ordering
from src.core.ordering.natural import NATURAL_ORDER


class NullPolarity(str, Enum):
    """Позиция None относительно присутствующих значений"""

    LEAST = "least"
    GREATEST = "greatest"

    @property
    def null_vs_value(self) -> Sign:
        """Результат compare(None, value) для этой полярности"""
        return Sign.NEGATIVE if self is NullPolarity.LEAST else Sign.POSITIVE


@dataclass(frozen=True)
class NullHandlingOrder:
    """
    Ordering с обработкой None.

    Attributes:
        ordering: Обёрнутый ordering для присутствующих значений
        polarity: NullPolarity.LEAST или NullPolarity.GREATEST
    """

    ordering: Ordering
    polarity: NullPolarity

    def __post_init__(self) -> None:
        require_ordering(self.ordering)
        try:
            polarity = NullPolarity(self.polarity)
        except ValueError:
            raise InvalidArgumentError(
                f"polarity must be one of {[p.value for p in NullPolarity]}, got {self.polarity!r}"
            ) from None
        object.__setattr__(self, "polarity", polarity)

    def compare(self, a: Any, b: Any) -> Sign:
        if a is None and b is None:
            return Sign.ZERO
        if a is None:
            return self.polarity.null_vs_value
        if b is None:
            return self.polarity.null_vs_value.flipped()
        return Sign.of(self.ordering.compare(a, b))

    def __repr__(self) -> str:
        return f"nulls_{self.polarity.value}({self.ordering!r})"


# =============================================================================
# FACTORIES
# =============================================================================


def nulls_least(ordering: Ordering = NATURAL_ORDER) -> NullHandlingOrder:
    """
    None меньше всех присутствующих значений.

    Args:
        ordering: Ordering для присутствующих значений (default: natural order)

    Raises:
        InvalidArgumentError: Если ordering is None или не реализует compare()
    """
    return NullHandlingOrder(ordering, NullPolarity.LEAST)


def nulls_greatest(ordering: Ordering = NATURAL_ORDER) -> NullHandlingOrder:
    """
    None больше всех присутствующих значений.

    Args:
        ordering: Ordering для присутствующих значений (default: natural order)

    Raises:
        InvalidArgumentError: Если ordering is None или не реализует compare()
    """
    return NullHandlingOrder(ordering, NullPolarity.GREATEST)


NULLS_LEAST_ORDER: Final[NullHandlingOrder] = NullHandlingOrder(NATURAL_ORDER, NullPolarity.LEAST)
NULLS_GREATEST_ORDER: Final[NullHandlingOrder] = NullHandlingOrder(
    NATURAL_ORDER, NullPolarity.GREATEST
)
