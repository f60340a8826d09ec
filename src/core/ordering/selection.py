"""
Selection — Выбор меньшего/большего из двух значений

Tie-break: при равенстве (compare == ZERO) ОБЕ функции возвращают первый
операнд — тот же объект, а не копию и не второй операнд.
"""

from typing import Optional, TypeVar

from src.core.domain.sign import Sign
from src.core.ordering.contract import Ordering, SupportsLessThan, require_ordering
from src.core.ordering.natural import NATURAL_ORDER

T = TypeVar("T")
TComparable = TypeVar("TComparable", bound=SupportsLessThan)


# =============================================================================
# NATURAL ORDER
# =============================================================================


def least_of(a: TComparable, b: TComparable) -> TComparable:
    """
    Меньшее из двух значений по natural order.

    Args:
        a: Возвращается, если a <= b
        b: Возвращается, если b < a

    Raises:
        TypeError: Если значения взаимно несравнимы

    Examples:
        >>> least_of(3, 1)
        1
        >>> least_of(1.0, 1)  # равенство → первый операнд
        1.0
    """
    return a if NATURAL_ORDER.compare(a, b) <= Sign.ZERO else b


def greatest_of(a: TComparable, b: TComparable) -> TComparable:
    """
    Большее из двух значений по natural order.

    Args:
        a: Возвращается, если a >= b
        b: Возвращается, если b > a

    Raises:
        TypeError: Если значения взаимно несравнимы
    """
    return a if NATURAL_ORDER.compare(a, b) >= Sign.ZERO else b


# =============================================================================
# EXPLICIT ORDERING
# =============================================================================


def least_by(ordering: Ordering[T], a: Optional[T], b: Optional[T]) -> Optional[T]:
    """
    Меньшее из двух значений по заданному ordering.

    None допустим, если ordering его поддерживает (например nulls_least).

    Raises:
        InvalidArgumentError: Если ordering отсутствует
    """
    require_ordering(ordering)
    return a if ordering.compare(a, b) <= Sign.ZERO else b


def greatest_by(ordering: Ordering[T], a: Optional[T], b: Optional[T]) -> Optional[T]:
    """
    Большее из двух значений по заданному ordering.

    None допустим, если ordering его поддерживает (например nulls_greatest).

    Raises:
        InvalidArgumentError: Если ordering отсутствует
    """
    require_ordering(ordering)
    return a if ordering.compare(a, b) >= Sign.ZERO else b
