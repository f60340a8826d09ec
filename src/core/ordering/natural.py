"""
Natural Order — Порядок, делегирующий собственному сравнению значений

Единственный канонический relation для типов с `<`. Stateless: любые два
экземпляра NaturalOrder равны структурно, singleton не требуется.

Числа (numbers.Real) сравниваются через compare_float, поэтому NaN
участвует в total order (NaN > +inf), а -0.0 == 0.0.
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.sign import Sign
from src.core.math.primitives import compare_float, is_real_number
from src.core.ordering.contract import SupportsLessThan


@dataclass(frozen=True)
class NaturalOrder:
    """Ordering по собственному порядку значений"""

    def compare(self, a: SupportsLessThan, b: SupportsLessThan) -> Sign:
        """
        Сравнение по `<` самих значений.

        Raises:
            TypeError: Если значения взаимно несравнимы (пропагирует без изменений)
        """
        if a is b:
            return Sign.ZERO

        if is_real_number(a) and is_real_number(b):
            return compare_float(a, b)

        if a < b:
            return Sign.NEGATIVE
        if b < a:
            return Sign.POSITIVE
        return Sign.ZERO

    def __repr__(self) -> str:
        return "natural_order()"


NATURAL_ORDER: Final[NaturalOrder] = NaturalOrder()


def natural_order() -> NaturalOrder:
    """Канонический natural order (разделяемый неизменяемый экземпляр)"""
    return NATURAL_ORDER
