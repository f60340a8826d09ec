"""
Sign — Результат трёхзначного сравнения

Единственный тип результата для всех orderings:
- NEGATIVE: левый операнд меньше правого
- ZERO: операнды эквивалентны
- POSITIVE: левый операнд больше правого

Sign является IntEnum, поэтому напрямую совместим с functools.cmp_to_key
и любым кодом, ожидающим классический cmp-результат (-1/0/+1).
"""

from enum import IntEnum


class Sign(IntEnum):
    """Знак трёхзначного сравнения"""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def of(cls, value: float) -> "Sign":
        """
        Знак числа как Sign.

        Args:
            value: Любое число (int/float), например разность рангов

        Returns:
            NEGATIVE если value < 0, POSITIVE если value > 0, иначе ZERO

        Examples:
            >>> Sign.of(-7)
            <Sign.NEGATIVE: -1>
            >>> Sign.of(0)
            <Sign.ZERO: 0>
        """
        if value < 0:
            return cls.NEGATIVE
        if value > 0:
            return cls.POSITIVE
        return cls.ZERO

    def flipped(self) -> "Sign":
        """Противоположный знак (для reverse и симметричных сравнений)"""
        return Sign(-self.value)
