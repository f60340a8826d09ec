"""
Ordering Errors — Иерархия исключений для orderings

Собственная иерархия, не наследующая ValueError/TypeError:
- ConstructionError: relation не может быть построен (fatal для конструктора)
    - DuplicateValueError: одно значение на двух несмежных позициях
    - EmptyInputError: фабрике требуется хотя бы одно значение
- IncomparableValueError: значение вне домена partial order (ошибка вызова compare)
- InvalidArgumentError: отсутствует обязательный аргумент конфигурации

Ошибки делегированных сравнений (например, TypeError от `<` между
несравнимыми типами) НЕ оборачиваются и пропагируют как есть.
"""

from typing import Any


class OrderingError(Exception):
    """Базовое исключение для всех ошибок ordering-движка"""

    pass


# =============================================================================
# CONSTRUCTION ERRORS
# =============================================================================


class ConstructionError(OrderingError):
    """Relation не построен: конфигурация невалидна"""

    pass


class DuplicateValueError(ConstructionError):
    """
    Значение встречается на двух несмежных позициях входной последовательности.

    Смежные дубликаты допустимы (схлопываются в один ранг), поэтому ошибка
    возникает только при повторе после другого значения.

    Attributes:
        value: Повторяющееся значение
        first_index: Позиция первого вхождения
        second_index: Позиция повторного (несмежного) вхождения
    """

    def __init__(self, value: Any, first_index: int, second_index: int):
        super().__init__(
            f"Duplicate value at indices {first_index} and {second_index}: {value!r}"
        )
        self.value = value
        self.first_index = first_index
        self.second_index = second_index


class EmptyInputError(ConstructionError):
    """Фабрика, требующая хотя бы одно значение, получила пустой вход"""

    pass


# =============================================================================
# DOMAIN ERRORS
# =============================================================================


class IncomparableValueError(OrderingError):
    """
    Значение вне домена partial order.

    Ошибка вызывающего кода: compare вызван для значения, которого нет
    в конечном наборе значений ordering.

    Attributes:
        value: Значение, которое не удалось сравнить
    """

    def __init__(self, value: Any):
        super().__init__(f"Cannot compare value: {value!r}")
        self.value = value


# =============================================================================
# ARGUMENT ERRORS
# =============================================================================


class InvalidArgumentError(OrderingError):
    """Обязательный аргумент (ordering, projection) отсутствует или невалиден"""

    pass
