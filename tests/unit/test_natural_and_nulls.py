"""
Тесты для Natural Order и Null-Handling Order

Проверяет:
1. Natural order: делегирование `<`, identity fast path, total order чисел
2. Пропагацию TypeError для несравнимых значений
3. Null handling: полярность, None vs None, изоляцию обёрнутого ordering
4. Валидацию аргументов фабрик
"""

import functools
from fractions import Fraction

import pytest

from src.core.domain.sign import Sign
from src.core.errors import InvalidArgumentError
from src.core.ordering import (
    NATURAL_ORDER,
    NULLS_GREATEST_ORDER,
    NULLS_LEAST_ORDER,
    NaturalOrder,
    NullHandlingOrder,
    NullPolarity,
    SupportsLessThan,
    natural_order,
    nulls_greatest,
    nulls_least,
    sort_key,
)


class RecordingOrder:
    """Ordering, записывающий все переданные ему пары"""

    def __init__(self):
        self.calls = []

    def compare(self, a, b):
        self.calls.append((a, b))
        return NATURAL_ORDER.compare(a, b)


class Uncomparable:
    """Значение, сравнение которого всегда падает"""

    def __lt__(self, other):
        raise RuntimeError("comparison exploded")


class FixedOrder:
    """Ordering с фиксированным (возможно, не нормализованным) результатом"""

    def __init__(self, result):
        self.result = result

    def compare(self, a, b):
        return self.result


# =============================================================================
# NATURAL ORDER
# =============================================================================


class TestNaturalOrder:
    """Тесты для natural_order"""

    def test_basic_comparisons(self) -> None:
        """Делегирование собственному порядку значений"""
        order = natural_order()

        assert order.compare(1, 2) is Sign.NEGATIVE
        assert order.compare("b", "a") is Sign.POSITIVE
        assert order.compare((1, 2), (1, 2)) is Sign.ZERO
        assert order.compare(Fraction(1, 3), 0.5) is Sign.NEGATIVE

    def test_reflexivity(self) -> None:
        """compare(x, x) == ZERO"""
        for value in [0, -1.5, "abc", (3, "x"), float("nan"), Fraction(2, 7)]:
            assert NATURAL_ORDER.compare(value, value) is Sign.ZERO

    def test_identity_fast_path_skips_comparison(self) -> None:
        """Для идентичной ссылки `<` не вызывается"""
        value = Uncomparable()
        assert NATURAL_ORDER.compare(value, value) is Sign.ZERO

    def test_comparison_errors_propagate(self) -> None:
        """Ошибки собственного сравнения пропагируют без изменений"""
        with pytest.raises(RuntimeError, match="comparison exploded"):
            NATURAL_ORDER.compare(Uncomparable(), Uncomparable())

    def test_incomparable_types_raise_type_error(self) -> None:
        """Несравнимые типы → TypeError (не оборачивается)"""
        with pytest.raises(TypeError):
            NATURAL_ORDER.compare(1, "1")

    def test_numbers_use_float_total_order(self) -> None:
        """NaN больше всех чисел, -0.0 == 0.0"""
        nan = float("nan")
        assert NATURAL_ORDER.compare(nan, 1.0) is Sign.POSITIVE
        assert NATURAL_ORDER.compare(1, nan) is Sign.NEGATIVE
        assert NATURAL_ORDER.compare(-0.0, 0.0) is Sign.ZERO
        assert NATURAL_ORDER.compare(float("nan"), float("nan")) is Sign.ZERO

    def test_instances_are_equal(self) -> None:
        """Любые два экземпляра natural order равны (singleton не нужен)"""
        assert NaturalOrder() == NaturalOrder()
        assert NaturalOrder() == natural_order()
        assert hash(NaturalOrder()) == hash(NATURAL_ORDER)
        assert natural_order() is NATURAL_ORDER

    def test_natural_domain_supports_less_than(self) -> None:
        """Значения natural order реализуют SupportsLessThan"""
        for value in [1, 2.5, "abc", (1, "x"), Fraction(1, 3), Uncomparable()]:
            assert isinstance(value, SupportsLessThan)


# =============================================================================
# NULL HANDLING
# =============================================================================


class TestNullsLeast:
    """Тесты для nulls_least"""

    def test_null_vs_present(self) -> None:
        """None меньше любого значения"""
        order = nulls_least(natural_order())

        assert order.compare(None, 1) is Sign.NEGATIVE
        assert order.compare(1, None) is Sign.POSITIVE
        assert order.compare(None, None) is Sign.ZERO

    def test_present_values_use_wrapped(self) -> None:
        """Два присутствующих значения сравниваются обёрнутым ordering"""
        order = nulls_least(natural_order())

        assert order.compare(1, 2) is Sign.NEGATIVE
        assert order.compare("b", "a") is Sign.POSITIVE
        assert order.compare(5, 5) is Sign.ZERO

    def test_wrapped_never_sees_none(self) -> None:
        """Обёрнутый ordering никогда не получает None"""
        inner = RecordingOrder()
        order = nulls_least(inner)

        order.compare(None, 3)
        order.compare(3, None)
        order.compare(None, None)
        order.compare(2, 3)

        assert inner.calls == [(2, 3)]

    def test_null_sign_independent_of_inner(self) -> None:
        """Полярность не зависит от обёрнутого ordering"""
        order = nulls_least(RecordingOrder())
        assert order.compare(None, float("nan")) is Sign.NEGATIVE

    def test_default_wraps_natural_order(self) -> None:
        """Без аргумента оборачивается natural order"""
        assert nulls_least() == NULLS_LEAST_ORDER
        assert nulls_least().ordering == NATURAL_ORDER

    def test_sort(self) -> None:
        """None сортируются первыми"""
        result = sorted([3, None, 1, None, 2], key=sort_key(nulls_least(natural_order())))
        assert result == [None, None, 1, 2, 3]

    def test_present_result_normalized_to_sign(self) -> None:
        """Произвольный int обёрнутого ordering приводится к Sign"""
        assert nulls_least(FixedOrder(-17)).compare(1, 2) is Sign.NEGATIVE
        assert nulls_least(FixedOrder(42)).compare(1, 2) is Sign.POSITIVE
        assert nulls_greatest(FixedOrder(0)).compare(1, 2) is Sign.ZERO


class TestNullsGreatest:
    """Тесты для nulls_greatest"""

    def test_polarity_flips_signs(self) -> None:
        """Знаки для None противоположны nulls_least"""
        order = nulls_greatest(natural_order())

        assert order.compare(None, 1) is Sign.POSITIVE
        assert order.compare(1, None) is Sign.NEGATIVE
        assert order.compare(None, None) is Sign.ZERO
        assert order.compare(1, 2) is Sign.NEGATIVE

    def test_default_wraps_natural_order(self) -> None:
        assert nulls_greatest() == NULLS_GREATEST_ORDER

    def test_sort(self) -> None:
        """None сортируются последними"""
        result = sorted(["b", None, "a"], key=sort_key(nulls_greatest()))
        assert result == ["a", "b", None]


class TestNullHandlingValidation:
    """Валидация аргументов null handling"""

    def test_none_ordering_rejected(self) -> None:
        """Явный None вместо ordering → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="ordering is required"):
            nulls_least(None)  # type: ignore[arg-type]

        with pytest.raises(InvalidArgumentError, match="ordering is required"):
            nulls_greatest(None)  # type: ignore[arg-type]

    def test_non_ordering_rejected(self) -> None:
        """Объект без compare() → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="must implement compare"):
            nulls_least(len)  # type: ignore[arg-type]

    def test_equality_requires_same_polarity_and_inner(self) -> None:
        """Равенство: та же полярность и равный обёрнутый ordering"""
        assert nulls_least(NaturalOrder()) == nulls_least(NaturalOrder())
        assert hash(nulls_least(NaturalOrder())) == hash(nulls_least(NaturalOrder()))
        assert nulls_least() != nulls_greatest()
        assert NullHandlingOrder(NATURAL_ORDER, NullPolarity.LEAST) == NULLS_LEAST_ORDER

    def test_immutable(self) -> None:
        """Конфигурация не изменяется после конструирования"""
        import dataclasses

        with pytest.raises(dataclasses.FrozenInstanceError):
            NULLS_LEAST_ORDER.polarity = NullPolarity.GREATEST  # type: ignore[misc]

    def test_polarity_value_converted(self) -> None:
        """Строковое значение полярности приводится к NullPolarity"""
        order = NullHandlingOrder(NATURAL_ORDER, "least")  # type: ignore[arg-type]

        assert order.polarity is NullPolarity.LEAST
        assert order.compare(None, 1) is Sign.NEGATIVE
        assert order == NULLS_LEAST_ORDER

    def test_unknown_polarity_rejected(self) -> None:
        """Неизвестная полярность → InvalidArgumentError при конструировании"""
        with pytest.raises(InvalidArgumentError, match="polarity must be one of"):
            NullHandlingOrder(NATURAL_ORDER, "middle")  # type: ignore[arg-type]

        with pytest.raises(InvalidArgumentError, match="polarity must be one of"):
            NullHandlingOrder(NATURAL_ORDER, None)  # type: ignore[arg-type]


def test_sort_key_rejects_missing_ordering() -> None:
    """sort_key требует ordering"""
    with pytest.raises(InvalidArgumentError):
        sort_key(None)  # type: ignore[arg-type]


def test_sort_key_matches_cmp_to_key() -> None:
    """sort_key эквивалентен functools.cmp_to_key(ordering.compare)"""
    values = [5, 3, 9, 1]
    assert sorted(values, key=sort_key(NATURAL_ORDER)) == sorted(
        values, key=functools.cmp_to_key(NATURAL_ORDER.compare)
    )
