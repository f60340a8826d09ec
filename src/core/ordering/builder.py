"""
Order Builder — Построение ordering из декларативного OrderSpec

Для каждого ключа OrderSpec:
1. key ordering = given_order(values) если задан given_order, иначе natural order
2. descending → reverse(key ordering)
3. nulls → nulls_least/nulls_greatest поверх (позиция None абсолютна и
   не переворачивается descending)
4. projection = FieldGetter(field, accessor)
Ключи объединяются через compound в порядке приоритета.

Projection — frozen dataclass, поэтому два ordering, построенных из
равных OrderSpec, структурно равны.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from src.core.contracts import validate_order_spec
from src.core.domain.order_spec import Accessor, NullPlacement, OrderSpec, SortKeySpec
from src.core.errors import InvalidArgumentError
from src.core.ordering.compound import CompoundOrder, compound
from src.core.ordering.contract import Ordering
from src.core.ordering.given import given_order
from src.core.ordering.natural import NATURAL_ORDER
from src.core.ordering.null_handling import nulls_greatest, nulls_least
from src.core.ordering.reverse import reverse
from src.core.ordering.transform import by_key, by_key_with

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldGetter:
    """
    Projection value → value.<field> или value[<field>].

    Raises:
        InvalidArgumentError: Если accessor не attribute/item (при создании)
        AttributeError / KeyError: Если поля нет (при вызове, пропагирует без изменений)
    """

    field: str
    accessor: Accessor = Accessor.ATTRIBUTE

    def __post_init__(self) -> None:
        try:
            accessor = Accessor(self.accessor)
        except ValueError:
            raise InvalidArgumentError(
                f"accessor must be one of {[a.value for a in Accessor]}, got {self.accessor!r}"
            ) from None
        object.__setattr__(self, "accessor", accessor)

    def __call__(self, value: Any) -> Any:
        if self.accessor is Accessor.ITEM:
            return value[self.field]
        return getattr(value, self.field)


# =============================================================================
# BUILDER
# =============================================================================


def build_key_ordering(key: SortKeySpec, accessor: Accessor = Accessor.ATTRIBUTE) -> Ordering:
    """
    Ordering для одного ключа OrderSpec.

    Raises:
        DuplicateValueError: Если given_order содержит несмежные дубликаты
    """
    key_ordering: Ordering = NATURAL_ORDER
    if key.given_order is not None:
        key_ordering = given_order(key.given_order)

    if key.descending:
        key_ordering = reverse(key_ordering)

    if key.nulls is NullPlacement.FIRST:
        key_ordering = nulls_least(key_ordering)
    elif key.nulls is NullPlacement.LAST:
        key_ordering = nulls_greatest(key_ordering)

    getter = FieldGetter(key.field, accessor)
    if key_ordering is NATURAL_ORDER:
        return by_key(getter)
    return by_key_with(getter, key_ordering)


def build_ordering(spec: Union[OrderSpec, Mapping[str, Any]]) -> CompoundOrder:
    """
    Ordering из OrderSpec или сырого JSON-документа.

    Сырой документ сначала проверяется JSON Schema контрактом order_spec,
    затем преобразуется в OrderSpec.

    Args:
        spec: OrderSpec или dict, соответствующий order_spec.json

    Returns:
        CompoundOrder с одним компонентом на ключ

    Raises:
        jsonschema.ValidationError: Если документ нарушает контракт
        pydantic.ValidationError: Если документ не проходит валидацию модели
        DuplicateValueError: Если given_order ключа содержит несмежные дубликаты
    """
    if not isinstance(spec, OrderSpec):
        data = dict(spec)
        validate_order_spec(data)
        spec = OrderSpec.model_validate(data)

    orderings = [build_key_ordering(key, spec.accessor) for key in spec.keys]

    logger.debug(
        "Built ordering from spec: fields=%s accessor=%s",
        [key.field for key in spec.keys],
        spec.accessor.value,
    )
    return compound(orderings)
