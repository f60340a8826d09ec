"""
Ordering — Композиционный движок отношений порядка

Построение relations снизу вверх:
- natural_order(): собственный порядок значений
- nulls_least / nulls_greatest: позиция None
- compound / compound_of: лексикографический tie-break
- by_key / by_key_with: сравнение по ключу (key projection)
- given_order / given_order_of / enum_order: partial order над явным списком
- reverse: обращение
- build_ordering: ordering из декларативного OrderSpec

Готовый relation передаётся в sorted()/heapq/... через sort_key()
или в least_by/greatest_by.
"""

from src.core.ordering.builder import FieldGetter, build_key_ordering, build_ordering
from src.core.ordering.compound import CompoundOrder, compound, compound_of
from src.core.ordering.contract import (
    Ordering,
    SupportsLessThan,
    require_ordering,
    require_projection,
    sort_key,
)
from src.core.ordering.given import (
    GivenOrder,
    build_rank_table,
    enum_order,
    given_order,
    given_order_of,
)
from src.core.ordering.natural import NATURAL_ORDER, NaturalOrder, natural_order
from src.core.ordering.null_handling import (
    NULLS_GREATEST_ORDER,
    NULLS_LEAST_ORDER,
    NullHandlingOrder,
    NullPolarity,
    nulls_greatest,
    nulls_least,
)
from src.core.ordering.reverse import ReversedOrder, reverse
from src.core.ordering.selection import greatest_by, greatest_of, least_by, least_of
from src.core.ordering.transform import (
    STRING_FORM_ORDER,
    ByKeyOrder,
    ByKeyWithOrder,
    by_key,
    by_key_with,
)

__all__ = [
    # Contract
    "Ordering",
    "SupportsLessThan",
    "require_ordering",
    "require_projection",
    "sort_key",
    # Natural order
    "NATURAL_ORDER",
    "NaturalOrder",
    "natural_order",
    # Null handling
    "NULLS_GREATEST_ORDER",
    "NULLS_LEAST_ORDER",
    "NullHandlingOrder",
    "NullPolarity",
    "nulls_greatest",
    "nulls_least",
    # Compound
    "CompoundOrder",
    "compound",
    "compound_of",
    # Transform
    "STRING_FORM_ORDER",
    "ByKeyOrder",
    "ByKeyWithOrder",
    "by_key",
    "by_key_with",
    # Given order
    "GivenOrder",
    "build_rank_table",
    "enum_order",
    "given_order",
    "given_order_of",
    # Reverse
    "ReversedOrder",
    "reverse",
    # Selection
    "greatest_by",
    "greatest_of",
    "least_by",
    "least_of",
    # Builder
    "FieldGetter",
    "build_key_ordering",
    "build_ordering",
]
