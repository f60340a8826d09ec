"""
Core math modules

Total-order сравнение примитивных типов.
"""

from src.core.math.primitives import (
    CHAR_LENGTH,
    compare_bool,
    compare_char,
    compare_float,
    compare_int,
    is_nan,
    is_real_number,
)

__all__ = [
    # Constants
    "CHAR_LENGTH",
    # Primitive comparisons
    "compare_bool",
    "compare_char",
    "compare_float",
    "compare_int",
    # Helpers
    "is_nan",
    "is_real_number",
]
