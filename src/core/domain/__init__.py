"""
Domain models and value objects.

Contains the comparison result type (Sign) and declarative order specs.
"""

from src.core.domain.order_spec import Accessor, NullPlacement, OrderSpec, SortKeySpec
from src.core.domain.sign import Sign

__all__ = [
    # Sign
    "Sign",
    # Order spec models
    "Accessor",
    "NullPlacement",
    "OrderSpec",
    "SortKeySpec",
]
