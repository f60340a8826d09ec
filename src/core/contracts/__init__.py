"""
Contract Validation Module

JSON Schema контракты для декларативных описаний ordering.
"""

from .validators import (
    ORDER_SPEC_SCHEMA,
    ContractValidator,
    OrderSpecValidator,
    SchemaLoader,
    default_loader,
    format_error_path,
    validate_order_spec,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OrderSpecValidator",
    # Functions
    "default_loader",
    "format_error_path",
    "validate_order_spec",
    # Constants
    "ORDER_SPEC_SCHEMA",
]
