from .table import (
    FeeSchedule,
    RateTable,
    REFERENCE_RATE_TABLE,
    build_rate_table,
    with_fees,
)
from .conversion import calculate_conversion, validate_amount

__all__ = [
    "FeeSchedule",
    "RateTable",
    "REFERENCE_RATE_TABLE",
    "build_rate_table",
    "with_fees",
    "calculate_conversion",
    "validate_amount",
]
