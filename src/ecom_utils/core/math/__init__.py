"""
Core math modules для ecom-utils

Денежная арифметика с единым правилом округления.
"""

from ecom_utils.core.math.money import (
    MONEY_DECIMAL_PLACES,
    clamp,
    is_valid_amount,
    percent_of,
    round_money,
    validate_in_range,
    validate_non_negative,
)

__all__ = [
    "MONEY_DECIMAL_PLACES",
    # Rounding
    "round_money",
    "percent_of",
    "clamp",
    # Validation
    "is_valid_amount",
    "validate_non_negative",
    "validate_in_range",
]
