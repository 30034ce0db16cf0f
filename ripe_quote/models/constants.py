"""Domain constants and enumerations for validation.

The supported target currencies are a closed set; adding a currency means
adding a record to the rate table as well as a member here.
"""

from enum import Enum
from typing import FrozenSet


class CurrencyCode(str, Enum):
    PHP = "PHP"
    THB = "THB"
    IDR = "IDR"
    MYR = "MYR"
    VND = "VND"


SOURCE_CURRENCY: str = "USDC"

# Formatted without fractional digits. Explicit list, not a magnitude check.
HIGH_DENOMINATION_CURRENCIES: FrozenSet[str] = frozenset(
    {CurrencyCode.IDR.value, CurrencyCode.VND.value}
)
