"""
Shipping rate calculation.

Postal codes are Brazilian CEPs: eight digits, usually written as
``NNNNN-NNN``. The cost of a shipment is

    cost = base_rate + region * region_step + sector * sector_step

where ``region`` is the first digit of the code and ``sector`` is the
number formed by the second and third digits. The result is rounded
half-up to cents. The calculator keeps no state, so the same code always
yields the same cost.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from shared.errors import InvalidInputError

ZIPCODE_LENGTH = 8
_SEPARATORS = str.maketrans("", "", "-. \t")
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class ShippingQuote:
    zipcode: str
    cost: Decimal


def normalize_zipcode(raw: str) -> str:
    """Strip separators from a postal code and check that 8 digits remain."""
    digits = raw.strip().translate(_SEPARATORS)
    if len(digits) != ZIPCODE_LENGTH or not (digits.isascii() and digits.isdigit()):
        raise InvalidInputError(
            "Postal code must contain exactly 8 digits",
            details={"zipcode": raw}
        )
    return digits


@dataclass(frozen=True)
class RateCalculator:
    base_rate: Decimal = Decimal("9.90")
    region_step: Decimal = Decimal("1.75")
    sector_step: Decimal = Decimal("0.05")

    def quote(self, zipcode: str) -> ShippingQuote:
        digits = normalize_zipcode(zipcode)
        region = int(digits[0])
        sector = int(digits[1:3])

        cost = self.base_rate + region * self.region_step + sector * self.sector_step
        return ShippingQuote(zipcode=digits, cost=cost.quantize(_CENTS, rounding=ROUND_HALF_UP))
