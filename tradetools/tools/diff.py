"""Difference between two values, in units or percent of the base value."""

from decimal import Decimal

from tradetools.math_utils import percent_difference, units_difference
from tradetools.tools.calc import Calc, CalcType


class Diff(Calc):
    """Difference calculator.

    units:   base - other
    percent: (base - other) / base x 100
    """

    def units_diff(self, base: Decimal, other: Decimal) -> Decimal:
        return units_difference(base, other)

    def percent_diff(self, base: Decimal, other: Decimal) -> Decimal:
        return percent_difference(base, other)

    def diff(self, base: Decimal, other: Decimal) -> Decimal:
        """Difference of other from base using the configured mode.

        Returns zero for an unknown mode.
        """
        if self.calc_type == CalcType.UNITS:
            return self.units_diff(base, other)
        if self.calc_type == CalcType.PERCENT:
            return self.percent_diff(base, other)
        return Decimal("0")
