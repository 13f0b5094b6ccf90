"""Shift a value by units, by percent, or to a fixed value before comparing."""

from decimal import Decimal

from pydantic import Field

from tradetools.errors import ConfigInvalidError
from tradetools.math_utils import percent_increase, units_increase
from tradetools.tools.calc import Calc, CalcType


class Shift(Calc):
    """Shift applied to a value, e.g. moving a band up or down by a tolerance.

    Attributes:
        shift_val: Amount of the shift. Zero is rejected.
    """

    shift_val: Decimal = Field(default=Decimal("0"), alias="shiftVal")

    def calc_val(self, value: Decimal) -> Decimal:
        """Apply the shift to value.

        units:   value + shift_val
        percent: value x (1 + shift_val / 100)
        fixed:   shift_val (only when allowed, otherwise zero)
        """
        if self.calc_type == CalcType.UNITS:
            return units_increase(value, self.shift_val)
        if self.calc_type == CalcType.PERCENT:
            return percent_increase(value, self.shift_val)
        if self.calc_type == CalcType.FIXED:
            return self.shift_val if self.fixed_allowed else Decimal("0")
        return Decimal("0")

    def check(self) -> None:
        if self.shift_val == Decimal("0"):
            raise ConfigInvalidError("shift val cannot be zero")

        super().check()
