"""Calculation mode shared by Diff and Shift."""

from enum import Enum

from pydantic import Field, PrivateAttr, field_validator

from tradetools.errors import ConfigInvalidError
from tradetools.models import ConfigBaseModel, normalize_str


class CalcType(str, Enum):
    """How a value is applied to another.

    PERCENT: Relative, in percent
    UNITS: Absolute, in plain units
    FIXED: Replace with the configured value (only where allowed)
    """

    PERCENT = "percent"
    UNITS = "units"
    FIXED = "fixed"


class Calc(ConfigBaseModel):
    """Configured calculation mode.

    FIXED is rejected by check() unless the owner opted in via allow_fixed().
    """

    calc_type: str = Field(default="", alias="calcType")

    _allow_fixed: bool = PrivateAttr(default=False)

    @field_validator("calc_type", mode="before")
    @classmethod
    def normalize_fields(cls, value):
        return normalize_str(value)

    def allow_fixed(self) -> None:
        self._allow_fixed = True

    @property
    def fixed_allowed(self) -> bool:
        return self._allow_fixed

    def check(self) -> None:
        """Raises ConfigInvalidError if the mode is unknown or not allowed."""
        validate_calc_type(self.calc_type)

        if not self._allow_fixed and self.calc_type == CalcType.FIXED:
            raise ConfigInvalidError("calc is invalid")


def validate_calc_type(calc_type: str) -> None:
    if calc_type not in {t.value for t in CalcType}:
        raise ConfigInvalidError("calc is invalid")
