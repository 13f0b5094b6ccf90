"""Decimal math utilities shared by indicators and condition tools."""

from decimal import Decimal, localcontext

from tradetools.config import settings

HUNDRED = Decimal("100")


def units_difference(base: Decimal, other: Decimal) -> Decimal:
    """Difference of other from base in plain units.

    Computes: base - other
    """
    return base - other


def percent_difference(base: Decimal, other: Decimal) -> Decimal:
    """Difference of other from base as a percentage of base.

    Computes: (base - other) / base x 100

    Returns:
        Percentage difference. Returns 0 when base is zero.
    """
    if base == Decimal("0"):
        return Decimal("0")
    return (base - other) / base * HUNDRED


def units_increase(value: Decimal, by: Decimal) -> Decimal:
    """Increase value by a fixed amount of units."""
    return value + by


def percent_increase(value: Decimal, by: Decimal) -> Decimal:
    """Increase value by a percentage.

    Computes: value x (1 + by / 100)
    """
    return value * (Decimal("1") + by / HUNDRED)


def decimal_sqrt(value: Decimal, precision: int | None = None) -> Decimal:
    """Calculate square root of a Decimal without a float round trip.

    Args:
        value: Non-negative Decimal value.
        precision: Significant digits to compute with. Defaults to
            settings.decimal_precision.

    Returns:
        Square root as Decimal, correctly rounded at the requested precision.

    Raises:
        ValueError: If value is negative.
    """
    if value < Decimal("0"):
        raise ValueError(f"Cannot take sqrt of negative value: {value}")
    if value == Decimal("0"):
        return Decimal("0")

    with localcontext() as ctx:
        ctx.prec = precision or settings.decimal_precision
        return value.sqrt()
