"""Tests for moving averages.

Tests for:
- SMA (Simple Moving Average)
- WMA (Weighted Moving Average)
- EMA (Exponential Moving Average)
- Window and offset arithmetic
- Insufficient data handling
"""

from decimal import Decimal

import pytest

from tradetools.errors import ComputationError, InsufficientDataError, InvalidPriceError
from tradetools.indicators import EMA, SMA, WMA


def decimals(*values) -> list[Decimal]:
    return [Decimal(str(v)) for v in values]


class TestSMA:
    """Tests for Simple Moving Average."""

    def test_sma_calculation(self, make_candles) -> None:
        """SMA of [1, 2, 3] over 3 periods is exactly 2."""
        sma = SMA(period=3, offset=0, price="close")

        result = sma.calc(make_candles("close", [1, 2, 3]))

        assert result == Decimal("2")

    def test_sma_uses_only_newest_period_candles(self, make_candles) -> None:
        sma = SMA(period=2, offset=0, price="high")

        result = sma.calc(make_candles("high", [100, 1, 2, 3]))

        # (2 + 3) / 2
        assert result == Decimal("2.5")

    def test_sma_with_offset_skips_newest_candles(self, make_candles) -> None:
        """Offset 2 skips the two newest candles before taking the window."""
        sma = SMA(period=3, offset=2, price="close")

        result = sma.calc(make_candles("close", [1, 2, 3, 40, 50]))

        assert result == Decimal("2")

    def test_sma_candles_count(self) -> None:
        """CandlesCount = period + offset."""
        assert SMA(period=3, offset=2, price="close").candles_count == 5
        assert SMA(period=20, offset=0, price="close").candles_count == 20

    def test_sma_insufficient_candles(self, make_candles) -> None:
        sma = SMA(period=3, offset=2, price="close")

        with pytest.raises(InsufficientDataError) as exc_info:
            sma.calc(make_candles("close", [1, 2, 3, 4]))

        assert exc_info.value.required == 5
        assert exc_info.value.available == 4

    def test_sma_none_candles(self) -> None:
        sma = SMA(period=3, offset=0, price="close")

        with pytest.raises(InsufficientDataError):
            sma.calc(None)

    def test_sma_exact_candles_count_succeeds(self, make_candles) -> None:
        sma = SMA(period=4, offset=3, price="low")

        result = sma.calc(make_candles("low", [2, 4, 6, 8, 0, 0, 0]))

        assert result == Decimal("5")

    def test_sma_calc_decimal(self) -> None:
        sma = SMA(period=3, offset=1, price="close")

        result = sma.calc_decimal(decimals(3, 6, 9, 1000))

        assert result == Decimal("6")

    def test_sma_calc_decimal_insufficient(self) -> None:
        sma = SMA(period=3, offset=0, price="close")

        with pytest.raises(InsufficientDataError, match="SMA values list is too small"):
            sma.calc_decimal(decimals(1, 2))

        with pytest.raises(InsufficientDataError):
            sma.calc_decimal(None)

    def test_sma_idempotent(self, make_candles) -> None:
        """Repeated calls with the same input give identical results."""
        sma = SMA(period=3, offset=0, price="close")
        candles = make_candles("close", [1, 2, 4])

        assert sma.calc(candles) == sma.calc(candles)
        assert str(sma.calc(candles)) == str(sma.calc(candles))

    def test_sma_invalid_price(self) -> None:
        with pytest.raises(InvalidPriceError):
            SMA(period=3, offset=0, price="test")


class TestWMA:
    """Tests for Weighted Moving Average."""

    def test_wma_calculation(self, make_candles) -> None:
        """WMA = (10*1 + 40*2 + 30*3) / 6 = 30."""
        wma = WMA(period=3, offset=0, price="close")

        result = wma.calc(make_candles("close", [10, 40, 30]))

        assert result == Decimal("30")

    def test_wma_extra_candles_do_not_change_weights(self, make_candles) -> None:
        """Weights stay 1..N however many older candles precede the window."""
        wma = WMA(period=3, offset=0, price="close")

        result = wma.calc(make_candles("close", [100, 200, 10, 40, 30]))

        assert result == Decimal("30")

    def test_wma_with_offset(self, make_candles) -> None:
        wma = WMA(period=3, offset=1, price="open")

        result = wma.calc(make_candles("open", [10, 40, 30, 999]))

        assert result == Decimal("30")

    def test_wma_newest_value_weighs_most(self) -> None:
        wma = WMA(period=2, offset=0, price="close")

        # (1*1 + 4*2) / 3 = 3
        assert wma.calc_decimal(decimals(1, 4)) == Decimal("3")

    def test_wma_candles_count(self) -> None:
        assert WMA(period=3, offset=2, price="close").candles_count == 5

    def test_wma_insufficient(self, make_candles) -> None:
        wma = WMA(period=3, offset=0, price="close")

        with pytest.raises(InsufficientDataError, match="WMA candles list is too small"):
            wma.calc(make_candles("close", [1, 2]))

        with pytest.raises(InsufficientDataError, match="WMA values list is too small"):
            wma.calc_decimal(None)

    def test_wma_calc_decimal(self) -> None:
        wma = WMA(period=3, offset=0, price="close")

        assert wma.calc_decimal(decimals(10, 40, 30)) == Decimal("30")


class TestEMA:
    """Tests for Exponential Moving Average."""

    def test_ema_candles_count(self) -> None:
        """EMA needs an extra period for its seed: period * 2 + offset."""
        assert EMA(period=3, offset=2, price="close").candles_count == 8
        assert EMA(period=3, offset=0, price="close").candles_count == 6

    def test_ema_seed_is_sma_with_extended_offset(self) -> None:
        ema = EMA(period=3, offset=2, price="close")

        assert isinstance(ema.seed, SMA)
        assert ema.seed.period == 3
        assert ema.seed.offset == 5

    def test_ema_multiplier(self) -> None:
        assert EMA(period=3, offset=0, price="close").multiplier == Decimal("0.5")
        assert EMA(period=4, offset=0, price="close").multiplier == Decimal("0.4")

    def test_ema_with_fake_seed(self, make_candles, fake_ma) -> None:
        """Seed 10, k=0.5: 10 -> 10 -> 15 -> 22.5."""
        seed = fake_ma(Decimal("10"), period=3, offset=3)
        ema = EMA(period=3, offset=0, price="close", seed=seed)

        result = ema.calc(make_candles("close", [10, 20, 30]))

        assert result == Decimal("22.5")

    def test_ema_with_fake_seed_and_offset(self, make_candles, fake_ma) -> None:
        seed = fake_ma(Decimal("10"), period=3, offset=4, price="open")
        ema = EMA(period=3, offset=1, price="open", seed=seed)

        result = ema.calc(make_candles("open", [10, 20, 30, 40]))

        assert result == Decimal("22.5")

    def test_ema_four_periods(self, make_candles, fake_ma) -> None:
        """Seed 10, k=0.4: 10 -> 14 -> 20.4 -> 28.24."""
        seed = fake_ma(Decimal("10"), period=4, offset=4, price="low")
        ema = EMA(period=4, offset=0, price="low", seed=seed)

        result = ema.calc(make_candles("low", [10, 20, 30, 40]))

        assert result == Decimal("28.24")

    def test_ema_with_real_seed_and_offset(self, make_candles) -> None:
        """Seed = SMA(10, 11, 12) = 11, then 13 -> 12, 14 -> 13, 15 -> 14."""
        ema = EMA(period=3, offset=1, price="high")

        result = ema.calc(make_candles("high", [10, 11, 12, 13, 14, 15, 16]))

        assert result == Decimal("14")

    def test_ema_exact_candles_count(self, make_candles) -> None:
        ema = EMA(period=3, offset=0, price="close")
        candles = make_candles("close", [10, 20, 30, 40, 50, 60])

        assert len(candles) == ema.candles_count
        # seed 20, then 40 -> 30, 50 -> 40, 60 -> 50
        assert ema.calc(candles) == Decimal("50")

    def test_ema_seed_failure_keeps_cause(self, make_candles) -> None:
        ema = EMA(period=3, offset=0, price="close")

        with pytest.raises(InsufficientDataError, match="EMA candles list is too small") as exc_info:
            ema.calc(make_candles("close", [10, 20]))

        assert isinstance(exc_info.value.__cause__, InsufficientDataError)
        assert "SMA" in str(exc_info.value.__cause__)
        assert exc_info.value.required == 6

    def test_ema_checks_length_independently_of_seed(self, make_candles, fake_ma) -> None:
        """A seed that succeeds does not bypass EMA's own length check."""
        seed = fake_ma(Decimal("10"), period=3, offset=3)
        ema = EMA(period=3, offset=0, price="close", seed=seed)

        with pytest.raises(InsufficientDataError) as exc_info:
            ema.calc(make_candles("close", [10, 20]))

        assert exc_info.value.__cause__ is None

        with pytest.raises(InsufficientDataError):
            ema.calc(None)

    def test_ema_other_seed_errors_propagate_unchanged(self, make_candles, fake_ma) -> None:
        error = ComputationError("broken seed")
        seed = fake_ma(error=error, period=3, offset=3)
        ema = EMA(period=3, offset=0, price="close", seed=seed)

        with pytest.raises(ComputationError) as exc_info:
            ema.calc(make_candles("close", [10, 20, 30, 40, 50, 60]))

        assert exc_info.value is error

    def test_ema_calc_decimal(self, fake_ma) -> None:
        seed = fake_ma(Decimal("10"), period=3, offset=3)
        ema = EMA(period=3, offset=0, price="close", seed=seed)

        assert ema.calc_decimal(decimals(10, 20, 30)) == Decimal("22.5")

    def test_ema_calc_decimal_real_seed(self) -> None:
        ema = EMA(period=3, offset=1, price="close")

        result = ema.calc_decimal(decimals(10, 11, 12, 13, 14, 15, 16))

        assert result == Decimal("14")

    def test_ema_calc_decimal_insufficient(self) -> None:
        ema = EMA(period=3, offset=0, price="close")

        with pytest.raises(InsufficientDataError, match="EMA values list is too small"):
            ema.calc_decimal(decimals(10, 20))

    def test_ema_invalid_price(self) -> None:
        with pytest.raises(InvalidPriceError):
            EMA(period=3, offset=0, price="volume")


class TestInsufficientDataBoundary:
    """calc fails below candles_count and succeeds at exactly candles_count."""

    @pytest.mark.parametrize("cls", [SMA, WMA, EMA])
    @pytest.mark.parametrize("period,offset", [(1, 0), (3, 0), (3, 2), (5, 4)])
    def test_boundary(self, cls, period, offset, make_candles) -> None:
        ma = cls(period, offset, "close")
        values = list(range(1, ma.candles_count + 1))

        with pytest.raises(InsufficientDataError):
            ma.calc(make_candles("close", values[:-1]))

        result = ma.calc(make_candles("close", values))

        assert result > Decimal("0")
