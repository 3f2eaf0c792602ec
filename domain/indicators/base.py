"""Base types for technical indicators."""

from collections.abc import Iterator
from dataclasses import dataclass, fields
from enum import Enum

# None marks positions without enough history
IndicatorSeries = list[float | None]


class _SeriesBundle:
    """Mixin for results made of several aligned series.

    Unpacks in field order, so `upper, middle, lower = bollinger_bands(...)`
    keeps working.
    """

    def __iter__(self) -> Iterator[IndicatorSeries]:
        return (getattr(self, f.name) for f in fields(self))

    def as_dict(self) -> dict[str, IndicatorSeries]:
        """Map each output name to its series."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class BollingerResult(_SeriesBundle):
    """Bollinger Bands output.

    Attributes:
        upper: Middle band plus `deviation` standard deviations
        middle: SMA of the prices
        lower: Middle band minus `deviation` standard deviations
    """
    upper: IndicatorSeries
    middle: IndicatorSeries
    lower: IndicatorSeries


@dataclass(frozen=True)
class MACDResult(_SeriesBundle):
    """MACD output.

    Attributes:
        macd: Fast EMA minus slow EMA
        signal: EMA of the defined MACD values, re-aligned to the prices
        histogram: MACD minus signal
    """
    macd: IndicatorSeries
    signal: IndicatorSeries
    histogram: IndicatorSeries


@dataclass(frozen=True)
class SupportResistanceResult(_SeriesBundle):
    """Rolling min/max envelope over the preceding window."""
    support: IndicatorSeries
    resistance: IndicatorSeries


class ZeroLossPolicy(str, Enum):
    """How RSI treats a zero average loss."""

    SATURATE = "saturate"  # RSI is exactly 100
    EPSILON = "epsilon"    # average loss replaced by RSI_LOSS_EPSILON


class IndicatorKind(str, Enum):
    """Indicators a caller can select by name."""

    MA = "ma"
    EMA = "ema"
    BOLLINGER = "bollinger"
    RSI = "rsi"
    MACD = "macd"
    SUPPORT_RESISTANCE = "support_resistance"
