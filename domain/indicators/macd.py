"""MACD (Moving Average Convergence Divergence) indicator."""

from collections.abc import Sequence

from domain.indicators.base import IndicatorSeries, MACDResult
from domain.indicators.errors import InvalidParameter
from domain.indicators.moving_averages import ema
from domain.indicators.series_math import (
    compact,
    pad_front,
    validate_period,
    validate_prices,
)


def _difference(a: IndicatorSeries, b: IndicatorSeries) -> IndicatorSeries:
    """Element-wise a - b, undefined where either side is."""
    return [
        None if x is None or y is None else x - y
        for x, y in zip(a, b)
    ]


def signal_line(macd_line: IndicatorSeries, period: int) -> IndicatorSeries:
    """EMA of the defined MACD values, re-aligned to the MACD line.

    Three stages: extract the defined subsequence, run the EMA over it,
    then pad it back to the original length. The EMA seed therefore comes
    from the first `period` defined MACD values, not from raw indices.

    Returns:
        Signal series; entirely None when fewer than `period` MACD values
        are defined
    """
    defined, _ = compact(macd_line)
    if len(defined) < period:
        return [None] * len(macd_line)

    return pad_front(ema(defined, period), len(macd_line))


def macd(
    closes: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9
) -> MACDResult:
    """Calculate MACD indicator.

    MACD Line = EMA(fast) - EMA(slow)
    Signal Line = EMA(MACD Line, signal periods)
    Histogram = MACD Line - Signal Line

    Args:
        closes: List of closing prices
        fast: Fast EMA period (default: 12)
        slow: Slow EMA period (default: 26)
        signal: Signal line EMA period (default: 9)

    Returns:
        MACDResult of (macd, signal, histogram)
        Each is a list with None for insufficient data points

    Raises:
        InvalidParameter: If any period <= 0 or fast >= slow
        InsufficientData: If slow or signal > len(closes)

    Example:
        >>> prices = list(range(10, 50))
        >>> macd_line, signal_values, histogram = macd(prices)
        >>> macd_line[24] is None, macd_line[25] is None
        (True, False)
        >>> signal_values[32] is None, signal_values[33] is None
        (True, False)

    Notes:
        - MACD line is undefined for the first (slow - 1) points
        - Signal line is undefined for the first (slow - 1) + (signal - 1)
        - Too few MACD values for the signal EMA leaves signal and
          histogram undefined rather than raising
    """
    validate_prices(closes, indicator="macd")
    for field, value in (("fast", fast), ("slow", slow), ("signal", signal)):
        validate_period(value, len(closes), field=field, indicator="macd", required=0)
    if fast >= slow:
        raise InvalidParameter(
            reason=f"fast period ({fast}) must be less than slow period ({slow})",
            field="fast",
            value=fast,
            indicator="macd",
        )
    validate_period(slow, len(closes), field="slow", indicator="macd")
    validate_period(signal, len(closes), field="signal", indicator="macd")

    fast_ema = ema(closes, fast)
    slow_ema = ema(closes, slow)

    macd_values = _difference(fast_ema, slow_ema)
    signal_values = signal_line(macd_values, signal)
    histogram = _difference(macd_values, signal_values)

    return MACDResult(macd=macd_values, signal=signal_values, histogram=histogram)
