"""Moving average indicators."""

from collections.abc import Sequence

from domain.indicators.base import IndicatorSeries
from domain.indicators.series_math import (
    mean,
    pad_front,
    validate_period,
    validate_prices,
    windowed_sum,
)


def sma(values: Sequence[float], period: int) -> IndicatorSeries:
    """Calculate Simple Moving Average.

    Args:
        values: List of values to calculate SMA over
        period: Number of periods for the moving average

    Returns:
        List of SMA values, with None for the first (period - 1) points

    Raises:
        InvalidParameter: If period <= 0
        InsufficientData: If period > len(values)

    Example:
        >>> prices = [10, 11, 12, 13, 14, 15]
        >>> sma(prices, 3)
        [None, None, 11.0, 12.0, 13.0, 14.0]
    """
    validate_prices(values, indicator="sma")
    validate_period(period, len(values), indicator="sma")

    result = [None] * (period - 1)

    for i in range(period - 1, len(values)):
        result.append(windowed_sum(values, period, i) / period)

    return result


def ema(values: Sequence[float], period: int) -> IndicatorSeries:
    """Calculate Exponential Moving Average.

    Uses standard exponential smoothing with multiplier = 2/(period+1),
    seeded with the simple mean of the first `period` values.

    Args:
        values: List of values to calculate EMA over
        period: Number of periods for the moving average

    Returns:
        List of EMA values, with None for the first (period - 1) points

    Raises:
        InvalidParameter: If period <= 0
        InsufficientData: If period > len(values)

    Example:
        >>> prices = [10, 11, 12, 13, 14, 15]
        >>> ema(prices, 3)
        [None, None, 11.0, 12.0, 13.0, 14.0]
    """
    validate_prices(values, indicator="ema")
    validate_period(period, len(values), indicator="ema")

    multiplier = 2.0 / (period + 1)

    # WHY: First EMA value is SMA of first 'period' values
    current = mean(values[:period])
    result = [current]

    for i in range(period, len(values)):
        current = (values[i] - current) * multiplier + current
        result.append(current)

    return pad_front(result, len(values))
