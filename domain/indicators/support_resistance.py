"""Support and resistance envelope."""

from collections.abc import Sequence

from domain.indicators.base import SupportResistanceResult
from domain.indicators.series_math import validate_period, validate_prices


def support_resistance(
    closes: Sequence[float],
    period: int = 14
) -> SupportResistanceResult:
    """Calculate rolling support (min) and resistance (max) levels.

    Args:
        closes: List of closing prices
        period: Lookback period (default: 14)

    Returns:
        SupportResistanceResult of (support, resistance), with None for the
        first (period) points

    Raises:
        InvalidParameter: If period <= 0
        InsufficientData: If len(closes) <= period

    Example:
        >>> prices = [10, 12, 11, 15, 14, 13]
        >>> support, resistance = support_resistance(prices, 3)
        >>> support
        [None, None, None, 10, 11, 11]
        >>> resistance
        [None, None, None, 12, 15, 15]

    Notes:
        - The window is prices[i - period .. i - 1] and leaves out the
          current bar, unlike SMA and Bollinger
    """
    validate_prices(closes, indicator="support_resistance")
    validate_period(period, len(closes), indicator="support_resistance", required=period + 1)

    support = [None] * period
    resistance = [None] * period

    for i in range(period, len(closes)):
        window = closes[i - period:i]
        support.append(min(window))
        resistance.append(max(window))

    return SupportResistanceResult(support=support, resistance=resistance)
