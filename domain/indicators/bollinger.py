"""Bollinger Bands indicator."""

import math
from collections.abc import Sequence

from domain.indicators.base import BollingerResult
from domain.indicators.errors import InvalidParameter
from domain.indicators.moving_averages import sma
from domain.indicators.series_math import std_dev


def bollinger_bands(
    closes: Sequence[float],
    period: int = 20,
    deviation: float = 2.0
) -> BollingerResult:
    """Calculate Bollinger Bands.

    Upper Band = SMA + (deviation * standard_deviation)
    Middle Band = SMA
    Lower Band = SMA - (deviation * standard_deviation)

    Args:
        closes: List of closing prices
        period: Period for SMA and standard deviation (default: 20)
        deviation: Number of standard deviations for bands (default: 2.0)

    Returns:
        BollingerResult of (upper, middle, lower), each with None for the
        first (period - 1) points

    Raises:
        InvalidParameter: If period <= 0, or deviation is negative or not finite
        InsufficientData: If period > len(closes)

    Example:
        >>> prices = [20, 21, 22, 23, 24, 25, 24, 23, 22, 21,
        ...           20, 21, 22, 23, 24, 25, 26, 27, 28, 29,
        ...           30, 29, 28, 27, 26]
        >>> upper, middle, lower = bollinger_bands(prices, period=20)
        >>> middle[-1]  # Most recent SMA
        25.0

    Notes:
        - Population standard deviation (divides by period)
        - Deviation is measured around the already computed middle band
    """
    if (
        isinstance(deviation, bool)
        or not isinstance(deviation, (int, float))
        or not math.isfinite(deviation)
        or deviation < 0
    ):
        raise InvalidParameter(
            reason=f"deviation must be a finite non-negative number, got {deviation!r}",
            field="deviation",
            value=deviation,
            indicator="bollinger",
        )

    middle_band = sma(closes, period)

    upper_band = [None] * (period - 1)
    lower_band = [None] * (period - 1)

    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1:i + 1]
        center = middle_band[i]
        spread = deviation * std_dev(window, center)

        upper_band.append(center + spread)
        lower_band.append(center - spread)

    return BollingerResult(upper=upper_band, middle=middle_band, lower=lower_band)
