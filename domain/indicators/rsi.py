"""Relative Strength Index (RSI) indicator."""

from collections.abc import Sequence

from domain.indicators.base import IndicatorSeries, ZeroLossPolicy
from domain.indicators.errors import InvalidParameter
from domain.indicators.series_math import mean, validate_period, validate_prices

# Stand-in for a zero average loss under ZeroLossPolicy.EPSILON
RSI_LOSS_EPSILON = 0.001


def _rsi_value(avg_gain: float, avg_loss: float, zero_loss: ZeroLossPolicy) -> float:
    if avg_loss == 0:
        if zero_loss is ZeroLossPolicy.SATURATE:
            return 100.0
        avg_loss = RSI_LOSS_EPSILON

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))


def rsi(
    closes: Sequence[float],
    period: int = 14,
    zero_loss: ZeroLossPolicy | str = ZeroLossPolicy.SATURATE,
) -> IndicatorSeries:
    """Calculate RSI using Wilder's smoothing method.

    Returns values on 0-100 scale.

    Args:
        closes: List of closing prices
        period: RSI period (default: 14)
        zero_loss: What to do when the average loss is zero.
            SATURATE returns exactly 100; EPSILON substitutes
            RSI_LOSS_EPSILON for the average loss.

    Returns:
        List of RSI values (0-100), with None for the first (period) points

    Raises:
        InvalidParameter: If period <= 0 or zero_loss is unknown
        InsufficientData: If len(closes) <= period

    Example:
        >>> prices = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
        ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
        >>> result = rsi(prices, 14)
        >>> round(result[14], 2)
        72.98

    Notes:
        - Wilder's smoothing: New avg = (prev_avg * (period-1) + current) / period
        - First RSI value appears at index (period), not (period-1)
        - Under EPSILON a flat series gives 0.0, under SATURATE it gives 100.0
    """
    try:
        zero_loss = ZeroLossPolicy(zero_loss)
    except ValueError:
        raise InvalidParameter(
            reason=f"Unknown zero_loss policy: {zero_loss!r}",
            field="zero_loss",
            value=zero_loss,
            indicator="rsi",
        ) from None

    validate_prices(closes, indicator="rsi")
    # WHY: Differencing eats one point, so period changes need period + 1 prices
    validate_period(period, len(closes), indicator="rsi", required=period + 1)

    gains = []
    losses = []
    for i in range(1, len(closes)):
        change = closes[i] - closes[i - 1]
        gains.append(max(change, 0))
        losses.append(max(-change, 0))

    # WHY: First average is simple average
    avg_gain = mean(gains[:period])
    avg_loss = mean(losses[:period])

    result = [None] * period
    result.append(_rsi_value(avg_gain, avg_loss, zero_loss))

    for i in range(period, len(gains)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        result.append(_rsi_value(avg_gain, avg_loss, zero_loss))

    return result
