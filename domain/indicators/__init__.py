"""Technical indicators library for price charts.

This package provides pure Python implementations of common technical
indicators. Every indicator returns series aligned index-for-index with its
input, using None for positions that lack enough history.

Indicators:
    - SMA / EMA: Simple and exponential moving averages
    - Bollinger Bands: SMA +/- a multiple of the population standard deviation
    - RSI: Relative Strength Index using Wilder's smoothing
    - MACD: Moving Average Convergence Divergence
    - Support/Resistance: Rolling min/max of the preceding window
    - Series math: windowed sum, mean, standard deviation

Example:
    >>> from domain.indicators import rsi, macd, bollinger_bands
    >>>
    >>> closes = [44, 44.34, 44.09, 43.61, 44.33, 44.83, 45.10, 45.42,
    ...           45.84, 46.08, 45.89, 46.03, 45.61, 46.28, 46.28, 46.00]
    >>>
    >>> rsi_values = rsi(closes, period=14)
    >>> macd_line, signal_line, histogram = macd(closes, fast=3, slow=6, signal=3)
    >>> upper, middle, lower = bollinger_bands(closes, period=10)
"""

from domain.indicators.base import (
    BollingerResult,
    IndicatorKind,
    IndicatorSeries,
    MACDResult,
    SupportResistanceResult,
    ZeroLossPolicy,
)
from domain.indicators.bollinger import bollinger_bands
from domain.indicators.errors import (
    ErrorCode,
    IndicatorError,
    InsufficientData,
    InvalidParameter,
)
from domain.indicators.macd import macd, signal_line
from domain.indicators.moving_averages import ema, sma
from domain.indicators.rsi import RSI_LOSS_EPSILON, rsi
from domain.indicators.series_math import compact, mean, std_dev, windowed_sum
from domain.indicators.support_resistance import support_resistance

__all__ = [
    # Base types
    "IndicatorSeries",
    "IndicatorKind",
    "BollingerResult",
    "MACDResult",
    "SupportResistanceResult",
    "ZeroLossPolicy",
    # Errors
    "ErrorCode",
    "IndicatorError",
    "InvalidParameter",
    "InsufficientData",
    # Moving averages
    "sma",
    "ema",
    # Bands and oscillators
    "bollinger_bands",
    "rsi",
    "RSI_LOSS_EPSILON",
    "macd",
    "signal_line",
    "support_resistance",
    # Series math
    "windowed_sum",
    "mean",
    "std_dev",
    "compact",
]
