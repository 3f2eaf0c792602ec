from .indicators import (
    BollingerResult,
    IndicatorError,
    IndicatorKind,
    IndicatorSeries,
    InsufficientData,
    InvalidParameter,
    MACDResult,
    SupportResistanceResult,
    ZeroLossPolicy,
    bollinger_bands,
    ema,
    macd,
    rsi,
    sma,
    support_resistance,
)

__all__ = [
    # Types
    "IndicatorSeries",
    "IndicatorKind",
    "BollingerResult",
    "MACDResult",
    "SupportResistanceResult",
    "ZeroLossPolicy",
    # Errors
    "IndicatorError",
    "InvalidParameter",
    "InsufficientData",
    # Indicators
    "sma",
    "ema",
    "bollinger_bands",
    "rsi",
    "macd",
    "support_resistance",
]
