"""
Indicator pipeline.

Maps indicator names to the engine functions and their configured
parameters, and computes a selection of indicators over one price series.
Errors from the engine propagate unchanged.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Callable

from config.schema import IndicatorParams
from domain.indicators import (
    IndicatorKind,
    IndicatorSeries,
    InvalidParameter,
    bollinger_bands,
    ema,
    macd,
    rsi,
    sma,
    support_resistance,
)

logger = logging.getLogger(__name__)

IndicatorOutputs = dict[str, IndicatorSeries]


def _compute_ma(prices: Sequence[float], params: IndicatorParams) -> IndicatorOutputs:
    return {"ma": sma(prices, params.moving_average.sma_period)}


def _compute_ema(prices: Sequence[float], params: IndicatorParams) -> IndicatorOutputs:
    return {"ema": ema(prices, params.moving_average.ema_period)}


def _compute_bollinger(prices: Sequence[float], params: IndicatorParams) -> IndicatorOutputs:
    cfg = params.bollinger
    return bollinger_bands(prices, period=cfg.period, deviation=cfg.deviation).as_dict()


def _compute_rsi(prices: Sequence[float], params: IndicatorParams) -> IndicatorOutputs:
    cfg = params.rsi
    return {"rsi": rsi(prices, period=cfg.period, zero_loss=cfg.zero_loss)}


def _compute_macd(prices: Sequence[float], params: IndicatorParams) -> IndicatorOutputs:
    cfg = params.macd
    return macd(prices, fast=cfg.fast, slow=cfg.slow, signal=cfg.signal).as_dict()


def _compute_support_resistance(prices: Sequence[float], params: IndicatorParams) -> IndicatorOutputs:
    return support_resistance(prices, period=params.support_resistance.period).as_dict()


INDICATORS: dict[IndicatorKind, Callable[[Sequence[float], IndicatorParams], IndicatorOutputs]] = {
    IndicatorKind.MA: _compute_ma,
    IndicatorKind.EMA: _compute_ema,
    IndicatorKind.BOLLINGER: _compute_bollinger,
    IndicatorKind.RSI: _compute_rsi,
    IndicatorKind.MACD: _compute_macd,
    IndicatorKind.SUPPORT_RESISTANCE: _compute_support_resistance,
}

# Output series names per indicator, in the order they are produced
OUTPUT_NAMES: dict[IndicatorKind, tuple[str, ...]] = {
    IndicatorKind.MA: ("ma",),
    IndicatorKind.EMA: ("ema",),
    IndicatorKind.BOLLINGER: ("upper", "middle", "lower"),
    IndicatorKind.RSI: ("rsi",),
    IndicatorKind.MACD: ("macd", "signal", "histogram"),
    IndicatorKind.SUPPORT_RESISTANCE: ("support", "resistance"),
}


def parse_kind(name: IndicatorKind | str) -> IndicatorKind:
    """Resolve an indicator name, case-insensitively."""
    if isinstance(name, IndicatorKind):
        return name
    try:
        return IndicatorKind(name.strip().lower())
    except ValueError:
        valid = ", ".join(k.value for k in IndicatorKind)
        raise InvalidParameter(
            reason=f"Unknown indicator '{name}' (expected one of: {valid})",
            field="indicator",
            value=name,
        ) from None


def compute_indicator(
    kind: IndicatorKind | str,
    prices: Sequence[float],
    params: IndicatorParams | None = None,
) -> IndicatorOutputs:
    """
    Compute one indicator with configured parameters.

    Args:
        kind: Indicator to compute
        prices: Chronologically ordered prices
        params: Indicator parameters (default: built-in defaults)

    Returns:
        Mapping of output name to series, each aligned with prices

    Raises:
        InvalidParameter: For an unknown indicator or invalid input
    """
    kind = parse_kind(kind)
    params = params or IndicatorParams()

    outputs = INDICATORS[kind](prices, params)
    logger.debug(f"Computed {kind.value} over {len(prices)} prices")
    return outputs


def compute_indicators(
    kinds: Iterable[IndicatorKind | str],
    prices: Sequence[float],
    params: IndicatorParams | None = None,
) -> IndicatorOutputs:
    """
    Compute several indicators over the same prices.

    Outputs are merged in the order the kinds are given; a kind listed
    twice is computed once.
    """
    params = params or IndicatorParams()
    outputs: IndicatorOutputs = {}
    done: set[IndicatorKind] = set()

    for name in kinds:
        kind = parse_kind(name)
        if kind in done:
            continue
        outputs.update(compute_indicator(kind, prices, params))
        done.add(kind)

    return outputs
