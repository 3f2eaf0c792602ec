"""
Chart data assembly.

Zips indicator outputs back onto the caller's timestamped price history,
one point per input price, ready for a charting front end.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from config.schema import IndicatorParams
from domain.indicators import IndicatorKind, InsufficientData, InvalidParameter
from orchestration.indicator_pipeline import compute_indicators, parse_kind

# (timestamp in epoch milliseconds, price)
PricePoint = tuple[int, float]


@dataclass
class ChartPoint:
    """One chart row: a price and the indicator values at its timestamp."""
    timestamp: int
    price: float
    values: dict[str, float | None] = field(default_factory=dict)

    @property
    def time(self) -> datetime:
        """Timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)


@dataclass
class ChartData:
    """Chart rows plus the metadata needed to draw them."""
    points: list[ChartPoint]
    indicators: list[IndicatorKind]
    price_min: float
    price_max: float

    @property
    def series_names(self) -> list[str]:
        """Names of the indicator series present on every point."""
        return list(self.points[0].values) if self.points else []


def price_axis_bounds(prices: Sequence[float], padding_ratio: float = 0.1) -> tuple[float, float]:
    """
    Price axis range with padding on both sides.

    Args:
        prices: Prices to fit
        padding_ratio: Fraction of the price range added above and below

    Returns:
        Tuple of (lower bound, upper bound)

    Example:
        >>> price_axis_bounds([100, 110, 120])
        (98.0, 122.0)
    """
    if not prices:
        raise InsufficientData(required=1, available=0, indicator="chart")
    if padding_ratio < 0:
        raise InvalidParameter(
            reason=f"padding_ratio must be non-negative, got {padding_ratio}",
            field="padding_ratio",
            value=padding_ratio,
            indicator="chart",
        )

    low = min(prices)
    high = max(prices)
    padding = (high - low) * padding_ratio
    return (low - padding, high + padding)


def _validate_history(history: Sequence[PricePoint]) -> None:
    """Timestamps must be representable dates in strictly ascending order."""
    for i, (timestamp, _) in enumerate(history):
        try:
            datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            raise InvalidParameter(
                reason=f"timestamp at index {i} is not a valid epoch-millisecond time: {timestamp}",
                field="history",
                value=timestamp,
                indicator="chart",
            ) from None
        if i and timestamp <= history[i - 1][0]:
            raise InvalidParameter(
                reason=(
                    f"history must be strictly ascending by timestamp "
                    f"(index {i}: {timestamp} after {history[i - 1][0]})"
                ),
                field="history",
                value=timestamp,
                indicator="chart",
            )


def build_chart_data(
    history: Sequence[PricePoint],
    kinds: Iterable[IndicatorKind | str],
    params: IndicatorParams | None = None,
    padding_ratio: float = 0.1,
) -> ChartData:
    """
    Compute indicators over a price history and attach them to each point.

    Args:
        history: (timestamp_ms, price) pairs in chronological order
        kinds: Indicators to compute
        params: Indicator parameters (default: built-in defaults)
        padding_ratio: Price axis padding ratio

    Returns:
        ChartData with one ChartPoint per history entry

    Raises:
        InvalidParameter: If timestamps are out of order or an indicator
            rejects its parameters
        InsufficientData: If the history is too short
    """
    if not history:
        raise InsufficientData(required=1, available=0, indicator="chart")
    _validate_history(history)

    selected: list[IndicatorKind] = []
    for name in kinds:
        kind = parse_kind(name)
        if kind not in selected:
            selected.append(kind)

    prices = [price for _, price in history]
    outputs = compute_indicators(selected, prices, params)
    price_min, price_max = price_axis_bounds(prices, padding_ratio)

    points = [
        ChartPoint(
            timestamp=timestamp,
            price=price,
            values={name: series[i] for name, series in outputs.items()},
        )
        for i, (timestamp, price) in enumerate(history)
    ]

    return ChartData(
        points=points,
        indicators=selected,
        price_min=price_min,
        price_max=price_max,
    )
