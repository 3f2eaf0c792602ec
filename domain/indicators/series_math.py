"""Shared numeric primitives for the indicators."""

import math
from collections.abc import Sequence

from domain.indicators.errors import InsufficientData, InvalidParameter


def windowed_sum(series: Sequence[float], period: int, end_index: int) -> float:
    """Sum `period` consecutive values ending at `end_index` (inclusive).

    Args:
        series: Values to sum over
        period: Window length
        end_index: Last index of the window; must be >= period - 1

    Returns:
        Sum of series[end_index - period + 1 .. end_index]

    Example:
        >>> windowed_sum([1, 2, 3, 4, 5], 3, 4)
        12.0
    """
    return math.fsum(series[end_index - period + 1:end_index + 1])


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty set of values.

    Raises:
        InsufficientData: If values is empty
    """
    if not values:
        raise InsufficientData(required=1, available=0, field="values")
    return math.fsum(values) / len(values)


def std_dev(values: Sequence[float], mean: float) -> float:
    """Population standard deviation around a supplied mean.

    Divides by the number of values (not n - 1), the convention used by
    Bollinger Bands.

    Example:
        >>> std_dev([2, 4, 4, 4, 5, 5, 7, 9], 5.0)
        2.0
    """
    if not values:
        raise InsufficientData(required=1, available=0, field="values")
    variance = math.fsum((x - mean) ** 2 for x in values) / len(values)
    return math.sqrt(variance)


def validate_prices(prices: Sequence[float], indicator: str | None = None) -> None:
    """Reject empty input and entries that are not finite real numbers."""
    if not prices:
        raise InsufficientData(required=1, available=0, indicator=indicator)

    for i, price in enumerate(prices):
        # bool is an int subclass but never a price
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise InvalidParameter(
                reason=f"prices[{i}] is not a number: {price!r}",
                field="prices",
                value=price,
                indicator=indicator,
            )
        if not math.isfinite(price):
            raise InvalidParameter(
                reason=f"prices[{i}] is not finite: {price!r}",
                field="prices",
                value=price,
                indicator=indicator,
            )


def validate_period(
    period: int,
    available: int,
    field: str = "period",
    indicator: str | None = None,
    required: int | None = None,
) -> None:
    """Check a window length against the number of available values.

    Args:
        period: Window length to check
        available: Number of values in the series
        field: Parameter name used in the error
        indicator: Indicator name used in the error
        required: Minimum series length (default: period)
    """
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidParameter(
            reason=f"{field} must be an integer, got {period!r}",
            field=field,
            value=period,
            indicator=indicator,
        )
    if period <= 0:
        raise InvalidParameter.non_positive(field, period, indicator=indicator)

    needed = period if required is None else required
    if available < needed:
        raise InsufficientData(
            required=needed,
            available=available,
            indicator=indicator,
            field=field,
        )


def pad_front(values: list[float], length: int) -> list[float | None]:
    """Left-pad values with None up to `length` entries."""
    return [None] * (length - len(values)) + values


def compact(series: Sequence[float | None]) -> tuple[list[float], int | None]:
    """Drop undefined entries.

    Returns:
        Tuple of (defined values, index of the first defined value).
        The index is None when nothing is defined.

    Example:
        >>> compact([None, None, 1.0, 2.0])
        ([1.0, 2.0], 2)
    """
    first_index = None
    values = []
    for i, value in enumerate(series):
        if value is None:
            continue
        if first_index is None:
            first_index = i
        values.append(value)
    return values, first_index
