"""
JSON API response types.

Structured responses for web API consumption.
Can be used with FastAPI, Flask, or any web framework.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from .chart_data import ChartData, ChartPoint


# ============================================================================
# Response Models
# ============================================================================

class ChartPointResponse(BaseModel):
    """API response for one chart row."""
    timestamp: int
    time: datetime
    price: float
    values: dict[str, float | None]


class ChartResponse(BaseModel):
    """Full chart API response."""
    indicators: list[str]
    series: list[str]
    price_min: float
    price_max: float
    points: list[ChartPointResponse]
    total_points: int


# ============================================================================
# Conversion Functions
# ============================================================================

def _point_to_response(point: ChartPoint) -> ChartPointResponse:
    """Convert ChartPoint to API response."""
    return ChartPointResponse(
        timestamp=point.timestamp,
        time=point.time,
        price=point.price,
        values=point.values,
    )


def to_api_response(data: ChartData) -> ChartResponse:
    """
    Convert ChartData to API response.

    Args:
        data: Chart data with indicator values

    Returns:
        Structured API response
    """
    return ChartResponse(
        indicators=[kind.value for kind in data.indicators],
        series=data.series_names,
        price_min=data.price_min,
        price_max=data.price_max,
        points=[_point_to_response(p) for p in data.points],
        total_points=len(data.points),
    )


def to_json(data: ChartData) -> dict[str, Any]:
    """
    Convert ChartData to JSON-serializable dict.

    Undefined indicator values become null.
    """
    return to_api_response(data).model_dump(mode="json")
