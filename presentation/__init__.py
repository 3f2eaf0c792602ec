from .chart_data import (
    ChartData,
    ChartPoint,
    PricePoint,
    build_chart_data,
    price_axis_bounds,
)
from .json_api import (
    ChartPointResponse,
    ChartResponse,
    to_api_response,
    to_json,
)

__all__ = [
    # Chart data
    "ChartData",
    "ChartPoint",
    "PricePoint",
    "build_chart_data",
    "price_axis_bounds",
    # JSON API
    "ChartResponse",
    "ChartPointResponse",
    "to_api_response",
    "to_json",
]
