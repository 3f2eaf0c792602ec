from .indicator_pipeline import OUTPUT_NAMES, compute_indicator, compute_indicators, parse_kind

__all__ = [
    "OUTPUT_NAMES",
    "compute_indicator",
    "compute_indicators",
    "parse_kind",
]
