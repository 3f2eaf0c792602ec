from .loader import ConfigError, get_config, load_config, reload_config
from .schema import (
    BollingerConfig,
    ChartConfig,
    IndicatorParams,
    MacdConfig,
    MovingAverageConfig,
    PricedashConfig,
    RsiConfig,
    SupportResistanceConfig,
)

__all__ = [
    "ConfigError",
    "load_config",
    "get_config",
    "reload_config",
    "PricedashConfig",
    "IndicatorParams",
    "MovingAverageConfig",
    "BollingerConfig",
    "RsiConfig",
    "MacdConfig",
    "SupportResistanceConfig",
    "ChartConfig",
]
