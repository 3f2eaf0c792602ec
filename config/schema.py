"""
Configuration schema with validation.

All configuration is validated at load time using Pydantic.
"""

from pydantic import BaseModel, Field, field_validator

from domain.indicators.base import IndicatorKind, ZeroLossPolicy


class MovingAverageConfig(BaseModel):
    """Periods for the plain moving average overlays."""

    sma_period: int = Field(default=20, ge=1, le=500)
    ema_period: int = Field(default=20, ge=1, le=500)


class BollingerConfig(BaseModel):
    """Bollinger Bands parameters."""

    period: int = Field(default=20, ge=1, le=500)
    deviation: float = Field(default=2.0, ge=0.0, le=10.0, description="Band width in standard deviations")


class RsiConfig(BaseModel):
    """RSI parameters."""

    period: int = Field(default=14, ge=1, le=500)
    zero_loss: ZeroLossPolicy = Field(
        default=ZeroLossPolicy.SATURATE,
        description="Result when the average loss is zero",
    )


class MacdConfig(BaseModel):
    """MACD parameters."""

    fast: int = Field(default=12, ge=1, le=500)
    slow: int = Field(default=26, ge=2, le=500)
    signal: int = Field(default=9, ge=1, le=500)

    @field_validator("slow")
    @classmethod
    def slow_gt_fast(cls, v: int, info) -> int:
        fast = info.data.get("fast", 12)
        if v <= fast:
            raise ValueError("slow must be greater than fast")
        return v


class SupportResistanceConfig(BaseModel):
    """Support/resistance envelope parameters."""

    period: int = Field(default=14, ge=1, le=500)


class IndicatorParams(BaseModel):
    """Parameters for every selectable indicator."""

    moving_average: MovingAverageConfig = Field(default_factory=MovingAverageConfig)
    bollinger: BollingerConfig = Field(default_factory=BollingerConfig)
    rsi: RsiConfig = Field(default_factory=RsiConfig)
    macd: MacdConfig = Field(default_factory=MacdConfig)
    support_resistance: SupportResistanceConfig = Field(default_factory=SupportResistanceConfig)


class ChartConfig(BaseModel):
    """Chart data preferences."""

    padding_ratio: float = Field(default=0.1, ge=0.0, le=1.0, description="Price axis padding")


class PricedashConfig(BaseModel):
    """
    Root configuration model.

    All settings are validated on load.
    """

    # Indicators computed when the caller does not pick any
    indicators: list[IndicatorKind] = Field(default_factory=lambda: [
        IndicatorKind.BOLLINGER, IndicatorKind.RSI,
    ])

    # Subsections
    params: IndicatorParams = Field(default_factory=IndicatorParams)
    chart: ChartConfig = Field(default_factory=ChartConfig)

    @field_validator("indicators", mode="before")
    @classmethod
    def normalize_indicators(cls, v):
        """Accept mixed-case names and drop duplicates, keeping order."""
        if isinstance(v, str):
            v = v.split(",")
        if not isinstance(v, (list, tuple)):
            return v
        seen = []
        for item in v:
            name = item.value if isinstance(item, IndicatorKind) else str(item).strip().lower()
            if name and name not in seen:
                seen.append(name)
        return seen
