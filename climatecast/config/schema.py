"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

POWER_DAILY_POINT_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"


class ArchiveConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = POWER_DAILY_POINT_URL
    community: str = "RE"
    user_agent: str = "climatecast/0.1.0"
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    years_of_data: int = Field(default=10, ge=1, le=40)
    window_half_width_days: int = Field(default=3, ge=0, le=15)
    max_workers: int = Field(default=4, ge=1, le=16)
    missing_value_sentinel: float = -999.0


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    random_seed: int | None = None
    data_source_label: str = "historical-archive + statistical analysis"
    max_lead_years: int = Field(default=2, ge=1, le=10)


class EngineConfig(BaseModel):
    model_config = {"extra": "forbid"}

    archive: ArchiveConfig = ArchiveConfig()
    forecast: ForecastConfig = ForecastConfig()
