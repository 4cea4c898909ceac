from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class AnalyticsSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    plateau_threshold: int = Field(3, ge=2)
    trend_window: int = Field(5, ge=2)
    deload_weeks: int = Field(6, ge=4)
    volume_window_days: int = Field(7, ge=1)
    weight_increment: float = Field(2.5, gt=0)
    default_body_weight: float = Field(75.0, gt=0)
    language: Literal["en", "nl"] = "en"
    catalog_path: Optional[str] = None


def validate_settings(data: dict) -> AnalyticsSettings:
    try:
        return AnalyticsSettings(**data)
    except ValidationError as e:
        raise ValueError(str(e))
