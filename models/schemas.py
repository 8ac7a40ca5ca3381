"""
Pydantic schemas for data validation.
"""

from pydantic import BaseModel, Field, field_validator

from config import CountdownMode


# ============ Settings Schemas ============

class GameSettingsSchema(BaseModel):
    """Schema for user-supplied game settings (settings.json)."""
    round_seconds: int = Field(default=30, ge=1, le=600)
    countdown_start: int = Field(default=3, ge=1, le=10)
    area_count: int = Field(default=4, ge=2, le=16)
    tick_interval_ms: int = Field(default=1000, ge=10)
    low_time_threshold: int = Field(default=5, ge=0)
    countdown_mode: CountdownMode = CountdownMode.TICK

    @field_validator("countdown_mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
