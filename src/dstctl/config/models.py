"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dstctl.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- dstctl.toml sections ---


class WarningsConfig(BaseModel):
    """[warnings] section — transition proximity thresholds."""

    model_config = {"frozen": True}

    threshold_days: int = Field(default=3, ge=0)
    banner_threshold_days: int = Field(default=7, ge=0)


class ReservationsConfig(BaseModel):
    """[reservations] section — booking rules (0 disables a rule)."""

    model_config = {"frozen": True}

    max_per_day: int = Field(default=0, ge=0)
    min_hours_in_advance: float = Field(default=0, ge=0)


class MonitorConfig(BaseModel):
    """[monitor] section."""

    model_config = {"frozen": True}

    days_around: int = Field(default=3, ge=0)


class DstConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    warnings: WarningsConfig = Field(default_factory=WarningsConfig)
    reservations: ReservationsConfig = Field(default_factory=ReservationsConfig)
    monitor: MonitorConfig = Field(default_factory=MonitorConfig)
