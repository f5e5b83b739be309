"""Canonical season records shared across ingest and ranking layers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SeasonStatRecord(BaseModel):
    """One player's totals for one season."""

    player_name: str = Field(..., min_length=1)
    season: str = Field(..., min_length=1)
    matches: int = Field(default=0, ge=0)
    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    goals: int = Field(default=0, ge=0)
    clean_sheets: int = Field(default=0, ge=0)
    hat_tricks: int = Field(default=0, ge=0)
    own_goals: int = Field(default=0, ge=0)
    position: str = ""

    model_config = ConfigDict(frozen=True)


class AttendanceSummary(BaseModel):
    """Fixture counts for a season, used to scale attendance displays."""

    midweek_games: int = Field(default=0, ge=0)
    weekend_games: int = Field(default=0, ge=0)
    total_games: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    def percent_of_total(
        self,
        games: int,
        kind: Literal["midweek", "weekend", "total"] = "total",
    ) -> float:
        denominator = {
            "midweek": self.midweek_games,
            "weekend": self.weekend_games,
            "total": self.total_games,
        }[kind]
        if denominator <= 0:
            return 0.0
        return games / denominator * 100
