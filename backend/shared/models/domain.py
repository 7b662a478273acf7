"""
Pydantic v2 domain models produced by a reconciliation pass.
These are the canonical wire representations; field names serialize in camelCase.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ── Base ────────────────────────────────────────────────────────────────
class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# ── Score ───────────────────────────────────────────────────────────────
class ScoreEstimate(DomainModel):
    """Best available score; estimated is False only for direct feed totals."""
    home: Union[int, float]
    away: Union[int, float]
    estimated: bool


# ── Odds ────────────────────────────────────────────────────────────────
class OddsQuote(DomainModel):
    """Moneyline prices per side; a side is None when no outcome matched."""
    home_moneyline: Optional[Union[int, float]] = None
    away_moneyline: Optional[Union[int, float]] = None


# ── Board ───────────────────────────────────────────────────────────────
class MergedEvent(DomainModel):
    id: str
    home_name: str
    away_name: str
    score: Optional[ScoreEstimate] = None
    odds: OddsQuote = Field(default_factory=OddsQuote)


class BoardSnapshot(DomainModel):
    """Merged board plus the caller-owned timestamp of the pass."""
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    games: list[MergedEvent] = Field(default_factory=list)
