"""
Typed raw structures for the two upstream feeds.

Every leaf is optional and malformed values are degraded to None while
parsing, so a single bad record never fails validation of the collection.
Nested objects always exist (possibly empty) which keeps access sites flat.
"""
from __future__ import annotations

import math
from typing import Annotated, Any, Iterable, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator


def finite_number(value: Any) -> Optional[Union[int, float]]:
    """Return value if it is a real JSON number that is finite, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _identifier(value: Any) -> Optional[Union[int, float, str]]:
    if isinstance(value, str):
        return value
    return finite_number(value)


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


FiniteNumber = Annotated[Optional[Union[int, float]], BeforeValidator(finite_number)]
Text = Annotated[Optional[str], BeforeValidator(_text)]
Identifier = Annotated[Optional[Union[int, float, str]], BeforeValidator(_identifier)]


# ── Base ────────────────────────────────────────────────────────────────
class RawModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _coerce_mapping(cls, data: Any) -> Any:
        return data if isinstance(data, (dict, cls)) else {}


# ── Live feed ───────────────────────────────────────────────────────────
class RawTeam(RawModel):
    id: Identifier = None
    name: Text = None


class RawTeams(RawModel):
    home: RawTeam = Field(default_factory=RawTeam)
    away: RawTeam = Field(default_factory=RawTeam)


class RawSideScore(RawModel):
    total: FiniteNumber = None


class RawScores(RawModel):
    home: RawSideScore = Field(default_factory=RawSideScore)
    away: RawSideScore = Field(default_factory=RawSideScore)


class RawPeriodScore(RawModel):
    """Partial score for one period (quarter, half, overtime)."""
    home: FiniteNumber = None
    away: FiniteNumber = None


class RawTeamStatistics(RawModel):
    points: FiniteNumber = None


class RawStatistics(RawModel):
    home: RawTeamStatistics = Field(default_factory=RawTeamStatistics)
    away: RawTeamStatistics = Field(default_factory=RawTeamStatistics)


class RawLiveEvent(RawModel):
    """One game from the live-score feed."""
    id: Identifier = None
    teams: RawTeams = Field(default_factory=RawTeams)
    scores: RawScores = Field(default_factory=RawScores)
    periods: Optional[dict[str, RawPeriodScore]] = None
    statistics: RawStatistics = Field(default_factory=RawStatistics)

    @field_validator("periods", mode="before")
    @classmethod
    def _coerce_periods(cls, value: Any) -> Optional[dict[str, Any]]:
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        if isinstance(value, list):
            return {str(i): v for i, v in enumerate(value)}
        return None


# ── Odds feed ───────────────────────────────────────────────────────────
class RawOutcome(RawModel):
    name: Text = None
    price: FiniteNumber = None


class RawMarket(RawModel):
    key: Text = None
    outcomes: Annotated[list[RawOutcome], BeforeValidator(_as_list)] = Field(default_factory=list)


class RawBookmaker(RawModel):
    key: Text = None
    title: Text = None
    markets: Annotated[list[RawMarket], BeforeValidator(_as_list)] = Field(default_factory=list)


class RawOddsEvent(RawModel):
    """One game from the odds feed."""
    id: Text = None
    home_team: Text = None
    away_team: Text = None
    bookmakers: Annotated[list[RawBookmaker], BeforeValidator(_as_list)] = Field(default_factory=list)


def parse_live_events(payload: Iterable[Any] | None) -> list[RawLiveEvent]:
    """Parse a live-feed collection; non-object entries become empty events."""
    if payload is None:
        return []
    return [RawLiveEvent.model_validate(item) for item in payload]


def parse_odds_events(payload: Iterable[Any] | None) -> list[RawOddsEvent]:
    """Parse an odds-feed collection; non-object entries become empty events."""
    if payload is None:
        return []
    return [RawOddsEvent.model_validate(item) for item in payload]
