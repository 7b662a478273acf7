"""
Unit tests for the odds index: keying, outcome matching and degenerate feeds.
"""
from __future__ import annotations

from typing import Any

from reconciler.odds import OddsIndex
from reconciler.teams import TeamAliases
from shared.models.domain import OddsQuote


def _odds_event(home: Any, away: Any, outcomes: list[Any] | None = None, **extra: Any) -> dict[str, Any]:
    event: dict[str, Any] = {"home_team": home, "away_team": away}
    if outcomes is not None:
        event["bookmakers"] = [{"key": "draftkings", "markets": [{"key": "h2h", "outcomes": outcomes}]}]
    event.update(extra)
    return event


LAKERS_CELTICS = _odds_event(
    "Los Angeles Lakers",
    "Boston Celtics",
    [{"name": "Los Angeles Lakers", "price": -150}, {"name": "Boston Celtics", "price": 130}],
)


class TestBuild:

    def test_lookup_by_normalized_pair(self) -> None:
        index = OddsIndex.build([LAKERS_CELTICS])
        assert index.lookup("bostonceltics", "losangeleslakers") == OddsQuote(
            home_moneyline=-150, away_moneyline=130
        )

    def test_pair_is_ordered(self) -> None:
        index = OddsIndex.build([LAKERS_CELTICS])
        assert index.lookup("losangeleslakers", "bostonceltics") is None

    def test_miss_returns_none(self) -> None:
        assert OddsIndex.build([LAKERS_CELTICS]).lookup("miamiheat", "utahjazz") is None

    def test_empty_feed(self) -> None:
        index = OddsIndex.build([])
        assert len(index) == 0

    def test_unmatchable_teams_skipped(self) -> None:
        index = OddsIndex.build([
            _odds_event(None, "Boston Celtics", []),
            _odds_event("The", "Boston Celtics", []),
            _odds_event("Miami Heat", "!!!", []),
        ])
        assert len(index) == 0

    def test_outcomes_matched_through_aliases(self) -> None:
        event = _odds_event(
            "Los Angeles Lakers",
            "Boston Celtics",
            [{"name": "Celtics", "price": 130}, {"name": "LA Lakers", "price": -150}],
        )
        quote = OddsIndex.build([event]).lookup("bostonceltics", "losangeleslakers")
        assert quote == OddsQuote(home_moneyline=-150, away_moneyline=130)

    def test_missing_outcome_leaves_side_unresolved(self) -> None:
        event = _odds_event("Miami Heat", "Utah Jazz", [{"name": "Miami Heat", "price": -200}])
        quote = OddsIndex.build([event]).lookup("utahjazz", "miamiheat")
        assert quote == OddsQuote(home_moneyline=-200, away_moneyline=None)

    def test_no_bookmakers_still_indexed(self) -> None:
        index = OddsIndex.build([_odds_event("Miami Heat", "Utah Jazz")])
        assert index.lookup("utahjazz", "miamiheat") == OddsQuote()

    def test_only_first_bookmaker_and_market_used(self) -> None:
        event = _odds_event("Miami Heat", "Utah Jazz")
        event["bookmakers"] = [
            {"markets": [
                {"outcomes": [{"name": "Miami Heat", "price": -110}, {"name": "Utah Jazz", "price": -110}]},
                {"outcomes": [{"name": "Miami Heat", "price": 999}, {"name": "Utah Jazz", "price": 999}]},
            ]},
            {"markets": [{"outcomes": [{"name": "Miami Heat", "price": -500}, {"name": "Utah Jazz", "price": 400}]}]},
        ]
        quote = OddsIndex.build([event]).lookup("utahjazz", "miamiheat")
        assert quote == OddsQuote(home_moneyline=-110, away_moneyline=-110)

    def test_last_write_wins(self) -> None:
        first = _odds_event("Miami Heat", "Utah Jazz", [{"name": "Miami Heat", "price": -110}])
        second = _odds_event("Heat", "Jazz", [{"name": "Miami Heat", "price": -300}])
        quote = OddsIndex.build([first, second]).lookup("utahjazz", "miamiheat")
        assert quote.home_moneyline == -300

    def test_non_numeric_price_is_unresolved(self) -> None:
        event = _odds_event("Miami Heat", "Utah Jazz", [{"name": "Miami Heat", "price": "-110"}])
        assert OddsIndex.build([event]).lookup("utahjazz", "miamiheat").home_moneyline is None

    def test_malformed_entries_tolerated(self) -> None:
        index = OddsIndex.build([
            "garbage",
            None,
            _odds_event("Miami Heat", "Utah Jazz", bookmakers="nope"),
            _odds_event("Denver Nuggets", "Phoenix Suns", [None, {"name": 7, "price": 100}]),
        ])
        assert index.lookup("utahjazz", "miamiheat") == OddsQuote()
        assert index.lookup("phoenixsuns", "denvernuggets") == OddsQuote()

    def test_custom_alias_table(self) -> None:
        teams = TeamAliases(aliases={}, extra={"Nugs": "Denver Nuggets"})
        event = _odds_event("Denver Nuggets", "Phoenix Suns", [{"name": "Nugs", "price": -120}])
        quote = OddsIndex.build([event], teams=teams).lookup("phoenixsuns", "denvernuggets")
        assert quote.home_moneyline == -120
