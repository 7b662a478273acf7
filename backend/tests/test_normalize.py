"""
Unit tests for team-name normalization, composite keys and alias resolution.

Run: pytest backend/tests/test_normalize.py -v
"""
from __future__ import annotations

import pytest

from reconciler.normalize import KEY_SEPARATOR, composite_key, normalize_team_name
from reconciler.teams import NBA_TEAM_ALIASES, TeamAliases

SAMPLE_NAMES = [
    "The Los Angeles Lakers",
    "los angeles lakers",
    "Philadelphia 76ers",
    "Portland Trail-Blazers",
    "Theater Kings",
    "THE-THE",
    "t he",
    "the",
    "  Boston   Celtics  ",
    "Atlético Madrid",
    "",
    "___",
]


# ── normalize_team_name ────────────────────────────────────────────────

class TestNormalizeTeamName:

    def test_none_is_empty(self) -> None:
        assert normalize_team_name(None) == ""

    def test_empty_is_empty(self) -> None:
        assert normalize_team_name("") == ""

    def test_lowercases_and_strips_spaces(self) -> None:
        assert normalize_team_name("Boston Celtics") == "bostonceltics"

    def test_keeps_digits(self) -> None:
        assert normalize_team_name("Philadelphia 76ers") == "philadelphia76ers"

    def test_strips_punctuation(self) -> None:
        assert normalize_team_name("Portland Trail-Blazers!") == "portlandtrailblazers"

    def test_article_and_case_invariance(self) -> None:
        assert normalize_team_name("The Los Angeles Lakers") == normalize_team_name("los angeles lakers")

    def test_article_removed_only_as_whole_word(self) -> None:
        assert normalize_team_name("Theater Kings") == "theaterkings"
        assert normalize_team_name("Oklahoma City Thunder") == "oklahomacitythunder"

    def test_article_between_punctuation(self) -> None:
        assert normalize_team_name("THE-THE") == ""

    def test_non_ascii_letters_dropped(self) -> None:
        assert normalize_team_name("Atlético Madrid") == "atlticomadrid"

    def test_split_article_does_not_survive(self) -> None:
        assert normalize_team_name("t he") == ""

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_idempotent(self, name: str) -> None:
        once = normalize_team_name(name)
        assert normalize_team_name(once) == once

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_output_alphabet(self, name: str) -> None:
        assert all(ch.isascii() and (ch.islower() or ch.isdigit()) for ch in normalize_team_name(name))


# ── composite_key ───────────────────────────────────────────────────────

def test_composite_key_orders_away_first() -> None:
    assert composite_key("bostonceltics", "losangeleslakers") == "bostonceltics__losangeleslakers"


def test_separator_cannot_come_from_normalization() -> None:
    assert KEY_SEPARATOR not in normalize_team_name("a__b")


# ── TeamAliases ─────────────────────────────────────────────────────────

class TestTeamAliases:

    def test_nickname_resolves_to_full_name(self) -> None:
        teams = TeamAliases()
        assert teams.key("Lakers") == teams.key("Los Angeles Lakers") == "losangeleslakers"

    def test_abbreviation_and_article(self) -> None:
        teams = TeamAliases()
        assert teams.key("The Sixers") == "philadelphia76ers"
        assert teams.key("OKC") == "oklahomacitythunder"

    def test_unknown_name_is_plain_normalization(self) -> None:
        assert TeamAliases().key("Real Madrid") == "realmadrid"

    def test_absent_name_is_empty(self) -> None:
        assert TeamAliases().key(None) == ""

    def test_every_franchise_is_its_own_canonical_key(self) -> None:
        teams = TeamAliases()
        for full_name in NBA_TEAM_ALIASES:
            assert teams.key(full_name) == normalize_team_name(full_name)

    @pytest.mark.parametrize("name", ["Lakers", "LA Clippers", "Cavs", "Golden State", "Nowhere FC"])
    def test_key_idempotent(self, name: str) -> None:
        teams = TeamAliases()
        once = teams.key(name)
        assert teams.key(once) == once

    def test_extra_alias_resolves_through_existing_alias(self) -> None:
        teams = TeamAliases(extra={"Showtime": "Lakers"})
        assert teams.key("Showtime") == "losangeleslakers"

    def test_canonical_key_cannot_be_remapped(self) -> None:
        teams = TeamAliases()
        assert teams.add("Los Angeles Lakers", "Clippers") is False
        assert teams.key("Los Angeles Lakers") == "losangeleslakers"

    def test_empty_table(self) -> None:
        teams = TeamAliases(aliases={})
        assert len(teams) == 0
        assert teams.key("Lakers") == "lakers"
