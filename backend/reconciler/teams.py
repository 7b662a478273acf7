"""
Team alias resolution.

The live and odds feeds spell franchises differently ("Lakers" vs
"Los Angeles Lakers"). TeamAliases maps every known spelling to the
normalized full franchise name so both feeds land on the same key.
Canonical keys always map to themselves, so key() is idempotent.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Optional

from shared.utils.logging import get_logger

from reconciler.normalize import normalize_team_name

logger = get_logger(__name__)

# Full franchise name -> alternate spellings seen across providers.
# Shared cities (Los Angeles) are deliberately absent.
NBA_TEAM_ALIASES: dict[str, tuple[str, ...]] = {
    "Atlanta Hawks": ("Hawks", "Atlanta", "ATL"),
    "Boston Celtics": ("Celtics", "Boston", "BOS"),
    "Brooklyn Nets": ("Nets", "Brooklyn", "BKN"),
    "Charlotte Hornets": ("Hornets", "Charlotte", "CHA"),
    "Chicago Bulls": ("Bulls", "Chicago", "CHI"),
    "Cleveland Cavaliers": ("Cavaliers", "Cavs", "Cleveland", "CLE"),
    "Dallas Mavericks": ("Mavericks", "Mavs", "Dallas", "DAL"),
    "Denver Nuggets": ("Nuggets", "Denver", "DEN"),
    "Detroit Pistons": ("Pistons", "Detroit", "DET"),
    "Golden State Warriors": ("Warriors", "Golden State", "GSW"),
    "Houston Rockets": ("Rockets", "Houston", "HOU"),
    "Indiana Pacers": ("Pacers", "Indiana", "IND"),
    "Los Angeles Clippers": ("Clippers", "LA Clippers", "LAC"),
    "Los Angeles Lakers": ("Lakers", "LA Lakers", "LAL"),
    "Memphis Grizzlies": ("Grizzlies", "Memphis", "MEM"),
    "Miami Heat": ("Heat", "Miami", "MIA"),
    "Milwaukee Bucks": ("Bucks", "Milwaukee", "MIL"),
    "Minnesota Timberwolves": ("Timberwolves", "Wolves", "Minnesota", "MIN"),
    "New Orleans Pelicans": ("Pelicans", "New Orleans", "NOP"),
    "New York Knicks": ("Knicks", "New York", "NYK"),
    "Oklahoma City Thunder": ("Thunder", "Oklahoma City", "OKC"),
    "Orlando Magic": ("Magic", "Orlando", "ORL"),
    "Philadelphia 76ers": ("76ers", "Sixers", "Philadelphia", "PHI"),
    "Phoenix Suns": ("Suns", "Phoenix", "PHX"),
    "Portland Trail Blazers": ("Trail Blazers", "Blazers", "Portland", "POR"),
    "Sacramento Kings": ("Kings", "Sacramento", "SAC"),
    "San Antonio Spurs": ("Spurs", "San Antonio", "SAS"),
    "Toronto Raptors": ("Raptors", "Toronto", "TOR"),
    "Utah Jazz": ("Jazz", "Utah", "UTA"),
    "Washington Wizards": ("Wizards", "Washington", "WAS"),
}


class TeamAliases:
    """Maps normalized team spellings to a canonical normalized key."""

    def __init__(
        self,
        aliases: Mapping[str, Iterable[str]] | None = None,
        extra: Mapping[str, str] | None = None,
    ) -> None:
        self._table: dict[str, str] = {}
        self._canonical: set[str] = set()
        for canonical, spellings in (NBA_TEAM_ALIASES if aliases is None else aliases).items():
            for spelling in spellings:
                self.add(spelling, canonical)
        for spelling, canonical in (extra or {}).items():
            self.add(spelling, canonical)

    def add(self, spelling: str, canonical: str) -> bool:
        """
        Register an alternate spelling. Returns False if it was ignored.

        A spelling that is already some team's canonical key cannot be
        remapped; that would break idempotence of key().
        """
        spelling_key = normalize_team_name(spelling)
        canonical_key = normalize_team_name(canonical)
        if not spelling_key or not canonical_key or spelling_key == canonical_key:
            return False
        if spelling_key in self._canonical:
            logger.warning(
                "team_alias_ignored",
                spelling=spelling,
                canonical=canonical,
                reason="spelling_is_canonical",
            )
            return False
        resolved = self._table.get(canonical_key, canonical_key)
        self._table[spelling_key] = resolved
        self._canonical.add(resolved)
        return True

    def key(self, name: Optional[str]) -> str:
        """Normalized, alias-resolved key for a team name ("" if unmatchable)."""
        normalized = normalize_team_name(name)
        return self._table.get(normalized, normalized)

    def __len__(self) -> int:
        return len(self._table)

