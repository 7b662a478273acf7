"""
Team-name canonicalization and composite odds keys.
"""
from __future__ import annotations

import re
from typing import Optional

# Joins away and home keys; "_" never survives normalization.
KEY_SEPARATOR = "__"

_ARTICLE_RE = re.compile(r"\bthe\b", re.ASCII)
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize_team_name(name: Optional[str]) -> str:
    """
    Canonicalize a free-text team name into a comparable key.

    Lowercases, drops the standalone word "the" and strips everything that is
    not a lowercase ASCII letter or digit. Returns "" for absent input.
    Deterministic and idempotent.
    """
    if not name:
        return ""
    key = _NON_ALNUM_RE.sub("", _ARTICLE_RE.sub("", name.lower()))
    # "t-he" collapses to the bare article, which a second pass would erase
    if key == "the":
        return ""
    return key


def composite_key(away_key: str, home_key: str) -> str:
    """Odds-index key for an (away, home) pair of normalized team keys."""
    return f"{away_key}{KEY_SEPARATOR}{home_key}"
