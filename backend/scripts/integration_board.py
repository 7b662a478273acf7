#!/usr/bin/env python3
"""
Integration check for a running Live Board API.

Checks:
  1. /health returns 200 + status ok
  2. /api/board returns {updatedAt, games} or a 500 {error, games: []}
  3. Every game carries id, homeName, awayName, score and odds
  4. Scores are flagged estimated or direct; odds are numbers or null

Usage:
  python scripts/integration_board.py [BASE_URL]

  BASE_URL defaults to http://localhost:3000.
"""
from __future__ import annotations

import sys
from typing import Any

import httpx

GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
RESET = "\033[0m"

BASE = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
GAME_FIELDS = {"id", "homeName", "awayName", "score", "odds"}

passed = 0
failed = 0
warnings = 0


def _get_json(client: httpx.Client, path: str) -> tuple[int, Any]:
    try:
        resp = client.get(path, headers={"Accept": "application/json"})
    except httpx.HTTPError as e:
        return 0, {"__network_error__": str(e)}
    try:
        return resp.status_code, resp.json()
    except ValueError:
        return resp.status_code, None


def ok(msg: str) -> None:
    global passed
    passed += 1
    print(f"  {GREEN}PASS{RESET}  {msg}")


def fail(msg: str) -> None:
    global failed
    failed += 1
    print(f"  {RED}FAIL{RESET}  {msg}")


def warn(msg: str) -> None:
    global warnings
    warnings += 1
    print(f"  {YELLOW}WARN{RESET}  {msg}")


def _check_game(game: dict[str, Any]) -> None:
    missing = GAME_FIELDS - set(game)
    if missing:
        fail(f"  game {game.get('id')}: missing fields {sorted(missing)}")
        return

    score = game["score"]
    if score is not None and not isinstance(score.get("estimated"), bool):
        fail(f"  game {game['id']}: score without estimated flag")
        return

    odds = game["odds"]
    for side in ("homeMoneyline", "awayMoneyline"):
        value = odds.get(side)
        if value is not None and not isinstance(value, (int, float)):
            fail(f"  game {game['id']}: {side} is not a number")
            return

    label = "no score" if score is None else f"{score['away']}-{score['home']}"
    if score is not None and score["estimated"]:
        label += " (est.)"
    ok(f"  {game['awayName']} @ {game['homeName']}: {label}")


def main() -> None:
    print("\n=== Live Board Integration Test ===")
    print(f"Backend: {BASE}\n")

    with httpx.Client(base_url=BASE, timeout=20.0) as client:
        # 1. Health
        print("[1] Health check")
        status, data = _get_json(client, "/health")
        if status == 200 and isinstance(data, dict) and data.get("status") == "ok":
            ok("/health returns status=ok")
        else:
            fail(f"/health unexpected: {status} {data}")

        # 2. Board
        print("[2] Board endpoint")
        status, data = _get_json(client, "/api/board")
        if status == 500 and isinstance(data, dict) and data.get("games") == []:
            warn(f"/api/board feed failure: {data.get('error')}")
        elif status == 200 and isinstance(data, dict) and "updatedAt" in data:
            games = data.get("games", [])
            ok(f"/api/board: {len(games)} live games at {data['updatedAt']}")
            if not games:
                warn("No live games right now (may be expected outside game hours)")

            # 3. Game shape
            print("[3] Game records")
            for game in games:
                _check_game(game)
        else:
            fail(f"/api/board unexpected: {status} {data}")

    print(f"\n=== Results: {GREEN}{passed} passed{RESET}, {RED}{failed} failed{RESET}, {YELLOW}{warnings} warnings{RESET} ===\n")
    sys.exit(1 if failed > 0 else 0)


if __name__ == "__main__":
    main()
