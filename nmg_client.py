"""NMG League API client — scheduled races, players and brackets.

Every endpoint wraps its payload in an envelope, {"Ok": ...} on success.
Anything else is a failed call for that endpoint.

Usage:
    from nmg_client import fetch_scheduled_races, select_new_races

    races = fetch_scheduled_races(season=5)
    new_races = select_new_races(races, seen_store, now=int(time.time()))
"""
from dataclasses import dataclass
from typing import Any, Optional

import requests

from config import NMG_API_ROOT, REQUEST_TIMEOUT

SCHEDULED = "Scheduled"


class NmgApiError(RuntimeError):
    pass


# ── Envelope result ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def ok(self):
        return True

    def unwrap(self):
        return self.value


@dataclass(frozen=True)
class Err:
    error: str

    @property
    def ok(self):
        return False

    def unwrap(self):
        raise NmgApiError(self.error)


def parse_envelope(payload, what):
    """Turn a raw response body into Ok(payload["Ok"]) or Err."""
    if isinstance(payload, dict) and payload.get("Ok") is not None:
        return Ok(payload["Ok"])
    if isinstance(payload, dict) and "Err" in payload:
        return Err(f"Failed to fetch {what}: {payload['Err']}")
    return Err(f"Failed to fetch {what}")


def _get(endpoint, params=None):
    """GET an API endpoint and return the decoded JSON body."""
    url = f"{NMG_API_ROOT}{endpoint}"
    resp = requests.get(url, params=params, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


# ── Races ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Race:
    id: int
    state: str
    player_1_id: int
    player_2_id: int
    bracket_id: int
    scheduled_for: Optional[int] = None   # epoch seconds

    @classmethod
    def from_api(cls, raw):
        return cls(
            id=raw["id"],
            state=raw.get("state", ""),
            player_1_id=raw.get("player_1_id"),
            player_2_id=raw.get("player_2_id"),
            bracket_id=raw.get("bracket_id"),
            scheduled_for=raw.get("scheduled_for"),
        )

    def is_upcoming(self, now):
        return bool(self.scheduled_for) and self.scheduled_for >= now


def fetch_scheduled_races(season):
    """Fetch all races in the Scheduled state for a season."""
    # API expects the state as a quoted JSON string
    data = _get(f"/season/{season}/races", params={"state": f'"{SCHEDULED}"'})
    return [Race.from_api(r) for r in parse_envelope(data, "races").unwrap()]


def fetch_players(player_ids):
    """Fetch player names for the given ids.

    Returns {player_id: name}. No request is made for an empty id list.
    """
    if not player_ids:
        return {}
    data = _get("/players", params={"player_id": list(player_ids)})
    players = parse_envelope(data, "players").unwrap()
    return {p["id"]: p["name"] for p in players}


def fetch_brackets(season):
    """Fetch bracket names for a season as {bracket_id: name}."""
    data = _get(f"/season/{season}/brackets")
    brackets = parse_envelope(data, "brackets").unwrap()
    return {b["id"]: b["name"] for b in brackets}


def _is_seen(seen, race_id):
    if hasattr(seen, "has"):
        return seen.has(race_id)
    return race_id in seen


def select_new_races(races, seen, now):
    """Races not yet seen, still Scheduled, and starting at or after now.

    Races without a scheduled time are skipped. Result is sorted by id so the
    write order is stable when several races show up in one poll.
    """
    fresh = [
        r for r in races
        if not _is_seen(seen, r.id)
        and r.state == SCHEDULED
        and r.is_upcoming(now)
    ]
    fresh.sort(key=lambda r: r.id)
    return fresh


def player_ids_for(races):
    """Distinct player ids across races, in first-seen order."""
    ids = []
    for r in races:
        for pid in (r.player_1_id, r.player_2_id):
            if pid not in ids:
                ids.append(pid)
    return ids
