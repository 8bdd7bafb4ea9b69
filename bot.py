"""One poll cycle: new scheduled races → signup sheet rows → seen-set."""
import time
import logging
from concurrent.futures import ThreadPoolExecutor

from google_sheets import SheetNotFoundError, get_client, open_signup_sheet
from nmg_client import (
    fetch_brackets, fetch_players, fetch_scheduled_races,
    player_ids_for, select_new_races,
)
from rows import build_row

log = logging.getLogger("nmg_bot.cycle")


def _fetch_names(season, player_ids):
    """Fetch player and bracket names side by side."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        players = executor.submit(fetch_players, player_ids)
        brackets = executor.submit(fetch_brackets, season)
        return players.result(), brackets.result()


def process_races(config, seen, sheets_client_factory=get_client, now=None):
    """Write every new upcoming race to the signup sheet.

    Returns the ids of races written this cycle, in write order. Each id is
    added to `seen` (and persisted) right after its row lands, so a failure
    part way through only re-sends races that were never confirmed.
    """
    races = fetch_scheduled_races(config.season_number)
    if now is None:
        now = int(time.time())

    new_races = select_new_races(races, seen, now)
    if not new_races:
        return []

    player_names, bracket_names = _fetch_names(
        config.season_number, player_ids_for(new_races)
    )

    try:
        sheet = open_signup_sheet(
            sheets_client_factory(), config.spreadsheet_id, config.sheet_name
        )
    except SheetNotFoundError as e:
        log.error(str(e))
        return []

    row_number = config.sheet_input_row
    written = []
    for race in new_races:
        if not race.is_upcoming(now):
            continue
        row = build_row(race, config, player_names, bracket_names, row_number)
        sheet.insert_race_row(row, row_number)
        seen.add(race.id)
        written.append(race.id)
        log.info(f"Added race {race.id}: {row[4]} at {row[0]} UTC")

    sheet.sort_window(config.sheet_input_row, config.sort_window_rows)
    return written
