#!/usr/bin/env python3
"""NMG Race Sheet Bot — keep the signup sheet in sync with scheduled races.

Polls the league API once at startup and then every few minutes, adding a
row for each newly scheduled race and re-sorting the signup window.

Usage:
    python run.py

Files (next to this script unless overridden by environment):
    config.json            NMG_BOT_CONFIG
    state.json             NMG_BOT_STATE
    service_account.json   NMG_BOT_CREDENTIALS
"""
import time

import schedule

from bot import process_races
from config import CONFIG_PATH, STATE_PATH, load_config
from seen_store import SeenStore
from shared_utils import setup_logger

log = setup_logger("nmg_bot", "nmg_bot.log")


def run_cycle(config, seen, **kwargs):
    """Run one cycle; any failure is logged and swallowed."""
    try:
        written = process_races(config, seen, **kwargs)
    except Exception as e:
        log.error(f"Error processing races: {e}", exc_info=True)
        return None
    if written:
        log.info(f"Cycle complete: {len(written)} race(s) added ({len(seen)} seen)")
    return written


def main():
    config = load_config(CONFIG_PATH)
    seen = SeenStore.load(STATE_PATH)

    log.info("Bot started up.")
    log.info(f"Season {config.season_number} → '{config.sheet_name}' "
             f"every {config.poll_interval_minutes} min, {len(seen)} race(s) already seen")

    # Cycles are assumed to finish well inside the interval; nothing stops
    # two from overlapping if one runs long.
    run_cycle(config, seen)
    schedule.every(config.poll_interval_minutes).minutes.do(run_cycle, config, seen)

    while True:
        schedule.run_pending()
        time.sleep(1)


if __name__ == "__main__":
    main()
