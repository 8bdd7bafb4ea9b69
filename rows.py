"""Signup sheet row construction.

Each race becomes one 17-column row (A-Q):

    A  UTC start time          MM/DD/YYYY HH:MM:SS
    B  UTC weekday             formula on A
    C  Eastern start time      formula: A minus the EST or EDT offset cell
    D  Eastern weekday         formula on C
    E  event label             "<event>: <bracket> - <p1> vs. <p2>"
    F  run estimate
    G  runner count
    H-Q left blank for volunteers
"""
from config import ROW_WIDTH
from eastern_time import from_epoch, format_sheet_datetime, is_eastern_dst


def player_name(player_names, player_id):
    return player_names.get(player_id) or f"Player {player_id}"


def bracket_name(bracket_names, bracket_id):
    return bracket_names.get(bracket_id) or f"Bracket {bracket_id}"


def event_label(event_name, race, player_names, bracket_names):
    """Human readable event text; unknown ids fall back to placeholders."""
    bracket = bracket_name(bracket_names, race.bracket_id)
    p1 = player_name(player_names, race.player_1_id)
    p2 = player_name(player_names, race.player_2_id)
    return f"{event_name}: {bracket} - {p1} vs. {p2}"


def offset_cell_for(config, start):
    if start is not None and is_eastern_dst(start):
        return config.dst_offset_cell
    return config.standard_offset_cell


def build_row(race, config, player_names, bracket_names, row_number):
    """Build the A-Q values for a race written at row_number (1-based)."""
    start = from_epoch(race.scheduled_for) if race.scheduled_for else None
    n = row_number
    offset_cell = offset_cell_for(config, start)

    row = [
        format_sheet_datetime(start) if start else "",
        f'=IF(A{n}="", "", TEXT(A{n}, "ddd"))',
        f'=IF(A{n}="", "", A{n}-{offset_cell})',
        f'=IF(C{n}="", "", TEXT(C{n}, "ddd"))',
        event_label(config.event_name, race, player_names, bracket_names),
        config.run_estimate,
        config.runner_count,
    ]
    row.extend([""] * (ROW_WIDTH - len(row)))
    return row
