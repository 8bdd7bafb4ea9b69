from __future__ import annotations

import re
from typing import Any, Dict, List

import gspread
import pytest

from config import BotConfig
from nmg_client import Race


class FakeWorksheet:
    """In-memory stand-in for gspread.Worksheet covering insert_row and sort."""

    def __init__(self, title: str = "Signups", sheet_id: int = 123, rows: List[List[Any]] | None = None) -> None:
        self.title = title
        self.id = sheet_id
        self.rows: List[List[Any]] = [list(r) for r in (rows or [])]
        self.calls: List[Dict[str, Any]] = []

    def insert_row(self, values, index=1, value_input_option="RAW", inherit_from_before=False):
        self.calls.append(
            {
                "op": "insert_row",
                "values": list(values),
                "index": index,
                "value_input_option": value_input_option,
                "inherit_from_before": inherit_from_before,
            }
        )
        while len(self.rows) < index - 1:
            self.rows.append([])
        self.rows.insert(index - 1, list(values))

    def sort(self, *specs, range=None):
        self.calls.append({"op": "sort", "specs": specs, "range": range})
        m = re.fullmatch(r"([A-Z]+)(\d+):([A-Z]+)(\d+)", range)
        start, end = int(m.group(2)), int(m.group(4))
        while len(self.rows) < end:
            self.rows.append([])
        col, _order = specs[0]

        def key(row):
            value = row[col - 1] if len(row) >= col else ""
            return (value == "", value)

        self.rows[start - 1:end] = sorted(self.rows[start - 1:end], key=key)

    def ops(self) -> List[str]:
        return [c["op"] for c in self.calls]


class FakeSpreadsheet:
    def __init__(self, worksheets: List[FakeWorksheet]) -> None:
        self._worksheets = {ws.title: ws for ws in worksheets}

    def worksheet(self, title: str) -> FakeWorksheet:
        try:
            return self._worksheets[title]
        except KeyError:
            raise gspread.WorksheetNotFound(title) from None


class FakeClient:
    def __init__(self, spreadsheet: FakeSpreadsheet) -> None:
        self.spreadsheet = spreadsheet
        self.opened: List[str] = []

    def open_by_key(self, key: str) -> FakeSpreadsheet:
        self.opened.append(key)
        return self.spreadsheet


@pytest.fixture
def bot_config() -> BotConfig:
    return BotConfig(
        season_number=5,
        spreadsheet_id="sheet-key",
        sheet_name="Signups",
        sheet_input_row=4,
        event_name="NMG Season 5",
        run_estimate="1:30:00",
        runner_count=2,
    )


@pytest.fixture
def worksheet() -> FakeWorksheet:
    header = [["Header"], ["Sub header"], ["Column names"]]
    return FakeWorksheet(rows=header)


@pytest.fixture
def sheets_client(worksheet: FakeWorksheet) -> FakeClient:
    return FakeClient(FakeSpreadsheet([worksheet]))


def make_race(race_id: int, scheduled_for: int | None, state: str = "Scheduled",
              player_1_id: int = 10, player_2_id: int = 11, bracket_id: int = 1) -> Race:
    return Race(
        id=race_id,
        state=state,
        player_1_id=player_1_id,
        player_2_id=player_2_id,
        bracket_id=bracket_id,
        scheduled_for=scheduled_for,
    )
