import os
import json
from dataclasses import dataclass

NMG_API_ROOT = "https://nmg-league.foxlisk.com/api/v1"
REQUEST_TIMEOUT = 30

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_PATH = os.environ.get("NMG_BOT_CONFIG", os.path.join(BASE_DIR, "config.json"))
STATE_PATH = os.environ.get("NMG_BOT_STATE", os.path.join(BASE_DIR, "state.json"))
CREDS_PATH = os.environ.get("NMG_BOT_CREDENTIALS", os.path.join(BASE_DIR, "service_account.json"))

# Signup sheet layout
ROW_WIDTH = 17               # columns A-Q
SORT_WINDOW_ROWS = 75        # rows re-sorted below the insert row
POLL_INTERVAL_MINUTES = 10

# Cells on the helper tab holding the UTC offset (as a fraction of a day)
STANDARD_OFFSET_CELL = "Sheet2!$A$1"   # EST, UTC-5
DST_OFFSET_CELL = "Sheet2!$A$2"        # EDT, UTC-4

# config.json key → BotConfig field
REQUIRED_KEYS = {
    "seasonNumber": "season_number",
    "spreadsheetId": "spreadsheet_id",
    "sheetName": "sheet_name",
    "sheetInputRow": "sheet_input_row",
    "eventName": "event_name",
    "runEstimate": "run_estimate",
    "runnerCount": "runner_count",
}
OPTIONAL_KEYS = {
    "dstOffsetCell": "dst_offset_cell",
    "standardOffsetCell": "standard_offset_cell",
    "sortWindowRows": "sort_window_rows",
    "pollIntervalMinutes": "poll_interval_minutes",
}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class BotConfig:
    season_number: int
    spreadsheet_id: str
    sheet_name: str
    sheet_input_row: int         # 1-based row new races are inserted at
    event_name: str
    run_estimate: object         # written as-is, e.g. "1:30:00"
    runner_count: object
    dst_offset_cell: str = DST_OFFSET_CELL
    standard_offset_cell: str = STANDARD_OFFSET_CELL
    sort_window_rows: int = SORT_WINDOW_ROWS
    poll_interval_minutes: int = POLL_INTERVAL_MINUTES

    @classmethod
    def from_dict(cls, raw):
        """Build a config from the camelCase keys used in config.json."""
        missing = [k for k in REQUIRED_KEYS if k not in raw]
        if missing:
            raise ConfigError(f"config is missing required keys: {', '.join(missing)}")

        kwargs = {field: raw[key] for key, field in REQUIRED_KEYS.items()}
        for key, field in OPTIONAL_KEYS.items():
            if key in raw:
                kwargs[field] = raw[key]

        try:
            kwargs["sheet_input_row"] = int(kwargs["sheet_input_row"])
            kwargs["sort_window_rows"] = int(kwargs.get("sort_window_rows", SORT_WINDOW_ROWS))
            kwargs["poll_interval_minutes"] = int(kwargs.get("poll_interval_minutes", POLL_INTERVAL_MINUTES))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid numeric config value: {e}") from e

        for key, field in (("sheetInputRow", "sheet_input_row"),
                           ("sortWindowRows", "sort_window_rows"),
                           ("pollIntervalMinutes", "poll_interval_minutes")):
            if kwargs[field] < 1:
                raise ConfigError(f"{key} must be 1 or greater")
        return cls(**kwargs)


def load_config(path=CONFIG_PATH):
    """Load the static bot configuration from a JSON file."""
    with open(path) as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return BotConfig.from_dict(raw)
