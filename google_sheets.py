"""Google Sheets signup tab — insert race rows and keep the tab sorted.

Usage:
    from google_sheets import get_client, open_signup_sheet

    sheet = open_signup_sheet(get_client(), spreadsheet_id, "Signups")
    sheet.insert_race_row(row, row_number=4)
    sheet.sort_window(start_row=4, row_count=75)
"""
import gspread
from gspread.utils import rowcol_to_a1
from google.oauth2.service_account import Credentials

from config import CREDS_PATH, ROW_WIDTH

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
]


class SheetNotFoundError(LookupError):
    pass


def get_client(creds_path=CREDS_PATH):
    """Authenticate with the service account and return a gspread client."""
    creds = Credentials.from_service_account_file(creds_path, scopes=SCOPES)
    return gspread.authorize(creds)


def open_signup_sheet(client, spreadsheet_id, sheet_name):
    """Resolve the named tab of a spreadsheet.

    Raises SheetNotFoundError if no tab has that title.
    """
    spreadsheet = client.open_by_key(spreadsheet_id)
    try:
        ws = spreadsheet.worksheet(sheet_name)
    except gspread.WorksheetNotFound:
        raise SheetNotFoundError(
            f"Sheet name '{sheet_name}' not found in spreadsheet."
        ) from None
    return SignupSheet(ws)


class SignupSheet:
    def __init__(self, worksheet):
        self.worksheet = worksheet

    def insert_race_row(self, row, row_number):
        """Insert a new row at row_number, shifting existing rows down.

        Values are USER_ENTERED so formulas evaluate; the new row does not
        inherit formatting from the row above.
        """
        if len(row) != ROW_WIDTH:
            raise ValueError(f"expected {ROW_WIDTH} columns, got {len(row)}")
        self.worksheet.insert_row(
            row,
            index=row_number,
            value_input_option="USER_ENTERED",
            inherit_from_before=False,
        )

    def sort_window(self, start_row, row_count):
        """Sort row_count rows from start_row, columns A-Q, ascending by column A."""
        end_row = start_row + row_count - 1
        window = f"{rowcol_to_a1(start_row, 1)}:{rowcol_to_a1(end_row, ROW_WIDTH)}"
        self.worksheet.sort((1, "asc"), range=window)
        return window
