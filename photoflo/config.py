import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from photoflo.models import ConfigError

# === PATH CONFIGURATION ===
DATA_DIR = Path(os.environ.get("PHOTOFLO_DATA_DIR", "data"))
PREFS_FILE = DATA_DIR / "ui_prefs.json"

# === GOOGLE SHEETS ===
SHEETS_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
DEFAULT_RANGE = "Sheet1!A1:Z1000"

API_KEY_ENV = "GOOGLE_SHEETS_API_KEY"
SPREADSHEET_ID_ENV = "GOOGLE_SHEETS_SPREADSHEET_ID"
RANGE_ENV = "GOOGLE_SHEETS_RANGE"

# None means "whatever requests does", i.e. wait forever
REQUEST_TIMEOUT: Optional[float] = None

# === COLUMN LAYOUT ===
# Must match the spreadsheet exactly; there is no header-based discovery.
SHEET_COLUMNS: Dict[str, str] = {
    "source": "A",
    "id": "C",
    "page_link": "G",
    "image_link": "H",
    "tags": "O",
    "photographer": "P",
    "orientation": "U",
    "approve": "V",
}

# 0-based indexes into a row
COLUMN_INDEXES: Dict[str, int] = {
    "source": 0,
    "id": 2,
    "page_link": 6,
    "image_link": 7,
    "tags": 14,
    "photographer": 15,
    "orientation": 20,
    "approve": 21,
}


@dataclass(frozen=True)
class SheetsConfig:
    api_key: str
    spreadsheet_id: str
    range: str = DEFAULT_RANGE


def column_letter(index: int) -> str:
    """
    Convert a 0-based column index to its A1 letters (0 -> A, 26 -> AA).
    """
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")
    letters = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def load_sheets_config(environ: Optional[Mapping[str, str]] = None) -> SheetsConfig:
    """
    Read the Sheets settings from the environment.
    Raises ConfigError if the API key or spreadsheet ID is missing.
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_ENV, "")
    if not api_key:
        raise ConfigError(
            f"Google Sheets API key is missing. Please set {API_KEY_ENV} in your environment."
        )

    spreadsheet_id = environ.get(SPREADSHEET_ID_ENV, "")
    if not spreadsheet_id:
        raise ConfigError(
            f"Google Sheets spreadsheet ID is missing. Please set {SPREADSHEET_ID_ENV} in your environment."
        )

    return SheetsConfig(
        api_key=api_key,
        spreadsheet_id=spreadsheet_id,
        range=environ.get(RANGE_ENV) or DEFAULT_RANGE,
    )
