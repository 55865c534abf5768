import dataclasses
import logging
import random
import string
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional

import requests

from photoflo.config import COLUMN_INDEXES, SHEET_COLUMNS, SheetsConfig, load_sheets_config
from photoflo.models import PhotoNotFoundError, PhotoRecord
from photoflo.sheet_mapper import record_to_row, row_to_record, serialize_approved
from photoflo import google_sheets_api as sheets_api

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_photo_id() -> str:
    """
    photo_<epoch ms>_<random base36>. Not checked against existing IDs.
    """
    suffix = "".join(random.choice(_ID_ALPHABET) for _ in range(11))
    return f"photo_{int(time.time() * 1000)}_{suffix}"


def sheet_name(range_: str) -> str:
    """
    Return the sheet part of an A1 range ("Sheet1!A1:Z1000" -> "Sheet1"), or "" if none.
    """
    if "!" not in range_:
        return ""
    return range_.rsplit("!", 1)[0]


class SheetsSyncClient:
    """
    Reads and writes photo rows in a Google Sheet:
     - fetch_all: every mappable row
     - set_approval: rewrite one row's approve cell
     - append: add a new row at the end
    Rows are addressed by position only, recomputed from a fresh read before each write.

    bulk_set_approval calls the API from several threads at once. A 'session'
    passed in is shared by those threads, so it must be safe to use that way;
    without one, each call goes through the module-level requests functions.
    """

    def __init__(self, config: Optional[SheetsConfig] = None, session: Optional[requests.Session] = None):
        # Refuses to build without an API key and spreadsheet ID
        self.config = config if config is not None else load_sheets_config()
        self.session = session

    def fetch_all(self) -> List[PhotoRecord]:
        """
        Fetch the whole configured range. The first row is always treated as a
        header and dropped; rows without an id or image link are skipped.
        """
        data = sheets_api.get_values(self.config, self.config.range, session=self.session)
        values = data.get("values", [])
        if not values:
            return []

        photos = []
        for row in values[1:]:
            record = row_to_record(row)
            if record is not None:
                photos.append(record)
        return photos

    def find_row_number(self, photo_id: str) -> int:
        """
        Re-read the sheet and return the 1-based row holding 'photo_id'.
        Row = index + 2 (one for 1-based rows, one for the header).
        """
        photos = self.fetch_all()
        for index, photo in enumerate(photos):
            if photo.id == photo_id:
                return index + 2
        raise PhotoNotFoundError(photo_id)

    def approval_cell(self, row_number: int) -> str:
        """
        A1 address of the approve cell in 'row_number', e.g. "Sheet1!V4".
        """
        cell_ref = f"{SHEET_COLUMNS['approve']}{row_number}"
        name = sheet_name(self.config.range)
        return f"{name}!{cell_ref}" if name else cell_ref

    def set_approval(self, photo_id: str, approved: bool):
        """
        Write TRUE/FALSE into the approve column of the row holding 'photo_id'.
        Raises PhotoNotFoundError (and writes nothing) if the ID is absent.
        """
        row_number = self.find_row_number(photo_id)
        target = self.approval_cell(row_number)
        logger.debug("Setting %s (row %d) approved=%s", photo_id, row_number, approved)
        sheets_api.update_values(
            self.config,
            target,
            [[serialize_approved(approved)]],
            session=self.session,
        )

    def bulk_set_approval(self, photo_ids: Iterable[str], approved: bool):
        """
        Run set_approval for every ID at once, one worker per ID.
        Waits for all of them; if any failed, re-raises the first failure.
        Updates that succeeded are not rolled back.
        """
        photo_ids = list(photo_ids)
        if not photo_ids:
            return

        logger.info("Updating approval for %d photos (approved=%s)", len(photo_ids), approved)
        first_error = None
        with ThreadPoolExecutor(max_workers=len(photo_ids)) as executor:
            futures = [executor.submit(self.set_approval, pid, approved) for pid in photo_ids]
            for future in as_completed(futures):
                error = future.exception()
                if error is not None and first_error is None:
                    first_error = error

        if first_error is not None:
            raise first_error

    def append(self, photo: PhotoRecord) -> PhotoRecord:
        """
        Give 'photo' a fresh ID and append it as a new row. Any ID it carried is replaced.
        """
        new_photo = dataclasses.replace(photo, id=generate_photo_id())
        if not new_photo.title:
            new_photo.title = new_photo.id

        row = record_to_row(new_photo, COLUMN_INDEXES)
        sheets_api.append_values(self.config, self.config.range, [row], session=self.session)
        logger.info("Appended photo %s", new_photo.id)
        return new_photo
