import datetime
import logging
from datetime import timezone
from typing import Dict, List, Optional, Sequence

from photoflo.config import COLUMN_INDEXES
from photoflo.models import PhotoMetadata, PhotoRecord

logger = logging.getLogger(__name__)


def cell(row: Sequence[Optional[str]], index: int) -> str:
    """
    Return the cell at 'index', or "" if the row is too short or the cell is empty.
    The Sheets API trims trailing empty cells, so short rows are normal.
    """
    if index < len(row) and row[index] is not None:
        return str(row[index])
    return ""


def parse_tags(text: str) -> List[str]:
    if not text:
        return []
    return [tag.strip() for tag in text.split(",")]


def serialize_tags(tags: Sequence[str]) -> str:
    return ", ".join(tags)


def parse_approved(text: str) -> bool:
    """
    Only a case-insensitive "true" counts. "TRUE " (trailing space), "1" and "yes" do not.
    """
    return text.lower() == "true"


def serialize_approved(approved: bool) -> str:
    return "TRUE" if approved else "FALSE"


def row_to_record(
    row: Sequence[Optional[str]],
    columns: Dict[str, int] = COLUMN_INDEXES,
    now: Optional[datetime.datetime] = None,
) -> Optional[PhotoRecord]:
    """
    Convert one sheet row into a PhotoRecord.
    Returns None when the id or image link cell is empty.
    """
    photo_id = cell(row, columns["id"])
    image_link = cell(row, columns["image_link"])
    if not photo_id or not image_link:
        logger.debug("Skipping row without id or image link: %r", row)
        return None

    source = cell(row, columns["source"])
    if now is None:
        now = datetime.datetime.now(timezone.utc)

    return PhotoRecord(
        id=photo_id,
        image_url=image_link,
        title=photo_id,
        description=source,
        photographer=cell(row, columns["photographer"]),
        upload_date=now.isoformat(),
        approved=parse_approved(cell(row, columns["approve"])),
        tags=parse_tags(cell(row, columns["tags"])),
        source=source,
        page_link=cell(row, columns["page_link"]),
        orientation=cell(row, columns["orientation"]),
        metadata=PhotoMetadata(),
    )


def record_to_row(record: PhotoRecord, columns: Dict[str, int] = COLUMN_INDEXES) -> List[str]:
    """
    Convert a PhotoRecord into a row wide enough to reach the last mapped column.
    Unmapped cells are "".
    """
    row = [""] * (max(columns.values()) + 1)

    row[columns["source"]] = record.source or record.description or ""
    row[columns["id"]] = record.id
    row[columns["page_link"]] = record.page_link or ""
    row[columns["image_link"]] = record.image_url
    row[columns["tags"]] = serialize_tags(record.tags)
    row[columns["photographer"]] = record.photographer
    row[columns["orientation"]] = record.orientation or ""
    row[columns["approve"]] = serialize_approved(record.approved)

    return row
