"""
Sheet row <-> PhotoRecord mapping.
"""

import datetime

import pytest

from photoflo.config import COLUMN_INDEXES
from photoflo.models import PhotoRecord
from photoflo.sheet_mapper import (
    cell,
    parse_approved,
    parse_tags,
    record_to_row,
    row_to_record,
    serialize_approved,
    serialize_tags,
)

from conftest import make_row


class TestCells:

    def test_missing_cells_are_empty(self):
        assert cell(["a"], 5) == ""
        assert cell(["a", None], 1) == ""
        assert cell(["a", "b"], 1) == "b"

    def test_short_row_maps_without_error(self):
        row = ["src", "", "photo_1", "", "", "", "", "https://example.com/1.jpg"]
        record = row_to_record(row)
        assert record is not None
        assert record.photographer == ""
        assert record.tags == []
        assert record.approved is False


class TestRowToRecord:

    def test_full_row(self):
        now = datetime.datetime(2024, 5, 1, tzinfo=datetime.timezone.utc)
        row = make_row(
            "photo_7",
            "https://example.com/7.jpg",
            source="Unsplash",
            page_link="https://example.com/page",
            tags="nature, city ,sky",
            photographer="Maria Garcia",
            orientation="landscape",
            approve="TRUE",
        )
        record = row_to_record(row, now=now)

        assert record.id == "photo_7"
        assert record.title == "photo_7"
        assert record.image_url == "https://example.com/7.jpg"
        assert record.description == "Unsplash"
        assert record.source == "Unsplash"
        assert record.photographer == "Maria Garcia"
        assert record.tags == ["nature", "city", "sky"]
        assert record.page_link == "https://example.com/page"
        assert record.orientation == "landscape"
        assert record.approved is True
        assert record.upload_date == now.isoformat()
        assert record.metadata.camera == ""
        assert record.metadata.iso == 0

    @pytest.mark.parametrize("photo_id,image_link", [("", "https://x/1.jpg"), ("photo_1", ""), ("", "")])
    def test_missing_required_fields_yield_none(self, photo_id, image_link):
        row = make_row(photo_id, image_link, photographer="Someone", approve="TRUE", tags="a,b")
        assert row_to_record(row) is None

    def test_empty_row_yields_none(self):
        assert row_to_record([]) is None


class TestApproval:

    @pytest.mark.parametrize("text", ["TRUE", "true", "True", "tRuE"])
    def test_true_any_case(self, text):
        assert parse_approved(text) is True

    @pytest.mark.parametrize("text", ["", "TRUE ", " true", "1", "yes", "FALSE", "approved"])
    def test_anything_else_is_not_approved(self, text):
        assert parse_approved(text) is False

    def test_write_is_uppercase(self):
        assert serialize_approved(True) == "TRUE"
        assert serialize_approved(False) == "FALSE"


class TestTags:

    def test_empty(self):
        assert parse_tags("") == []

    def test_split_and_trim(self):
        assert parse_tags(" a ,b c,  d") == ["a", "b c", "d"]

    def test_no_dedup(self):
        assert parse_tags("a,a") == ["a", "a"]

    def test_serialize_then_parse_keeps_order(self):
        tags = ["a", "b c", "d"]
        assert serialize_tags(tags) == "a, b c, d"
        assert parse_tags(serialize_tags(tags)) == tags


class TestRecordToRow:

    def test_row_width_and_positions(self):
        record = PhotoRecord(
            id="photo_9",
            image_url="https://example.com/9.jpg",
            photographer="Chen Wei",
            tags=["x", "y"],
            approved=True,
            source="Pexels",
        )
        row = record_to_row(record)

        assert len(row) == max(COLUMN_INDEXES.values()) + 1
        assert row[COLUMN_INDEXES["id"]] == "photo_9"
        assert row[COLUMN_INDEXES["image_link"]] == "https://example.com/9.jpg"
        assert row[COLUMN_INDEXES["photographer"]] == "Chen Wei"
        assert row[COLUMN_INDEXES["tags"]] == "x, y"
        assert row[COLUMN_INDEXES["approve"]] == "TRUE"
        assert row[COLUMN_INDEXES["source"]] == "Pexels"
        # Unmapped columns stay blank
        assert row[1] == ""
        assert row[3] == ""

    def test_source_falls_back_to_description(self):
        record = PhotoRecord(id="p", image_url="u", description="From description")
        assert record_to_row(record)[COLUMN_INDEXES["source"]] == "From description"

    @pytest.mark.parametrize("approve_cell,expected", [("true", "TRUE"), ("True", "TRUE"), ("no", "FALSE")])
    def test_row_record_row_preserves_key_fields(self, approve_cell, expected):
        row = make_row("photo_3", "https://example.com/3.jpg", photographer="Ana", approve=approve_cell)
        out = record_to_row(row_to_record(row))

        assert out[COLUMN_INDEXES["id"]] == "photo_3"
        assert out[COLUMN_INDEXES["image_link"]] == "https://example.com/3.jpg"
        assert out[COLUMN_INDEXES["photographer"]] == "Ana"
        assert out[COLUMN_INDEXES["approve"]] == expected
