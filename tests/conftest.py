"""Shared fixtures: a fake Sheets session and row builders."""

from unittest import mock

import pytest

from photoflo.config import COLUMN_INDEXES, SheetsConfig


def make_row(photo_id="photo_1", image_link="https://example.com/1.jpg", **cells):
    """Build a sheet row with values placed at the configured column positions."""
    row = [""] * (max(COLUMN_INDEXES.values()) + 1)
    row[COLUMN_INDEXES["id"]] = photo_id
    row[COLUMN_INDEXES["image_link"]] = image_link
    for name, value in cells.items():
        row[COLUMN_INDEXES[name]] = value
    return row


def make_response(status_code=200, body=None):
    resp = mock.Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = body if body is not None else {}
    resp.text = "" if body is None else str(body)
    return resp


@pytest.fixture
def sheets_config():
    return SheetsConfig(api_key="test-key", spreadsheet_id="sheet-123", range="Sheet1!A1:Z1000")


@pytest.fixture
def session():
    """A stand-in requests.Session; set session.request.return_value / side_effect per test."""
    return mock.Mock()
