import logging
from typing import List, Optional
from urllib.parse import quote

import requests

from photoflo.config import REQUEST_TIMEOUT, SHEETS_BASE_URL, SheetsConfig
from photoflo.models import TransportError

logger = logging.getLogger(__name__)


def get_params(api_key: str, **extra) -> dict:
    """
    Return query params for a Sheets request. The API key rides on every call.
    """
    params = dict(extra)
    params["key"] = api_key
    return params


def values_url(config: SheetsConfig, range_: str, suffix: str = "") -> str:
    """
    Build the URL of the values resource for 'range_', e.g.
    .../spreadsheets/<id>/values/Sheet1!A1:Z1000:append
    """
    encoded = quote(range_, safe="!:'$")
    return f"{SHEETS_BASE_URL}/{config.spreadsheet_id}/values/{encoded}{suffix}"


def _send(method: str, url: str, session: Optional[requests.Session] = None, **kwargs) -> requests.Response:
    """
    Issue one request. Any non-2xx status or connection failure becomes a
    TransportError; nothing is retried.
    """
    sender = session if session is not None else requests
    try:
        resp = sender.request(method, url, timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as e:
        logger.error("%s %s failed: %s", method, url.split("?")[0], e)
        raise TransportError(f"Request to Google Sheets failed: {e}") from e

    if not resp.ok:
        logger.error("%s %s returned %s: %s", method, url.split("?")[0], resp.status_code, resp.text)
        raise TransportError(f"HTTP error! status: {resp.status_code}", status_code=resp.status_code)
    return resp


def _json(resp: requests.Response, url: str) -> dict:
    """
    Decode a successful response body. A body that is not JSON (a proxy error
    page, a truncated reply) is a TransportError too.
    """
    try:
        return resp.json()
    except ValueError as e:
        logger.error("%s returned a body that is not JSON: %s", url.split("?")[0], e)
        raise TransportError(f"Malformed response from Google Sheets: {e}", status_code=resp.status_code) from e


def get_values(config: SheetsConfig, range_: str, session: Optional[requests.Session] = None) -> dict:
    """
    Read a range. Returns the JSON body ({"range": ..., "values": [[...], ...]}).
    """
    url = values_url(config, range_)
    resp = _send(
        "GET",
        url,
        session=session,
        params=get_params(config.api_key),
    )
    return _json(resp, url)


def update_values(
    config: SheetsConfig,
    range_: str,
    values: List[List[str]],
    session: Optional[requests.Session] = None,
) -> dict:
    """
    Overwrite the cells of 'range_' with 'values', stored as typed (RAW).
    """
    url = values_url(config, range_)
    resp = _send(
        "PUT",
        url,
        session=session,
        params=get_params(config.api_key, valueInputOption="RAW"),
        json={"values": values},
    )
    return _json(resp, url)


def append_values(
    config: SheetsConfig,
    range_: str,
    values: List[List[str]],
    session: Optional[requests.Session] = None,
) -> dict:
    """
    Append rows after the last row of the table found in 'range_'.
    The service picks the insertion point.
    """
    url = values_url(config, range_, ":append")
    resp = _send(
        "POST",
        url,
        session=session,
        params=get_params(config.api_key, valueInputOption="RAW"),
        json={"values": values},
    )
    return _json(resp, url)
