import json
import logging
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Type

from photoflo.config import PREFS_FILE
from photoflo.models import FilterStatus, SortOption, Theme, ViewMode

logger = logging.getLogger(__name__)


@dataclass
class UiPrefs:
    view_mode: ViewMode = ViewMode.GRID
    theme: Theme = Theme.LIGHT
    sort_option: SortOption = SortOption.DATE_NEWEST
    filter_status: FilterStatus = FilterStatus.ALL


def _enum_value(enum_cls: Type[Enum], raw, default):
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning("Ignoring unknown %s value %r", enum_cls.__name__, raw)
        return default


def load_prefs(path: Path = PREFS_FILE) -> UiPrefs:
    """
    Load ui_prefs.json. Missing file, bad JSON or unknown values fall back to defaults.
    """
    defaults = UiPrefs()
    if not path.exists():
        return defaults

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Preferences file %s unreadable (%s). Using defaults.", path, e)
        return defaults

    if not isinstance(data, dict):
        return defaults

    return UiPrefs(
        view_mode=_enum_value(ViewMode, data.get("view_mode", defaults.view_mode), defaults.view_mode),
        theme=_enum_value(Theme, data.get("theme", defaults.theme), defaults.theme),
        sort_option=_enum_value(SortOption, data.get("sort_option", defaults.sort_option), defaults.sort_option),
        filter_status=_enum_value(
            FilterStatus, data.get("filter_status", defaults.filter_status), defaults.filter_status
        ),
    )


def save_prefs(prefs: UiPrefs, path: Path = PREFS_FILE):
    """
    Write the preferences to 'path' as JSON, creating the directory if needed.
    """
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    data = {key: value.value for key, value in asdict(prefs).items()}
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
