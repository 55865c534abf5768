import datetime
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

from photoflo.config import PREFS_FILE
from photoflo.local_store import UiPrefs, load_prefs, save_prefs
from photoflo.models import FilterStatus, PhotoFloError, PhotoRecord, SortOption, Theme, ViewMode

logger = logging.getLogger(__name__)


@dataclass
class ReviewState:
    photos: List[PhotoRecord] = field(default_factory=list)
    selected_ids: Set[str] = field(default_factory=set)
    selected_photo: Optional[PhotoRecord] = None
    search_term: str = ""
    prefs: UiPrefs = field(default_factory=UiPrefs)
    loading: bool = False
    error: Optional[str] = None


def _date_key(photo: PhotoRecord) -> datetime.datetime:
    try:
        return datetime.datetime.fromisoformat(photo.upload_date.replace("Z", "+00:00"))
    except ValueError:
        return datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


def matches_search(photo: PhotoRecord, term: str) -> bool:
    """
    Case-insensitive substring match on title, photographer or any tag.
    """
    term = term.lower()
    return (
        term in photo.title.lower()
        or term in photo.photographer.lower()
        or any(term in tag.lower() for tag in photo.tags)
    )


def filter_and_sort(
    photos: List[PhotoRecord],
    filter_status: FilterStatus,
    search_term: str,
    sort_option: SortOption,
) -> List[PhotoRecord]:
    if filter_status == FilterStatus.APPROVED:
        photos = [p for p in photos if p.approved]
    elif filter_status == FilterStatus.PENDING:
        photos = [p for p in photos if not p.approved]

    photos = [p for p in photos if matches_search(p, search_term)]

    if sort_option == SortOption.DATE_OLDEST:
        return sorted(photos, key=_date_key)
    if sort_option == SortOption.PHOTOGRAPHER_AZ:
        return sorted(photos, key=lambda p: p.photographer.lower())
    if sort_option == SortOption.PHOTOGRAPHER_ZA:
        return sorted(photos, key=lambda p: p.photographer.lower(), reverse=True)
    if sort_option == SortOption.TITLE_AZ:
        return sorted(photos, key=lambda p: p.title.lower())
    if sort_option == SortOption.TITLE_ZA:
        return sorted(photos, key=lambda p: p.title.lower(), reverse=True)
    return sorted(photos, key=_date_key, reverse=True)


class PhotoReview:
    """
    Owns the review state and drives the sync client:
     - load/refresh photos
     - toggle approval (single or bulk over the selection)
     - add photos
     - view preferences
    Remote writes happen first; local state only changes once they succeed.
    """

    def __init__(self, client, state: Optional[ReviewState] = None, prefs_path: Path = PREFS_FILE):
        self.client = client
        self.prefs_path = prefs_path
        self.state = state if state is not None else ReviewState(prefs=load_prefs(prefs_path))

    # -----------------------------
    # 1) LOADING
    # -----------------------------

    def refresh(self) -> List[PhotoRecord]:
        self.state.loading = True
        self.state.error = None
        try:
            self.state.photos = self.client.fetch_all()
        except PhotoFloError as e:
            logger.error("Error refreshing photos: %s", e)
            self.state.error = str(e) or "Failed to refresh photos"
            raise
        finally:
            self.state.loading = False
        return self.state.photos

    def get_photo(self, photo_id: str) -> Optional[PhotoRecord]:
        for photo in self.state.photos:
            if photo.id == photo_id:
                return photo
        return None

    # -----------------------------
    # 2) APPROVAL
    # -----------------------------

    def toggle_approval(self, photo_id: str, approved: bool):
        try:
            self.client.set_approval(photo_id, approved)
        except PhotoFloError as e:
            logger.error("Error updating photo approval: %s", e)
            self.state.error = str(e) or "Failed to update photo approval"
            raise

        self._apply_approval({photo_id}, approved)

    def bulk_approve(self):
        self._bulk_set(True)

    def bulk_reject(self):
        self._bulk_set(False)

    def _bulk_set(self, approved: bool):
        ids = set(self.state.selected_ids)
        try:
            self.client.bulk_set_approval(sorted(ids), approved)
        except PhotoFloError as e:
            # Some rows may already be written; local state is left alone.
            logger.error("Error bulk updating photo approvals: %s", e)
            self.state.error = str(e) or "Failed to bulk update photo approvals"
            raise

        self._apply_approval(ids, approved)
        self.state.selected_ids = set()

    def _apply_approval(self, ids: Set[str], approved: bool):
        self.state.photos = [
            p.with_approval(approved) if p.id in ids else p for p in self.state.photos
        ]
        selected = self.state.selected_photo
        if selected is not None and selected.id in ids:
            self.state.selected_photo = selected.with_approval(approved)

    # -----------------------------
    # 3) SELECTION
    # -----------------------------

    def toggle_selection(self, photo_id: str):
        if photo_id in self.state.selected_ids:
            self.state.selected_ids.discard(photo_id)
        else:
            self.state.selected_ids.add(photo_id)

    def clear_selection(self):
        self.state.selected_ids = set()

    def select_photo(self, photo_id: str) -> Optional[PhotoRecord]:
        self.state.selected_photo = self.get_photo(photo_id)
        return self.state.selected_photo

    def close_details(self):
        self.state.selected_photo = None

    # -----------------------------
    # 4) ADDING
    # -----------------------------

    def add_photo(self, photo: PhotoRecord) -> PhotoRecord:
        try:
            new_photo = self.client.append(photo)
        except PhotoFloError as e:
            logger.error("Error adding photo: %s", e)
            self.state.error = str(e) or "Failed to add photo"
            raise

        self.state.photos = self.state.photos + [new_photo]
        return new_photo

    # -----------------------------
    # 5) VIEW PREFERENCES
    # -----------------------------

    def set_search_term(self, term: str):
        self.state.search_term = term

    def set_view_mode(self, mode: ViewMode):
        self.state.prefs.view_mode = ViewMode(mode)
        save_prefs(self.state.prefs, self.prefs_path)

    def set_sort_option(self, option: SortOption):
        self.state.prefs.sort_option = SortOption(option)
        save_prefs(self.state.prefs, self.prefs_path)

    def set_filter_status(self, status: FilterStatus):
        self.state.prefs.filter_status = FilterStatus(status)
        save_prefs(self.state.prefs, self.prefs_path)

    def toggle_theme(self) -> Theme:
        prefs = self.state.prefs
        prefs.theme = Theme.DARK if prefs.theme == Theme.LIGHT else Theme.LIGHT
        save_prefs(prefs, self.prefs_path)
        return prefs.theme

    def visible_photos(self) -> List[PhotoRecord]:
        prefs = self.state.prefs
        return filter_and_sort(
            self.state.photos,
            prefs.filter_status,
            self.state.search_term,
            prefs.sort_option,
        )
