"""Records, enums and errors shared across PhotoFlo."""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass
class PhotoMetadata:
    """Camera details. Always empty for photos read from the sheet."""
    camera: str = ""
    lens: str = ""
    aperture: str = ""
    shutter_speed: str = ""
    iso: int = 0


@dataclass
class PhotoRecord:
    """One photo as held in memory."""
    id: str
    image_url: str
    title: str = ""
    description: str = ""
    photographer: str = ""
    upload_date: str = ""  # ISO string, synthesized at read time
    approved: bool = False
    tags: List[str] = field(default_factory=list)
    source: str = ""
    page_link: str = ""
    orientation: str = ""
    metadata: PhotoMetadata = field(default_factory=PhotoMetadata)

    def with_approval(self, approved: bool) -> "PhotoRecord":
        return dataclasses.replace(self, approved=approved)


class ViewMode(str, Enum):
    GRID = "grid"
    LIST = "list"
    CARD = "card"


class SortOption(str, Enum):
    DATE_NEWEST = "date-newest"
    DATE_OLDEST = "date-oldest"
    PHOTOGRAPHER_AZ = "photographer-az"
    PHOTOGRAPHER_ZA = "photographer-za"
    TITLE_AZ = "title-az"
    TITLE_ZA = "title-za"


class FilterStatus(str, Enum):
    ALL = "all"
    APPROVED = "approved"
    PENDING = "pending"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class PhotoFloError(Exception):
    """Base exception for PhotoFlo operations."""


class ConfigError(PhotoFloError):
    """Raised when a required setting is missing."""


class TransportError(PhotoFloError):
    """Raised when a Sheets request fails or returns a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PhotoNotFoundError(PhotoFloError):
    """Raised when a photo ID is not present in the sheet."""

    def __init__(self, photo_id: str):
        super().__init__(f"Photo with ID {photo_id} not found")
        self.photo_id = photo_id
