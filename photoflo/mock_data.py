"""
Random photo data for running PhotoFlo without a spreadsheet (--demo).
"""

import dataclasses
import datetime
import random
from datetime import timezone
from typing import Iterable, List, Optional

from photoflo.models import PhotoMetadata, PhotoNotFoundError, PhotoRecord
from photoflo.sheets_client import generate_photo_id

PHOTOGRAPHERS = ["Alex Johnson", "Maria Garcia", "Chen Wei", "Fatima Al-Fassi", "David Smith"]
TAGS = ["nature", "city", "portrait", "animal", "landscape", "abstract", "food", "travel"]
CAMERAS = ["Sony A7 IV", "Canon EOS R5", "Nikon Z7 II", "Fujifilm X-T4"]
LENSES = ["50mm f/1.8", "24-70mm f/2.8", "85mm f/1.4", "16-35mm f/4"]
ISO_VALUES = [100, 200, 400, 800, 1600]

DESCRIPTION = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
    "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua."
)


def _random_date(rng: random.Random) -> str:
    start = datetime.datetime(2022, 1, 1, tzinfo=timezone.utc)
    end = datetime.datetime.now(timezone.utc)
    offset = rng.random() * (end - start).total_seconds()
    return (start + datetime.timedelta(seconds=offset)).isoformat()


def generate_mock_photos(count: int = 40, seed: Optional[int] = None) -> List[PhotoRecord]:
    """
    Build 'count' photos with 2-4 tags each, about 60% approved, and full camera metadata.
    """
    rng = random.Random(seed)
    photos = []
    for i in range(1, count + 1):
        photos.append(
            PhotoRecord(
                id=f"photo_{i}",
                image_url=f"https://picsum.photos/seed/{i}/800/600",
                title=f"Photo Title {i}",
                description=DESCRIPTION,
                photographer=rng.choice(PHOTOGRAPHERS),
                upload_date=_random_date(rng),
                approved=rng.random() > 0.4,
                tags=rng.sample(TAGS, rng.randint(2, 4)),
                metadata=PhotoMetadata(
                    camera=rng.choice(CAMERAS),
                    lens=rng.choice(LENSES),
                    aperture=f"f/{rng.random() * 8 + 1.8:.1f}",
                    shutter_speed=f"1/{rng.randint(50, 1049)}s",
                    iso=rng.choice(ISO_VALUES),
                ),
            )
        )
    return photos


class MockSheetsClient:
    """
    Same interface as SheetsSyncClient, backed by an in-memory list.
    """

    def __init__(self, photos: Optional[List[PhotoRecord]] = None):
        self.photos = list(photos) if photos is not None else generate_mock_photos()

    def fetch_all(self) -> List[PhotoRecord]:
        return list(self.photos)

    def set_approval(self, photo_id: str, approved: bool):
        for index, photo in enumerate(self.photos):
            if photo.id == photo_id:
                self.photos[index] = photo.with_approval(approved)
                return
        raise PhotoNotFoundError(photo_id)

    def bulk_set_approval(self, photo_ids: Iterable[str], approved: bool):
        for photo_id in photo_ids:
            self.set_approval(photo_id, approved)

    def append(self, photo: PhotoRecord) -> PhotoRecord:
        new_photo = dataclasses.replace(photo, id=generate_photo_id())
        if not new_photo.title:
            new_photo.title = new_photo.id
        self.photos.append(new_photo)
        return new_photo
