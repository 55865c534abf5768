from photoflo.models import PhotoMetadata, PhotoRecord, ViewMode
from photoflo.render import render_details, render_photos


def sample(photo_id, approved=False):
    return PhotoRecord(id=photo_id, image_url=f"https://example.com/{photo_id}.jpg", title=photo_id,
                       photographer="Fatima Al-Fassi", approved=approved, tags=["travel"])


def test_empty():
    assert render_photos([], ViewMode.LIST) == "No photos found."


def test_grid_marks_selection():
    out = render_photos([sample("a"), sample("b", True)], ViewMode.GRID, {"b"})
    assert "[ ] a" in out
    assert "[x] b" in out
    assert "Approved" in out


def test_card_view():
    out = render_photos([sample("a")], ViewMode.CARD)
    assert "by Fatima Al-Fassi  [Pending]" in out
    assert "tags: travel" in out


def test_details_hides_empty_metadata():
    assert "Camera:" not in render_details(sample("a"))

    photo = sample("a")
    photo.metadata = PhotoMetadata(camera="Sony A7 IV", aperture="f/2.8", shutter_speed="1/200s", iso=400)
    out = render_details(photo)
    assert "Camera:       Sony A7 IV" in out
    assert "Exposure:     f/2.8 1/200s ISO 400" in out
