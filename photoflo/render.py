"""Plain-text views of the photo list for the terminal."""

from typing import Iterable, List, Optional, Set

from photoflo.models import PhotoRecord, ViewMode


def status_label(photo: PhotoRecord) -> str:
    return "Approved" if photo.approved else "Pending"


def _mark(photo: PhotoRecord, selected_ids: Set[str]) -> str:
    return "[x]" if photo.id in selected_ids else "[ ]"


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def render_grid(photos: List[PhotoRecord], selected_ids: Set[str], columns: int = 3) -> str:
    cells = [
        f"{_mark(p, selected_ids)} {_truncate(p.title, 22):<22} {status_label(p):<8}" for p in photos
    ]
    lines = []
    for start in range(0, len(cells), columns):
        lines.append("  ".join(cells[start:start + columns]))
    return "\n".join(lines)


def render_list(photos: List[PhotoRecord], selected_ids: Set[str]) -> str:
    header = f"    {'ID':<28} {'Photographer':<20} {'Status':<8} Tags"
    lines = [header, "-" * len(header)]
    for p in photos:
        lines.append(
            f"{_mark(p, selected_ids)} {_truncate(p.id, 28):<28} "
            f"{_truncate(p.photographer, 20):<20} {status_label(p):<8} {', '.join(p.tags)}"
        )
    return "\n".join(lines)


def render_card(photos: List[PhotoRecord], selected_ids: Set[str]) -> str:
    blocks = []
    for p in photos:
        blocks.append(
            "\n".join([
                f"{_mark(p, selected_ids)} {p.title}",
                f"    by {p.photographer or 'Unknown'}  [{status_label(p)}]",
                f"    {p.image_url}",
                f"    tags: {', '.join(p.tags) or '-'}",
            ])
        )
    return "\n\n".join(blocks)


def render_photos(
    photos: Iterable[PhotoRecord],
    view_mode: ViewMode = ViewMode.GRID,
    selected_ids: Optional[Set[str]] = None,
) -> str:
    photos = list(photos)
    selected_ids = selected_ids or set()
    if not photos:
        return "No photos found."

    if view_mode == ViewMode.LIST:
        return render_list(photos, selected_ids)
    if view_mode == ViewMode.CARD:
        return render_card(photos, selected_ids)
    return render_grid(photos, selected_ids)


def render_details(photo: PhotoRecord) -> str:
    """
    The details panel: every field of one photo, camera metadata only when present.
    """
    lines = [
        photo.title,
        "=" * len(photo.title),
        f"ID:           {photo.id}",
        f"Status:       {status_label(photo)}",
        f"Photographer: {photo.photographer}",
        f"Image:        {photo.image_url}",
        f"Uploaded:     {photo.upload_date}",
        f"Tags:         {', '.join(photo.tags)}",
    ]
    if photo.description:
        lines.append(f"Description:  {photo.description}")
    if photo.page_link:
        lines.append(f"Page:         {photo.page_link}")
    if photo.orientation:
        lines.append(f"Orientation:  {photo.orientation}")

    meta = photo.metadata
    if meta.camera:
        lines.append(f"Camera:       {meta.camera}")
    if meta.lens:
        lines.append(f"Lens:         {meta.lens}")
    if meta.aperture or meta.shutter_speed or meta.iso:
        lines.append(f"Exposure:     {meta.aperture} {meta.shutter_speed} ISO {meta.iso}")
    return "\n".join(lines)
