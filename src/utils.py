from typing import Iterable, Sequence, TypeVar

from telegram import PhotoSize


T = TypeVar("T")


def in_rows(items: Iterable[T], size: int = 2) -> list[list[T]]:
    """Split ``items`` into keyboard rows of ``size`` (the last row may be shorter)."""
    rows: list[list[T]] = []
    for item in items:
        if not rows or len(rows[-1]) == size:
            rows.append([])
        rows[-1].append(item)
    return rows


def describe_photos(photos: Sequence[PhotoSize]) -> str:
    """One block per size Telegram sent for the image."""
    return "\n----------\n".join(
        f"Image of size ({p.width} x {p.height})\nID: {p.file_id}\nSize: {p.file_size or 0}"
        for p in photos
    )


def or_default(value, default: str) -> str:
    return str(value) if value not in (None, "") else default
