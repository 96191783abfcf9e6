"""Project model for an audio CD and CD-TEXT language detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class CdTextLanguage(Enum):
    """Character set used for the CD-TEXT block."""

    JAPANESE = "jp"
    LATIN = "latin"


@dataclass
class Track:
    """One audio track of a CD project."""

    number: int = 0
    title: str = ""
    artist: str = ""
    file_path: str = ""
    duration_seconds: int = 0


@dataclass
class CdProject:
    """Album-level metadata and the ordered list of tracks."""

    album_title: str = ""
    album_artist: str = ""
    tracks: list[Track] = field(default_factory=list)
    track_gap_seconds: int = 2
    allow_overburn: bool = False
    cd_text_language: CdTextLanguage = CdTextLanguage.JAPANESE


def _is_japanese_code_point(code: int) -> bool:
    return (
        0x3040 <= code <= 0x30FF  # hiragana / katakana
        or 0x4E00 <= code <= 0x9FFF  # CJK unified ideographs
        or 0xFF01 <= code <= 0xFFEF  # fullwidth forms / halfwidth katakana
        or code == 0x3000  # ideographic space
    )


def contains_japanese_text(text: str) -> bool:
    """Return True if the text holds any kana, kanji or fullwidth character."""
    return any(_is_japanese_code_point(ord(ch)) for ch in text)


def detect_burn_language(
    album_title: str, album_artist: str, tracks: Iterable[Track]
) -> CdTextLanguage:
    """Pick Japanese if any album or track title/artist looks Japanese, else Latin."""
    if contains_japanese_text(album_title) or contains_japanese_text(album_artist):
        return CdTextLanguage.JAPANESE
    for track in tracks:
        if contains_japanese_text(track.title) or contains_japanese_text(track.artist):
            return CdTextLanguage.JAPANESE
    return CdTextLanguage.LATIN