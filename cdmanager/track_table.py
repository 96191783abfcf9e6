"""Rows, headers and highlighting of the track overview table."""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass

from cdmanager.labels import UiLanguage, text

SUSPICIOUS_BACKGROUND = (255, 232, 239)
SUSPICIOUS_FOREGROUND = (131, 34, 67)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class TrackOverviewRow:
    """One row of the track overview table."""

    number: int = 0
    title: str = ""
    artist: str = ""
    duration: str = ""

    def cells(self) -> tuple[str, str, str, str]:
        """Return the cell texts in table column order."""
        return (str(self.number), self.title, self.artist, self.duration)


@dataclass(frozen=True)
class TrackRowStyle:
    """Colours and tooltip of a track row.

    A background of None means transparent; a foreground of None means the
    palette's regular text colour; a tooltip of None means no tooltip.
    """

    background: tuple[int, int, int] | None = None
    foreground: tuple[int, int, int] | None = None
    tooltip: str | None = None

    @property
    def suspicious(self) -> bool:
        """True if the row is highlighted as lying in an abnormal region."""
        return self.background is not None


def track_table_headers(language: UiLanguage) -> tuple[str, str, str, str]:
    """Return the column headers of the track table."""
    return (
        text(language, "音轨", "Track"),
        text(language, "标题", "Title"),
        text(language, "艺术家", "Artist"),
        text(language, "时长", "Duration"),
    )


def track_row_style(
    number: int, suspicious_tracks: Collection[int], language: UiLanguage
) -> TrackRowStyle:
    """Return the style of the row for a track, highlighted if it is suspicious."""
    if number not in suspicious_tracks:
        return TrackRowStyle()
    return TrackRowStyle(
        background=SUSPICIOUS_BACKGROUND,
        foreground=SUSPICIOUS_FOREGROUND,
        tooltip=text(
            language,
            "该音轨位于疑似异常区段，继续播放可能导致光驱反复寻道或卡住。",
            "This track lies in a suspected abnormal region and may cause repeated seek retries.",
        ),
    )


def track_number_from_cell(cell_text: str) -> int | None:
    """Parse the track number shown in the first cell, or None if it is not a number."""
    stripped = cell_text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        return None
    return int(stripped)