"""Editable list of tracks to burn, with album details and burn options."""

from __future__ import annotations

import locale
import os
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass, field
from pathlib import PurePath

from cdmanager.audio_probe import duration_label, mmss_text, wav_duration_seconds
from cdmanager.burn_capacity import capacity_summary as _capacity_summary
from cdmanager.labels import UiLanguage, text
from cdmanager.project import CdProject, CdTextLanguage, Track, detect_burn_language

_LOADED_UNKNOWN_DURATION = "Auto"


class BurnListError(Exception):
    """Raised when an action on the burn list cannot be carried out."""


@dataclass
class BurnEntry:
    """One track in the burn list."""

    number: int = 0
    title: str = ""
    artist: str = ""
    source_path: str = ""
    duration_seconds: int = 0
    duration_text: str = ""
    checked: bool = True

    def to_track(self) -> Track:
        """Return the project track described by this entry."""
        return Track(
            number=self.number,
            title=self.title,
            artist=self.artist,
            file_path=self.source_path,
            duration_seconds=self.duration_seconds,
        )


@dataclass(frozen=True)
class BurnRequest:
    """Everything needed to start a burn of the current list."""

    project: CdProject
    device_path: str
    selected: list[int]
    simulation: bool
    speed_x: int


@dataclass
class BurnList:
    """The tracks, album details and options of the burn page."""

    album_title: str = ""
    album_artist: str = ""
    entries: list[BurnEntry] = field(default_factory=list)
    device_path: str = ""
    gap_seconds: int = 2
    speed_x: int = 8
    language_mode: str = "auto"
    simulation: bool = False
    overburn: bool = False
    language: UiLanguage = UiLanguage.ENGLISH

    def load_project(self, project: CdProject, device_path: str) -> None:
        """Replace the album details and tracks with those of a project."""
        self.device_path = device_path
        self.album_title = project.album_title
        self.album_artist = project.album_artist
        self.entries = [
            BurnEntry(
                number=track.number,
                title=track.title,
                artist=track.artist,
                source_path=track.file_path,
                duration_seconds=track.duration_seconds,
                duration_text=(
                    mmss_text(track.duration_seconds)
                    if track.duration_seconds > 0
                    else _LOADED_UNKNOWN_DURATION
                ),
            )
            for track in project.tracks
        ]

    def add_files(self, paths: Iterable[str], is_supported: Callable[[str], bool]) -> None:
        """Append the supported files as checked tracks titled after their file names."""
        for path in paths:
            path = os.fspath(path)
            if not is_supported(path):
                continue
            seconds = wav_duration_seconds(path)
            self.entries.append(
                BurnEntry(
                    number=len(self.entries) + 1,
                    title=PurePath(path).stem,
                    artist="",
                    source_path=path,
                    duration_seconds=seconds,
                    duration_text=duration_label(seconds, self.language),
                )
            )
        self.renumber()

    def remove(self, indices: Collection[int]) -> None:
        """Remove the entries at the given positions and renumber the rest."""
        chosen = set(indices)
        if not chosen:
            raise BurnListError(text(self.language, "没有选中的音轨。", "No tracks selected."))
        self.entries = [entry for index, entry in enumerate(self.entries) if index not in chosen]
        self.renumber()

    def clear(self) -> None:
        """Remove every entry."""
        self.entries.clear()

    def sort_by_filename(self) -> None:
        """Order the entries by the file name of their source and renumber them."""
        self.entries.sort(key=lambda entry: locale.strxfrm(os.path.basename(entry.source_path)))
        self.renumber()

    def renumber(self) -> None:
        """Number the entries consecutively from 1 in list order."""
        for number, entry in enumerate(self.entries, start=1):
            entry.number = number

    def selected_indices(self) -> list[int]:
        """Return the positions of the checked entries."""
        return [index for index, entry in enumerate(self.entries) if entry.checked]

    def has_user_authored_content(self) -> bool:
        """True if any album detail, title, artist or source has been filled in."""
        if self.album_title.strip() or self.album_artist.strip():
            return True
        return any(
            entry.title.strip() or entry.artist.strip() or entry.source_path.strip()
            for entry in self.entries
        )

    def to_project(self) -> CdProject:
        """Build the project to burn from the album details and checked entries."""
        album_title = self.album_title.strip()
        album_artist = self.album_artist.strip()
        if self.language_mode == "jp":
            cd_text_language = CdTextLanguage.JAPANESE
        elif self.language_mode == "latin":
            cd_text_language = CdTextLanguage.LATIN
        else:
            cd_text_language = detect_burn_language(
                album_title, album_artist, (entry.to_track() for entry in self.entries)
            )
        return CdProject(
            album_title=album_title,
            album_artist=album_artist,
            tracks=[entry.to_track() for entry in self.entries if entry.checked],
            track_gap_seconds=self.gap_seconds,
            allow_overburn=self.overburn,
            cd_text_language=cd_text_language,
        )

    def capacity_summary(self) -> str:
        """Describe the projected length of the checked entries."""
        return _capacity_summary(
            (entry.duration_seconds for entry in self.entries if entry.checked),
            self.gap_seconds,
            self.overburn,
            self.language,
        )

    def burn_request(self) -> BurnRequest:
        """Return the burn request for the checked entries, or raise BurnListError."""
        if not self.entries:
            raise BurnListError(text(self.language, "还没有可刻录的音轨。", "No tracks to burn."))
        selected = self.selected_indices()
        if not selected:
            raise BurnListError(
                text(self.language, "至少选择一条音轨。", "Select at least one track.")
            )
        return BurnRequest(
            project=self.to_project(),
            device_path=self.device_path,
            selected=selected,
            simulation=self.simulation,
            speed_x=self.speed_x,
        )