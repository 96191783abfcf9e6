"""Checks a project must pass before a burn may start."""

from __future__ import annotations

from cdmanager.project import CdProject

STANDARD_CAPACITY_SECONDS = 80 * 60


class BurnAbortedError(Exception):
    """Raised when a project cannot be burned as it stands."""


def total_burn_seconds(project: CdProject) -> int:
    """Return the audio length plus the gaps between tracks, in seconds."""
    audio = sum(max(track.duration_seconds, 0) for track in project.tracks)
    gaps = max(0, len(project.tracks) - 1) * max(project.track_gap_seconds, 0)
    return audio + gaps


def source_files(project: CdProject) -> list[str]:
    """Return the source file paths of the tracks that have one, in order."""
    return [track.file_path for track in project.tracks if track.file_path]


def check_burn_project(project: CdProject) -> list[str]:
    """Return the source files to burn, or raise BurnAbortedError if the burn cannot start."""
    files = source_files(project)
    if not files:
        raise BurnAbortedError("No audio files in track list.")
    if not project.allow_overburn and total_burn_seconds(project) > STANDARD_CAPACITY_SECONDS:
        raise BurnAbortedError(
            "Burn aborted: project exceeds standard 80-minute CD capacity. "
            "Enable overburn to continue."
        )
    return files