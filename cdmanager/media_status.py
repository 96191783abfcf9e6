"""Interpretation of optical drive status output and device identifiers."""

from __future__ import annotations

import re
from collections.abc import Sequence

_DRUTIL_PREFIX = "drutil-index://"
_RAW_DISK_PREFIX = "/dev/rdisk"
_EMPTY_TIME = "00:00:00"

_USED_BLANK_RE = re.compile(r"space used:\s+([0-9:]+)", re.IGNORECASE)
_TRACKS_BLANK_RE = re.compile(r"tracks:\s+(\d+)", re.IGNORECASE)
_FREE_BLANK_RE = re.compile(r"space free:\s+([0-9:]+)", re.IGNORECASE)

_TYPE_SIG_RE = re.compile(r"type:\s*([^\n]+?)(?:name:|$)", re.IGNORECASE)
_TRACKS_SIG_RE = re.compile(r"tracks:\s*(\d+)", re.IGNORECASE)
_USED_SIG_RE = re.compile(r"space used:\s*([0-9:]+)", re.IGNORECASE)

_REWRITABLE_TYPES = ("type: cd-rw", "type: dvd-rw", "type: bd-re")


def _simplified(text: str) -> str:
    return " ".join(text.split())


def _captured(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def status_output_looks_writable_blank_media(status_output: str) -> bool:
    """Return True if the drive status describes blank (or rewritable) media."""
    normalized = status_output.lower()
    if any(marker in normalized for marker in _REWRITABLE_TYPES):
        return True

    used = _USED_BLANK_RE.search(status_output)
    if used and used.group(1) != _EMPTY_TIME:
        return False

    tracks = _TRACKS_BLANK_RE.search(status_output)
    if tracks and int(tracks.group(1)) > 0:
        return False

    free = _FREE_BLANK_RE.search(status_output)
    if free:
        return free.group(1) != _EMPTY_TIME

    return False


def media_status_signature(status_output: str) -> str:
    """Condense status output into a signature of media type, tracks and used space."""
    normalized = _simplified(status_output).lower()
    media_type = _simplified(_captured(_TYPE_SIG_RE, normalized))
    tracks = _captured(_TRACKS_SIG_RE, normalized)
    used = _captured(_USED_SIG_RE, normalized)
    return f"type={media_type}|tracks={tracks}|used={used}"


def whole_disk_path_for_device(device_path: str) -> str:
    """Map a raw disk node to its whole-disk node; other paths pass through."""
    if device_path.startswith(_RAW_DISK_PREFIX):
        return "/dev/disk" + device_path[len(_RAW_DISK_PREFIX):]
    return device_path


def drive_id_for_current_session(last_device_id: str, drive_ids: Sequence[str]) -> str:
    """Prefer the last used drive id, then the first known drive, else empty."""
    if last_device_id:
        return last_device_id
    if drive_ids:
        return drive_ids[0]
    return ""


def drutil_drive_index(device_id: str) -> str:
    """Return the drive index part that follows the drutil id scheme."""
    return device_id[len(_DRUTIL_PREFIX):]