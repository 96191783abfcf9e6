"""Diagnostic summary of a burn request and the CD-TEXT artifact files."""

from __future__ import annotations

import contextlib
import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from cdmanager.backend import BurnBackend, TocWriterTarget, toc_writer_target
from cdmanager.project import CdProject

PACK_TOTAL_SIZE = 18


@dataclass
class BurnRequestInfo:
    """What went into a burn request, for the diagnostics report."""

    project: CdProject = field(default_factory=CdProject)
    backend: BurnBackend = BurnBackend.DRUTIL
    requested_device_path: str = ""
    resolved_device_path: str = ""
    drive_id: str = ""
    toc_language: str = "EN"
    simulation: bool = False
    speed_x: int = 0
    source_files: Sequence[str] = field(default_factory=list)
    prepared_files: Sequence[str] = field(default_factory=list)
    toc_text: str = ""
    prepared_field_count: int = 0
    writable_field_count: int = 0
    skipped_field_count: int = 0
    album_writable_count: int = 0
    track_group_count: int = 0
    writable_byte_count: int = 0
    pack_summary: str = ""


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _or(value: str, fallback: str) -> str:
    return value if value else fallback


def burn_request_summary(info: BurnRequestInfo) -> str:
    """Return the multi-line report describing a burn request."""
    project = info.project
    lines = [
        "Last burn request:",
        f"Backend: {info.backend.value}",
        f"Simulation: {_yes_no(info.simulation)}",
        f"Speed: {f'{info.speed_x}x' if info.speed_x > 0 else 'max'}",
        f"Gap: {project.track_gap_seconds} second(s)",
        f"Allow overburn: {_yes_no(project.allow_overburn)}",
        f"Requested device path: {_or(info.requested_device_path, '(empty)')}",
        f"Resolved device path: {_or(info.resolved_device_path, '(empty)')}",
        f"Drive id: {_or(info.drive_id, '(unknown)')}",
        f"Album title: {_or(project.album_title, '(empty)')}",
        f"Album artist: {_or(project.album_artist, '(empty)')}",
        f"Track count: {len(project.tracks)}",
        f"CD-TEXT language: {info.toc_language}",
    ]
    if info.backend is BurnBackend.CDRECORD:
        lines.append("Layout target: cdrecord cue")
    else:
        target = toc_writer_target(info.backend)
        lines.append(f"TOC target: {'cdrdao' if target is TocWriterTarget.CDRDAO else 'drutil'}")
    lines.append(f"Prepared fields: {info.prepared_field_count}")
    lines.append(
        f"Write plan: writable={info.writable_field_count}, skipped={info.skipped_field_count}"
    )
    lines.append(
        f"Write payload: album writable={info.album_writable_count}, "
        f"track groups={info.track_group_count}, writable bytes={info.writable_byte_count}"
    )
    lines.append(info.pack_summary)
    if info.source_files:
        lines.append("Source audio files:")
        lines.extend(f"- {path}" for path in info.source_files)
    if info.prepared_files:
        lines.append("Prepared audio files:")
        lines.extend(f"- {path}" for path in info.prepared_files)
    details = "\n".join(lines) + "\n"
    if info.toc_text:
        details += f"\nGenerated TOC:\n{info.toc_text.strip()}"
    return details.strip()


def _write_quietly(path: str, data: bytes) -> None:
    with contextlib.suppress(OSError), open(path, "wb") as handle:
        handle.write(data)


def write_cd_text_artifacts(dir_path: str | os.PathLike[str], packs: Sequence[bytes], summary: str) -> str:
    """Write the raw, .cdt, lead-in and text dumps of the packs; return where they went.

    Each pack must be exactly 18 bytes. Files that cannot be written are skipped.
    """
    for index, pack in enumerate(packs):
        if len(pack) != PACK_TOTAL_SIZE:
            raise ValueError(f"pack {index} is {len(pack)} bytes, expected {PACK_TOTAL_SIZE}")

    raw_blob = b"".join(bytes(pack) for pack in packs)
    lead_in_blob = raw_blob + b"\0"
    hex_lines = [summary, ""]
    hex_lines.extend(
        f"Pack {index}: {bytes(pack).hex(' ').upper()}" for index, pack in enumerate(packs)
    )

    base = os.fspath(dir_path)
    raw_path = f"{base}/cdtext-packs.bin"
    cdt_path = f"{base}/cdtext-packs.cdt"
    sony_path = f"{base}/cdtext-leadin-sony.bin"
    text_path = f"{base}/cdtext-packs.txt"

    _write_quietly(raw_path, raw_blob)
    _write_quietly(cdt_path, raw_blob)
    _write_quietly(sony_path, lead_in_blob)
    _write_quietly(text_path, "\n".join(hex_lines).encode("utf-8"))

    return (
        f"CD-TEXT artifacts:\n- raw: {raw_path}\n- cdt: {cdt_path}"
        f"\n- sony-bin: {sony_path}\n- text: {text_path}"
    )