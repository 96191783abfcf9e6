"""Choice of the disc burning backend and of the TOC dialect it needs."""

from __future__ import annotations

from enum import Enum


class BurnBackend(Enum):
    """Program or framework that writes the disc."""

    CDRECORD = "cdrecord"
    DISC_RECORDING = "DiscRecording"
    CDRDAO = "cdrdao"
    DRUTIL = "drutil"


class TocWriterTarget(Enum):
    """Dialect of the TOC file that is written for the burn."""

    CDRDAO = "cdrdao"
    DRUTIL = "drutil"


def _normalized(configured: str | None) -> str:
    return (configured or "").strip().lower()


def _use_cdrecord(choice: str, is_macos: bool, cdrdao: bool, cdrecord: bool) -> bool:
    if choice == "cdrecord":
        return True
    if choice in ("drutil", "cdrdao", "discrecording"):
        return False
    return is_macos and not cdrdao and cdrecord


def _use_disc_recording(choice: str, is_macos: bool, cdrdao: bool, cdrecord: bool) -> bool:
    if choice in ("cdrdao", "drutil", "cdrecord"):
        return False
    if choice == "discrecording":
        return True
    return is_macos and not cdrdao and not cdrecord


def _use_cdrdao(choice: str, cdrdao: bool) -> bool:
    if choice == "cdrdao":
        return True
    if choice in ("drutil", "cdrecord", "discrecording"):
        return False
    return cdrdao


def select_burn_backend(
    configured: str | None,
    is_macos: bool,
    cdrdao_available: bool,
    cdrecord_available: bool,
) -> BurnBackend:
    """Pick the burn backend from a configured name (case-insensitive) or availability.

    A configured name that is not recognised counts as no configuration.
    """
    choice = _normalized(configured)
    if _use_cdrecord(choice, is_macos, cdrdao_available, cdrecord_available):
        return BurnBackend.CDRECORD
    if _use_disc_recording(choice, is_macos, cdrdao_available, cdrecord_available):
        return BurnBackend.DISC_RECORDING
    if _use_cdrdao(choice, cdrdao_available):
        return BurnBackend.CDRDAO
    return BurnBackend.DRUTIL


def toc_writer_target(backend: BurnBackend) -> TocWriterTarget:
    """Return the TOC dialect used with a backend."""
    return TocWriterTarget.CDRDAO if backend is BurnBackend.CDRDAO else TocWriterTarget.DRUTIL


def backend_display_name(backend: BurnBackend) -> str:
    """Return the name under which the backend is reported."""
    return backend.value