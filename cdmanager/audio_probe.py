"""Duration probing of source audio files and duration labels."""

from __future__ import annotations

import struct
from os import PathLike

from cdmanager.labels import UiLanguage, text

_HEADER_SIZE = 44
_PCM_FORMAT = 1


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def wav_duration_seconds(path: str | PathLike[str]) -> int:
    """Return the whole seconds of a PCM WAV file from its RIFF header.

    Returns 0 when the file cannot be read, is too short, is not PCM,
    or its header gives no usable byte rate.
    """
    try:
        with open(path, "rb") as handle:
            header = handle.read(_HEADER_SIZE)
    except OSError:
        return 0
    if len(header) < _HEADER_SIZE:
        return 0

    (data_size,) = struct.unpack_from("<i", header, 40)
    (audio_format,) = struct.unpack_from("<H", header, 20)
    if audio_format != _PCM_FORMAT:
        return 0

    (channels,) = struct.unpack_from("<H", header, 22)
    (sample_rate,) = struct.unpack_from("<I", header, 24)
    (bits_per_sample,) = struct.unpack_from("<H", header, 34)

    bytes_per_second = sample_rate * channels * (bits_per_sample // 8)
    if bytes_per_second <= 0:
        return 0
    return _truncating_div(data_size, bytes_per_second)


def mmss_text(total_seconds: int) -> str:
    """Format seconds as minutes and two-digit seconds, e.g. 3:07."""
    minutes = abs(total_seconds) // 60
    seconds = abs(total_seconds) % 60
    if total_seconds < 0:
        minutes, seconds = -minutes, -seconds
    return f"{minutes}:{str(seconds).rjust(2, '0')}"


def duration_label(seconds: int, language: UiLanguage) -> str:
    """Return the duration text of a track, or the automatic marker when unknown."""
    if seconds > 0:
        return mmss_text(seconds)
    return text(language, "自动", "Auto")