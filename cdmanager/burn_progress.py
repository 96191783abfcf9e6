"""Progress texts of a burn and an estimate of progress while it runs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

FINALIZING_TEXT = "正在进行终结处理"
BURNING_TEXT = "正在刻录，请勿触碰光驱、连接线、电源按钮"

_WRITING_TRACK_RE = re.compile(r"Writing track\s+(\d+)", re.IGNORECASE)

_FINALIZE_RATIO = 0.92
_FINALIZE_PERCENT = 95
_START_PERCENT = 35
_PERCENT_SPAN = 60.0
_MIN_ESTIMATE_SECONDS = 8


def burn_progress_phase_label(phase: str) -> str:
    """Return the label for a backend phase name."""
    if not phase:
        return "Burning..."
    return f"Burning: {phase}"


def track_burn_status_text(track_number: int, track_count: int) -> str:
    """Return the status text while a given track is being written."""
    return f"正在刻录音轨 {track_number}/{track_count}"


def conversion_status_text(current_index: int, total_count: int, source_file: str) -> str:
    """Return the status text while a source file is being converted."""
    file_name = source_file.replace("\\", "/").rsplit("/", 1)[-1]
    return f"正在转换音频文件 {current_index}/{total_count}：{file_name}"


def backend_phase_label(phase: str, track_count: int) -> str:
    """Translate a burner's phase text into the status shown to the user.

    A "Writing track" phase without a track number gives an empty label.
    """
    lowered = phase.lower()
    if "writing track" in lowered:
        match = _WRITING_TRACK_RE.search(phase)
        if match is None:
            return ""
        return track_burn_status_text(int(match.group(1)), max(track_count, 1))
    if "closing" in lowered:
        return FINALIZING_TEXT
    return BURNING_TEXT


@dataclass
class BurnProgressEstimator:
    """Estimates burn progress from elapsed time, track lengths and speed."""

    durations_seconds: Sequence[int] = field(default_factory=list)
    speed_x: int = 16

    def estimate(self, elapsed_ms: int) -> tuple[int, str] | None:
        """Return (percent, status text) after elapsed_ms, or None if nothing can be estimated."""
        if not self.durations_seconds or elapsed_ms < 0:
            return None

        total_audio = sum(max(duration, 1) for duration in self.durations_seconds)
        speed = max(self.speed_x, 1)
        estimated_seconds = max(_MIN_ESTIMATE_SECONDS, total_audio // speed + _MIN_ESTIMATE_SECONDS)
        ratio = min(max(elapsed_ms / (estimated_seconds * 1000.0), 0.0), 1.0)

        if ratio >= _FINALIZE_RATIO:
            return _FINALIZE_PERCENT, FINALIZING_TEXT

        track_count = len(self.durations_seconds)
        track_index = min(track_count - 1, int((ratio / _FINALIZE_RATIO) * track_count))
        percent = _START_PERCENT + int(ratio * _PERCENT_SPAN)
        return percent, track_burn_status_text(track_index + 1, track_count)