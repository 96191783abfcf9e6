"""Burn option choices and the capacity forecast of a burn list."""

from __future__ import annotations

import re
from collections.abc import Iterable

from cdmanager.audio_probe import mmss_text
from cdmanager.labels import UiLanguage, text

CD_74_MINUTES_SECONDS = 74 * 60
CD_80_MINUTES_SECONDS = 80 * 60

_PLACEHOLDER_RE = re.compile(r"%([1-9])")


def _fill(template: str, *values: str) -> str:
    """Replace %1, %2, ... with the given values in one pass."""

    def substitute(match: re.Match[str]) -> str:
        index = int(match.group(1)) - 1
        return values[index] if index < len(values) else match.group(0)

    return _PLACEHOLDER_RE.sub(substitute, template)


def gap_options(language: UiLanguage) -> list[tuple[str, int]]:
    """Return the gap choices as (label, seconds), the default first."""
    return [
        (text(language, "2 秒（标准）", "2 sec (standard)"), 2),
        (text(language, "0 秒（无间隔）", "0 sec (gapless)"), 0),
    ]


def speed_options(language: UiLanguage) -> list[tuple[str, int]]:
    """Return the speed choices as (label, speed factor); 0 means maximum speed."""
    return [
        (text(language, "8x（音频 CD 推荐）", "8x (recommended)"), 8),
        ("4x", 4),
        ("16x", 16),
        ("24x", 24),
        (text(language, "最高速度", "Maximum"), 0),
    ]


def language_mode_options(language: UiLanguage) -> list[tuple[str, str]]:
    """Return the CD-TEXT language choices as (label, mode)."""
    return [
        (text(language, "自动", "Auto"), "auto"),
        (text(language, "日文（MS-JIS）", "Japanese (MS-JIS)"), "jp"),
        (text(language, "拉丁（ISO-8859-1）", "Latin (ISO-8859-1)"), "latin"),
    ]


def capacity_summary(
    durations: Iterable[int], gap_seconds: int, overburn: bool, language: UiLanguage
) -> str:
    """Describe the projected length of the selected tracks and which disc it fits."""
    selected = list(durations)
    if not selected:
        return text(language, "容量预测：暂无选中的音轨", "Capacity: no selected tracks")

    total_seconds = sum(selected)
    gap_total = max(0, len(selected) - 1) * gap_seconds
    final_seconds = total_seconds + gap_total
    overburn_hint = (
        text(language, " | 已允许超刻", " | overburn enabled") if overburn else ""
    )

    if final_seconds <= CD_74_MINUTES_SECONDS:
        template = text(
            language,
            "容量预测：%1（音轨 %2 + 间隔 %3），适合 74/80 分钟盘%4",
            "Capacity: %1 (tracks %2 + gaps %3), fits 74/80 min discs%4",
        )
    elif final_seconds <= CD_80_MINUTES_SECONDS:
        template = text(
            language,
            "容量预测：%1（音轨 %2 + 间隔 %3），需要 80 分钟盘%4",
            "Capacity: %1 (tracks %2 + gaps %3), needs an 80 min disc%4",
        )
    else:
        template = text(
            language,
            "容量预测：%1（音轨 %2 + 间隔 %3），超出标准 80 分钟容量%4",
            "Capacity: %1 (tracks %2 + gaps %3), exceeds standard 80 min capacity%4",
        )
    return _fill(
        template,
        mmss_text(final_seconds),
        mmss_text(total_seconds),
        mmss_text(gap_total),
        overburn_hint,
    )