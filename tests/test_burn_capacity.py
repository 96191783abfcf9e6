import pytest

from cdmanager.audio_probe import mmss_text
from cdmanager.burn_capacity import (
    capacity_summary,
    gap_options,
    language_mode_options,
    speed_options,
)
from cdmanager.labels import UiLanguage


def test_gap_option_values_default_first():
    assert [value for _, value in gap_options(UiLanguage.ENGLISH)] == [2, 0]
    assert gap_options(UiLanguage.ENGLISH)[0][0] == "2 sec (standard)"
    assert gap_options(UiLanguage.CHINESE)[1][0] == "0 秒（无间隔）"


def test_speed_option_values():
    options = speed_options(UiLanguage.ENGLISH)
    assert [value for _, value in options] == [8, 4, 16, 24, 0]
    assert options[0][0] == "8x (recommended)"
    assert options[-1][0] == "Maximum"
    assert speed_options(UiLanguage.CHINESE)[-1][0] == "最高速度"


def test_language_mode_options():
    options = language_mode_options(UiLanguage.ENGLISH)
    assert [mode for _, mode in options] == ["auto", "jp", "latin"]
    assert options[1][0] == "Japanese (MS-JIS)"
    assert language_mode_options(UiLanguage.CHINESE)[0][0] == "自动"


@pytest.mark.parametrize(
    "language, expected",
    [
        (UiLanguage.ENGLISH, "Capacity: no selected tracks"),
        (UiLanguage.CHINESE, "容量预测：暂无选中的音轨"),
    ],
)
def test_no_selected_tracks(language, expected):
    assert capacity_summary([], 2, False, language) == expected


def test_single_track_has_no_gap():
    summary = capacity_summary([100], 2, False, UiLanguage.ENGLISH)
    assert summary == (
        f"Capacity: {mmss_text(100)} (tracks {mmss_text(100)} + gaps {mmss_text(0)}),"
        " fits 74/80 min discs"
    )


def test_gaps_counted_between_tracks():
    summary = capacity_summary([60, 60, 60], 2, False, UiLanguage.ENGLISH)
    assert f"gaps {mmss_text(4)}" in summary
    assert f"tracks {mmss_text(180)}" in summary
    assert summary.startswith(f"Capacity: {mmss_text(184)} ")


def test_boundaries():
    english = UiLanguage.ENGLISH
    assert capacity_summary([74 * 60], 0, False, english).endswith("fits 74/80 min discs")
    assert capacity_summary([74 * 60 + 1], 0, False, english).endswith("needs an 80 min disc")
    assert capacity_summary([80 * 60], 0, False, english).endswith("needs an 80 min disc")
    assert capacity_summary([80 * 60 + 1], 0, False, english).endswith(
        "exceeds standard 80 min capacity"
    )


def test_gap_pushes_over_boundary():
    english = UiLanguage.ENGLISH
    assert "fits 74/80" in capacity_summary([37 * 60, 37 * 60], 0, False, english)
    assert "needs an 80 min disc" in capacity_summary([37 * 60, 37 * 60], 2, False, english)


def test_overburn_hint_appended():
    english = capacity_summary([100], 2, True, UiLanguage.ENGLISH)
    assert english.endswith("fits 74/80 min discs | overburn enabled")
    chinese = capacity_summary([100], 2, True, UiLanguage.CHINESE)
    assert chinese.endswith("适合 74/80 分钟盘 | 已允许超刻")


def test_chinese_summary():
    summary = capacity_summary([81 * 60], 0, False, UiLanguage.CHINESE)
    assert summary.startswith("容量预测：")
    assert summary.endswith("超出标准 80 分钟容量")
    assert f"（音轨 {mmss_text(81 * 60)} + 间隔 {mmss_text(0)}）" in summary


def test_accepts_generator():
    durations = (d for d in [30, 30])
    assert capacity_summary(durations, 0, False, UiLanguage.ENGLISH) == capacity_summary(
        [30, 30], 0, False, UiLanguage.ENGLISH
    )