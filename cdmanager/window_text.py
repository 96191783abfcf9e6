"""Status, tab and warning texts shown by the main window."""

from __future__ import annotations

from enum import Enum

from cdmanager.labels import UiLanguage, text


class ImportStatus(Enum):
    """Outcome of reading the disc currently in the drive."""

    SUCCESS = "success"
    FALLBACK_SAMPLE = "fallback-sample"
    NO_MEDIA_LOADED = "no-media"
    BLANK_WRITABLE_MEDIA = "blank-writable"
    DRIVE_VISIBLE_BUT_READ_NOT_IMPLEMENTED = "system-placeholder"
    NO_DRIVE_AVAILABLE = "no-drive"


class GatewayMode(Enum):
    """Where disc information comes from."""

    SYSTEM = "system"
    SAMPLE = "sample"


_IMPORT_STATUS_TEXTS = {
    ImportStatus.SUCCESS: ("成功", "success"),
    ImportStatus.FALLBACK_SAMPLE: ("样本回退", "sample-fallback"),
    ImportStatus.NO_MEDIA_LOADED: ("无介质", "no-media"),
    ImportStatus.BLANK_WRITABLE_MEDIA: ("空白可写", "blank-writable"),
    ImportStatus.DRIVE_VISIBLE_BUT_READ_NOT_IMPLEMENTED: ("系统占位", "system-placeholder"),
    ImportStatus.NO_DRIVE_AVAILABLE: ("无光驱", "no-drive"),
}

_SOURCE_MODE_TEXTS = {
    GatewayMode.SYSTEM: ("系统", "system"),
    GatewayMode.SAMPLE: ("样本", "sample"),
}

_UNKNOWN = ("未知", "unknown")


def import_status_text(status: ImportStatus, language: UiLanguage) -> str:
    """Return the short label for an import status."""
    return text(language, *_IMPORT_STATUS_TEXTS.get(status, _UNKNOWN))


def source_mode_text(mode: GatewayMode, language: UiLanguage) -> str:
    """Return the short label for the disc information source."""
    return text(language, *_SOURCE_MODE_TEXTS.get(mode, _UNKNOWN))


def build_features_text(has_libcdio: bool, has_paranoia: bool, language: UiLanguage) -> str:
    """Describe which optional disc-reading features are available."""
    on = text(language, "开", "on")
    off = text(language, "关", "off")
    template = text(
        language,
        "构建特性：libcdio=%1，libcdio-paranoia=%2，multimedia=on",
        "Build Features: libcdio=%1, libcdio-paranoia=%2, multimedia=on",
    )
    return template.replace("%1", on if has_libcdio else off, 1).replace(
        "%2", on if has_paranoia else off, 1
    )


def tab_titles(language: UiLanguage) -> tuple[str, ...]:
    """Return the titles of the main window tabs in order."""
    return (
        text(language, "播放器", "Player"),
        text(language, "控制台", "Console"),
        text(language, "分析", "Analyze"),
        text(language, "导出", "Export"),
        text(language, "刻录", "Burn"),
    )


def playback_position_text(track_number: int, elapsed_seconds: int, total_seconds: int) -> str:
    """Format the playback status line with elapsed and total time."""
    elapsed_min, elapsed_sec = divmod(elapsed_seconds, 60)
    total_min, total_sec = divmod(total_seconds, 60)
    return (
        f"Track {track_number}  |  {elapsed_min:02d}:{elapsed_sec:02d}"
        f" / {total_min:02d}:{total_sec:02d}"
    )


def risky_track_warning(
    language: UiLanguage, track_number: int, trigger_label: str
) -> tuple[str, str, str, str]:
    """Return the dialog title, dialog body, status label and status bar message
    shown before playing a track in a suspected damaged region."""
    title = text(language, "损坏区段警告", "Damaged Region Warning")
    body = text(
        language,
        "音轨 T%1 已被分析结果标记为疑似损坏区段。\n\n"
        "继续执行“%2”可能导致光驱反复巡道、长时间无响应，甚至需要重新插拔设备。\n\n"
        "是否仍然继续？",
        "Track T%1 has been marked as a suspected damaged region.\n\n"
        "Continuing \"%2\" may cause repeated seek retries or a stalled optical drive.\n\n"
        "Do you still want to continue?",
    )
    body = body.replace("%1", str(track_number)).replace("%2", trigger_label)
    label = text(
        language,
        "强警告：T%1 位于疑似损坏区段。",
        "Critical warning: T%1 is inside a suspected damaged region.",
    ).replace("%1", str(track_number))
    status = text(
        language,
        "强警告：T%1 位于疑似损坏区段，请谨慎操作。",
        "Critical warning: T%1 is inside a suspected damaged region.",
    ).replace("%1", str(track_number))
    return title, body, label, status


def analysis_finished_message(healthy: bool, performed_deep_analysis: bool) -> str:
    """Return the status bar message shown when a disc analysis finishes."""
    if not healthy and performed_deep_analysis:
        return "光碟分析完成：已检出异常盘片，并完成扩展结构分析。"
    if healthy:
        return "光碟分析完成：未检出明确异常结构特征。"
    return "光碟分析完成：已检出异常结构特征。"