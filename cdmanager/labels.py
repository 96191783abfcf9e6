"""Interface language selection and labels for album details and CD-TEXT preview."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_EMPTY_PLACEHOLDER = "—"


class UiLanguage(Enum):
    """Language used for interface text."""

    CHINESE = "zh"
    ENGLISH = "en"


def text(language: UiLanguage, chinese: str, english: str) -> str:
    """Return the variant of a text that matches the interface language."""
    return chinese if language is UiLanguage.CHINESE else english


def album_display_value(value: str) -> str:
    """Return the value to show for an album field, or a dash when it is empty."""
    return value if value else _EMPTY_PLACEHOLDER


def album_details_captions(language: UiLanguage) -> tuple[str, str, str]:
    """Return the heading, album title caption and album artist caption."""
    return (
        text(language, "专辑信息", "Album Details"),
        text(language, "专辑名", "Album Title"),
        text(language, "专辑艺术家", "Album Artist"),
    )


def cd_text_preview_headers(language: UiLanguage) -> tuple[str, ...]:
    """Return the column headers of the CD-TEXT preview table."""
    return (
        text(language, "字段", "Field"),
        text(language, "语言", "Language"),
        text(language, "字节", "Bytes"),
        text(language, "来源", "Source"),
        text(language, "状态", "State"),
        text(language, "十六进制预览", "Hex Preview"),
    )


@dataclass(frozen=True)
class CdTextPreviewRow:
    """One row of the CD-TEXT preview table."""

    field_label: str = ""
    language_label: str = ""
    byte_count_label: str = ""
    source_label: str = ""
    state_label: str = ""
    hex_preview: str = ""

    def cells(self) -> tuple[str, ...]:
        """Return the cell texts in table column order."""
        return (
            self.field_label,
            self.language_label,
            self.byte_count_label,
            self.source_label,
            self.state_label,
            self.hex_preview,
        )