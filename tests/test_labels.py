import pytest

from cdmanager.labels import (
    CdTextPreviewRow,
    UiLanguage,
    album_details_captions,
    album_display_value,
    cd_text_preview_headers,
    text,
)


def test_text_picks_chinese():
    assert text(UiLanguage.CHINESE, "专辑名", "Album Title") == "专辑名"


def test_text_picks_english():
    assert text(UiLanguage.ENGLISH, "专辑名", "Album Title") == "Album Title"


def test_album_display_value_empty_is_dash():
    assert album_display_value("") == "—"


@pytest.mark.parametrize("value", ["Collection 06", "夜の歌", " "])
def test_album_display_value_passthrough(value):
    assert album_display_value(value) == value


def test_album_details_captions_english():
    assert album_details_captions(UiLanguage.ENGLISH) == (
        "Album Details",
        "Album Title",
        "Album Artist",
    )


def test_album_details_captions_chinese():
    assert album_details_captions(UiLanguage.CHINESE) == ("专辑信息", "专辑名", "专辑艺术家")


def test_cd_text_preview_headers_english():
    assert cd_text_preview_headers(UiLanguage.ENGLISH) == (
        "Field",
        "Language",
        "Bytes",
        "Source",
        "State",
        "Hex Preview",
    )


def test_cd_text_preview_headers_match_row_width():
    row = CdTextPreviewRow()
    for language in UiLanguage:
        assert len(cd_text_preview_headers(language)) == len(row.cells())


def test_preview_headers_chinese_first_and_last():
    headers = cd_text_preview_headers(UiLanguage.CHINESE)
    assert headers[0] == "字段"
    assert headers[-1] == "十六进制预览"


def test_preview_row_cells_order():
    row = CdTextPreviewRow(
        field_label="Album Title",
        language_label="JP",
        byte_count_label="12",
        source_label="import",
        state_label="ok",
        hex_preview="82 A0",
    )
    assert row.cells() == ("Album Title", "JP", "12", "import", "ok", "82 A0")