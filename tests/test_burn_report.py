import pytest

from cdmanager.backend import BurnBackend
from cdmanager.burn_report import BurnRequestInfo, burn_request_summary, write_cd_text_artifacts
from cdmanager.project import CdProject, Track


def _info(**overrides):
    project = CdProject(
        album_title="Album",
        album_artist="",
        tracks=[Track(number=1, title="One"), Track(number=2, title="Two")],
        track_gap_seconds=2,
    )
    values = dict(
        project=project,
        backend=BurnBackend.CDRDAO,
        requested_device_path="",
        resolved_device_path="/dev/rdisk3",
        drive_id="",
        toc_language="JP",
        simulation=True,
        speed_x=0,
        source_files=["/in/a.flac"],
        prepared_files=["/tmp/a.wav"],
        toc_text="  CD_DA\n",
        pack_summary="Packs: summary",
    )
    values.update(overrides)
    return BurnRequestInfo(**values)


def test_summary_lines():
    summary = burn_request_summary(_info())
    lines = summary.splitlines()
    assert lines[0] == "Last burn request:"
    assert "Backend: cdrdao" in lines
    assert "Simulation: yes" in lines
    assert "Speed: max" in lines
    assert "Allow overburn: no" in lines
    assert "Requested device path: (empty)" in lines
    assert "Resolved device path: /dev/rdisk3" in lines
    assert "Drive id: (unknown)" in lines
    assert "Album title: Album" in lines
    assert "Album artist: (empty)" in lines
    assert "CD-TEXT language: JP" in lines
    assert "TOC target: cdrdao" in lines
    assert "Packs: summary" in lines
    assert "- /in/a.flac" in lines
    assert "- /tmp/a.wav" in lines
    assert summary.endswith("Generated TOC:\nCD_DA")


def test_summary_cdrecord_and_speed():
    summary = burn_request_summary(
        _info(backend=BurnBackend.CDRECORD, speed_x=8, toc_text="", source_files=[], prepared_files=[])
    )
    assert "Layout target: cdrecord cue" in summary.splitlines()
    assert "Speed: 8x" in summary.splitlines()
    assert "Generated TOC" not in summary
    assert "Source audio files:" not in summary
    assert summary == summary.strip()


def test_summary_drutil_target():
    summary = burn_request_summary(_info(backend=BurnBackend.DISC_RECORDING))
    assert "TOC target: drutil" in summary.splitlines()
    assert "Backend: DiscRecording" in summary.splitlines()


def test_write_artifacts(tmp_path):
    packs = [bytes(range(18)), bytes(range(18, 36))]
    result = write_cd_text_artifacts(tmp_path, packs, "Summary line")
    raw = b"".join(packs)
    assert (tmp_path / "cdtext-packs.bin").read_bytes() == raw
    assert (tmp_path / "cdtext-packs.cdt").read_bytes() == raw
    assert (tmp_path / "cdtext-leadin-sony.bin").read_bytes() == raw + b"\0"
    text_lines = (tmp_path / "cdtext-packs.txt").read_text(encoding="utf-8").split("\n")
    assert text_lines[0] == "Summary line"
    assert text_lines[1] == ""
    assert text_lines[2].startswith("Pack 0: ")
    assert text_lines[3].startswith("Pack 1: ")
    assert result.startswith("CD-TEXT artifacts:\n- raw: ")
    assert f"{tmp_path}/cdtext-leadin-sony.bin" in result


def test_write_artifacts_rejects_bad_pack(tmp_path):
    with pytest.raises(ValueError):
        write_cd_text_artifacts(tmp_path, [b"\x80" * 17], "s")
    assert not (tmp_path / "cdtext-packs.bin").exists()