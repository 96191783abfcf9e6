# cdmanager

Building blocks for an audio CD manager with a focus on Japanese CD-TEXT:
an editable burn list, capacity forecasts for 74/80-minute discs,
automatic CD-TEXT language detection, burn-backend selection, checks that
run before a burn starts, progress estimates and labels, a burn diagnostics
report, and parsing of drive status output.

Interface captions, headers and most messages come in Chinese and English,
chosen with `cdmanager.labels.UiLanguage`. Some texts exist in one language
only: the burn progress and conversion texts and the disc analysis message
are Chinese; the playback position line, the burn request report and the
errors raised by `check_burn_project` are English.

The package has no runtime dependencies and needs Python 3.10 or newer.

## Installation

```
pip install .
```

## Modules

- `cdmanager.project`: the `Track` and `CdProject` dataclasses, the
  `CdTextLanguage` enum (`JAPANESE`, `LATIN`), `contains_japanese_text`
  (kana, CJK ideographs, fullwidth forms, ideographic space) and
  `detect_burn_language`, which picks Japanese if any album or track
  title/artist contains such text and Latin otherwise.
- `cdmanager.burn_list`: `BurnList` holds the album details, the entries
  (`BurnEntry`) and the burn options (gap, speed, CD-TEXT language mode
  `"auto"`/`"jp"`/`"latin"`, simulation, overburn). It can load a
  `CdProject`, add files that a caller-supplied predicate accepts (titled
  after the file name, duration read from a PCM WAV header, otherwise
  shown as automatic), remove entries by position, clear, sort by file
  name, renumber, and turn the checked entries back into a `CdProject` or
  a `BurnRequest`. Removing nothing, or requesting a burn with no entries or
  none checked, raises `BurnListError`.
- `cdmanager.burn_capacity`: `capacity_summary` describes the total length
  of the selected tracks plus gaps and whether it fits a 74/80-minute disc,
  needs an 80-minute disc or exceeds it. `gap_options`, `speed_options` and
  `language_mode_options` list the choices as (label, value) pairs.
- `cdmanager.burn_checks`: `total_burn_seconds`, `source_files` and
  `check_burn_project`. The check returns the source files, or raises
  `BurnAbortedError` when there are none or the project is longer than
  80 minutes without overburn allowed.
- `cdmanager.burn_progress`: `BurnProgressEstimator.estimate` turns elapsed
  milliseconds into a (percent, status text) pair; `burn_progress_phase_label`,
  `track_burn_status_text`, `conversion_status_text` and
  `backend_phase_label` build the texts shown for each phase.
- `cdmanager.burn_report`: `BurnRequestInfo` and `burn_request_summary`
  produce the multi-line diagnostics report of a burn request.
  `write_cd_text_artifacts` writes the raw (`cdtext-packs.bin`), `.cdt`,
  Sony lead-in (`cdtext-leadin-sony.bin`, with a trailing zero byte) and
  hex text dumps of 18-byte CD-TEXT packs and returns where they went; a
  pack of any other size raises `ValueError`.
- `cdmanager.backend`: `select_burn_backend` chooses among cdrecord,
  DiscRecording, cdrdao and drutil from a configured name (case-insensitive)
  or from platform and tool availability. `toc_writer_target` and
  `backend_display_name` describe the chosen backend.
- `cdmanager.media_status`: `status_output_looks_writable_blank_media`,
  `media_status_signature`, `whole_disk_path_for_device`,
  `drive_id_for_current_session` and `drutil_drive_index`.
- `cdmanager.audio_probe`: `wav_duration_seconds`, `mmss_text` and
  `duration_label`.
- `cdmanager.labels`, `cdmanager.window_text` and `cdmanager.track_table`:
  the `text` language switch, album and CD-TEXT preview captions, import
  status and source mode labels, tab titles, playback and warning texts,
  and the track table headers and highlighting of suspicious tracks.

## Example

```python
from cdmanager.burn_list import BurnList
from cdmanager.project import CdProject, Track

project = CdProject(
    album_title="アルバム",
    album_artist="Artist",
    tracks=[Track(number=1, title="曲", file_path="/music/01.wav", duration_seconds=245)],
)

burn_list = BurnList()
burn_list.load_project(project, "/dev/rdisk4")
print(burn_list.capacity_summary())
request = burn_list.burn_request()
print(request.project.cd_text_language)
```

## What it does not do

This package holds the logic and texts around burning; it does not itself
read, play, analyse or write discs. There is no window or command-line
program, no talking to an optical drive, no audio conversion, and no
building of CD-TEXT packs or TOC/cue files: packs passed to
`write_cd_text_artifacts` and drive status text passed to
`cdmanager.media_status` must come from elsewhere.

## Tests

```
pip install .[test]
pytest
```