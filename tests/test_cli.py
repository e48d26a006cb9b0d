"""Tests for the command-line interface.

WHY: The CLI is how users run conversions. It must save files with the
right names, never overwrite earlier output, and fail with exit code 1
and a readable message on bad input.

HOW: main() is called with an explicit argv. Files live in pytest's
tmp_path; stdout/stderr are captured with capsys. The fetch command runs
against an httpx.MockTransport by patching the client factory.
"""

from __future__ import annotations

import httpx
import pytest

from ttml_lyrics import cli
from ttml_lyrics.api.client import LyricsClient
from ttml_lyrics.formatters.lrc import to_lyric_text


@pytest.fixture
def ttml_file(tmp_path, sample_ttml):
    path = tmp_path / "song.ttml"
    path.write_text(sample_ttml, encoding="utf-8")
    return path


class TestParser:
    def test_convert_arguments(self):
        args = cli.build_parser().parse_args(["convert", "song.ttml", "--formats", "lrc,plain_text"])
        assert args.command == "convert"
        assert args.input_file == "song.ttml"
        assert args.formats == "lrc,plain_text"
        assert args.stdout is False

    def test_fetch_arguments(self):
        args = cli.build_parser().parse_args(
            ["fetch", "--title", "Song", "--artist", "Artist", "--duration", "200"]
        )
        assert args.duration == 200

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestConvert:
    def test_saves_default_format(self, ttml_file, sample_lines):
        cli.main(["convert", str(ttml_file)])
        output = ttml_file.parent / "song-lyrics.lrc"
        assert output.read_text(encoding="utf-8") == to_lyric_text(sample_lines)

    def test_saves_all_selected_formats(self, ttml_file):
        cli.main(["convert", str(ttml_file), "--formats", "lrc,plain_text"])
        assert (ttml_file.parent / "song-lyrics.lrc").is_file()
        assert (ttml_file.parent / "song-lyrics.txt").is_file()

    def test_existing_output_not_overwritten(self, ttml_file):
        existing = ttml_file.parent / "song-lyrics.lrc"
        existing.write_text("keep me", encoding="utf-8")
        cli.main(["convert", str(ttml_file)])
        assert existing.read_text(encoding="utf-8") == "keep me"
        assert (ttml_file.parent / "song-lyrics-2.lrc").is_file()

    def test_output_dir(self, ttml_file, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        cli.main(["convert", str(ttml_file), "--output-dir", str(out_dir)])
        assert (out_dir / "song-lyrics.lrc").is_file()

    def test_stdout(self, ttml_file, sample_lines, capsys):
        cli.main(["convert", str(ttml_file), "--stdout"])
        captured = capsys.readouterr()
        assert captured.out == to_lyric_text(sample_lines)
        assert not (ttml_file.parent / "song-lyrics.lrc").exists()

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["convert", str(tmp_path / "nope.ttml")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_format(self, ttml_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["convert", str(ttml_file), "--formats", "srt"])
        assert exc_info.value.code == 1
        assert "Unknown format 'srt'" in capsys.readouterr().err

    def test_document_without_lines(self, tmp_path, capsys):
        path = tmp_path / "broken.ttml"
        path.write_text("<tt><body>", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["convert", str(path)])
        assert exc_info.value.code == 1
        assert "No lyric lines found" in capsys.readouterr().err


class TestFetch:
    @pytest.fixture
    def mock_client(self, monkeypatch, sample_ttml):
        def install(payload):
            transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
            monkeypatch.setattr(
                cli, "LyricsClient",
                lambda: LyricsClient(base_url="https://lyrics.test", transport=transport),
            )
        return install

    def test_prints_lrc(self, mock_client, sample_ttml, sample_lines, capsys):
        mock_client({"ttml": sample_ttml})
        cli.main(["fetch", "--title", "Song", "--artist", "Artist"])
        assert capsys.readouterr().out == to_lyric_text(sample_lines)

    def test_saves_to_file(self, mock_client, sample_ttml, tmp_path):
        mock_client({"ttml": sample_ttml})
        output = tmp_path / "song.lrc"
        cli.main(["fetch", "--title", "Song", "--artist", "Artist", "--output", str(output)])
        assert output.read_text(encoding="utf-8").startswith("[00:01.00]Hello darkness")

    def test_unavailable_exits_with_error(self, mock_client, capsys):
        mock_client({"ttml": None})
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["fetch", "--title", "Song", "--artist", "Artist"])
        assert exc_info.value.code == 1
        assert "Lyrics unavailable" in capsys.readouterr().err
