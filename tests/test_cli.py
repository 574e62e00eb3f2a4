"""Tests for the command-line interface.

WHY: The CLI is how most editors use the tool. Wrong output names,
silent overwrites, or a zero exit code on an empty file would all go
unnoticed until the import in the host fails.

HOW: main() is called with explicit argv against files in tmp_path.
Exit codes are checked via SystemExit; status output via capsys.

RULES:
- Every test writes into its own tmp_path
- Status messages go to stderr, never stdout
"""

import io
import json
import sys

import pytest

from srt_layers.cli import _resolve_output_path, build_parser, main


@pytest.fixture
def srt_file(tmp_path, sample_srt):
    path = tmp_path / "episode1.srt"
    path.write_text(sample_srt, encoding="utf-8")
    return path


class TestParser:
    """build_parser() exposes the expected options."""

    def test_defaults(self):
        args = build_parser().parse_args(["in.srt"])
        assert args.input_file == "in.srt"
        assert args.words is None
        assert args.formats is None
        assert args.verbose is False

    def test_short_words_flag(self):
        args = build_parser().parse_args(["in.srt", "-w", "2"])
        assert args.words == "2"


class TestMain:
    """main() runs the full pipeline and saves output files."""

    def test_writes_all_formats(self, srt_file, capsys):
        main([str(srt_file), "--words", "2"])

        layers = srt_file.parent / "episode1-layers.json"
        chunks = srt_file.parent / "episode1-chunks.srt"
        assert layers.is_file()
        assert chunks.is_file()

        data = json.loads(layers.read_text(encoding="utf-8"))
        assert len(data["layers"]) == 6
        assert data["group_size"] == 2

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "3 cues, 6 chunks" in captured.err

    def test_single_format_and_output_dir(self, srt_file, tmp_path):
        out_dir = tmp_path / "out"
        out_dir.mkdir()

        main([str(srt_file), "--formats", "srt_chunks", "--output-dir", str(out_dir)])

        assert [p.name for p in out_dir.iterdir()] == ["episode1-chunks.srt"]

    def test_font_and_composition_options(self, srt_file):
        main([
            str(srt_file), "--formats", "layer_plan", "--font", "Inter",
            "--comp-width", "1080", "--comp-height", "1920",
        ])
        data = json.loads((srt_file.parent / "episode1-layers.json").read_text(encoding="utf-8"))
        assert data["layers"][0]["font_name"] == "Inter"
        assert data["layers"][0]["font_size"] == 128

    def test_invalid_words_falls_back_to_one(self, srt_file):
        main([str(srt_file), "--formats", "layer_plan", "--words", "zero"])
        data = json.loads((srt_file.parent / "episode1-layers.json").read_text(encoding="utf-8"))
        assert data["group_size"] == 1
        assert len(data["layers"]) == 10

    def test_conflicting_output_gets_numbered(self, srt_file):
        main([str(srt_file), "--formats", "srt_chunks"])
        main([str(srt_file), "--formats", "srt_chunks"])
        assert (srt_file.parent / "episode1-chunks-2.srt").is_file()

    def test_stdin_input(self, tmp_path, monkeypatch, quick_fox_srt):
        fake_stdin = io.TextIOWrapper(io.BytesIO(quick_fox_srt.encode("utf-8")))
        monkeypatch.setattr(sys, "stdin", fake_stdin)

        main(["-", "--words", "2", "--formats", "srt_chunks", "--output-dir", str(tmp_path)])

        content = (tmp_path / "stdin-chunks.srt").read_text(encoding="utf-8")
        assert "00:00:03,000 --> 00:00:04,000\njumps" in content

    def test_encoding_option(self, tmp_path):
        path = tmp_path / "latin.srt"
        path.write_bytes("1\n00:00:01,000 --> 00:00:02,000\ncafé crème\n".encode("cp1252"))

        main([str(path), "--encoding", "cp1252", "--formats", "srt_chunks", "--words", "5"])

        content = (tmp_path / "latin-chunks.srt").read_text(encoding="utf-8")
        assert "café crème" in content


class TestErrors:
    """Error cases exit with status 1 and a message on stderr."""

    def test_no_cues(self, tmp_path, capsys):
        path = tmp_path / "empty.srt"
        path.write_text("not a subtitle file\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])

        assert exc_info.value.code == 1
        assert "No subtitle cues found" in capsys.readouterr().err
        assert not (tmp_path / "empty-layers.json").exists()

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.srt")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_format(self, srt_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(srt_file), "--formats", "premiere"])
        assert exc_info.value.code == 1
        assert "Unknown format 'premiere'" in capsys.readouterr().err

    @pytest.mark.parametrize("flag", ["--comp-width", "--comp-height"])
    def test_zero_composition_size(self, srt_file, capsys, flag):
        with pytest.raises(SystemExit) as exc_info:
            main([str(srt_file), flag, "0"])
        assert exc_info.value.code == 1
        assert "Composition size must be at least 1x1" in capsys.readouterr().err
        assert not (srt_file.parent / "episode1-layers.json").exists()

    def test_wrong_encoding(self, tmp_path, capsys):
        path = tmp_path / "bad.srt"
        path.write_bytes(b"1\n00:00:01,000 --> 00:00:02,000\ncaf\xe9\n")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])
        assert exc_info.value.code == 1
        assert "Unable to read input" in capsys.readouterr().err


class TestResolveOutputPath:
    """_resolve_output_path() never returns an existing file."""

    def test_free_name(self, tmp_path):
        assert _resolve_output_path("ep", "-layers.json", tmp_path) == tmp_path / "ep-layers.json"

    def test_counter_increments(self, tmp_path):
        (tmp_path / "ep-layers.json").write_text("x")
        (tmp_path / "ep-layers-2.json").write_text("x")
        assert _resolve_output_path("ep", "-layers.json", tmp_path) == tmp_path / "ep-layers-3.json"
