"""Unit tests for the quote verification CLI."""

import json

import pytest

from quotecheck.cli import load_sources, main


@pytest.fixture
def files(tmp_path, sample_transcript, sample_draft):
    """Draft, transcript and one supplementary source on disk."""
    draft = tmp_path / "draft.md"
    draft.write_text(sample_draft, encoding="utf-8")
    transcript = tmp_path / "transcript.txt"
    transcript.write_text(sample_transcript, encoding="utf-8")
    source = tmp_path / "report.txt"
    source.write_text("Quarterly numbers were strong.", encoding="utf-8")
    return draft, transcript, source


class TestLoadSources:
    def test_file_name_is_id_and_name(self, files):
        _, _, source = files
        sources = load_sources([source])

        assert sources[0].id == "report.txt"
        assert sources[0].display_name == "report.txt"
        assert sources[0].content == "Quarterly numbers were strong."

    def test_duplicate_names_rejected(self, files):
        _, _, source = files
        with pytest.raises(ValueError):
            load_sources([source, source])


class TestMain:
    def test_prints_results(self, files, capsys):
        draft, transcript, source = files
        exit_code = main(["--draft", str(draft), "--transcript", str(transcript),
                          "--source", str(source)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "found in: Interview Transcript" in out
        assert "Quotes: 2  Verified: 1  Unverified: 1" in out

    def test_duplicate_source_names_exit_with_usage_error(self, files, capsys):
        draft, transcript, source = files

        with pytest.raises(SystemExit) as exc_info:
            main(["--draft", str(draft), "--transcript", str(transcript),
                  "--source", str(source), "--source", str(source)])

        assert exc_info.value.code == 2
        assert "Source IDs must be unique" in capsys.readouterr().err

    def test_source_named_transcript_rejected(self, files, tmp_path, capsys):
        draft, transcript, _ = files
        reserved = tmp_path / "transcript"
        reserved.write_text("Some notes.", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["--draft", str(draft), "--transcript", str(transcript),
                  "--source", str(reserved)])

        assert exc_info.value.code == 2
        assert "reserved" in capsys.readouterr().err

    def test_ci_mode_fails_on_unverified(self, files):
        draft, transcript, _ = files

        assert main(["--draft", str(draft), "--transcript", str(transcript), "--ci"]) == 1

    def test_writes_json(self, files, tmp_path):
        draft, transcript, _ = files
        out_file = tmp_path / "results.json"

        main(["--draft", str(draft), "--transcript", str(transcript), "--out", str(out_file)])

        payload = json.loads(out_file.read_text(encoding="utf-8"))
        assert payload["summary"]["total"] == 2
        assert payload["results"][0]["source_id"] == "transcript"
        assert payload["results"][1]["matched"] is False
