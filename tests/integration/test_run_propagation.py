"""
Integration tests — batch runner over a directory of payloads.
"""
import json

import pytest
from jsonschema import validate

import run_propagation
from src.config import settings
from src.config.schemas import PROPAGATION_OUTPUT_SCHEMA
from src.models.propagator_config import PropagatorConfig


@pytest.fixture
def input_dir(tmp_path, paris_payload):
    """One good payload, one without the source type, one unparseable."""
    directory = tmp_path / "in"
    directory.mkdir()

    (directory / "good.json").write_text(json.dumps(paris_payload), encoding="utf-8")
    (directory / "nosource.json").write_text(
        json.dumps({
            "document_id": "nosource-001",
            "text": "Rome is old.",
            "types": [{"name": "Sentence"}],
            "annotations": [{"type": "Sentence", "begin": 0, "end": 12}],
        }),
        encoding="utf-8",
    )
    (directory / "broken.json").write_text("{not valid json", encoding="utf-8")
    return directory


@pytest.fixture
def mention_config():
    return PropagatorConfig("Mention", "Sentence", True, True)


class TestRunBatch:
    """Tests for run_propagation.run_batch."""

    def test_succeeded_documents_are_written(self, input_dir, tmp_path, mention_config):
        output_dir = tmp_path / "out"

        run_propagation.run_batch(input_dir, output_dir, mention_config)

        written = sorted(p.name for p in output_dir.glob("*.json"))
        assert written == ["good.json", run_propagation.SUMMARY_FILE_NAME]

        payload = json.loads((output_dir / "good.json").read_text(encoding="utf-8"))
        assert {"type": "Mention", "begin": 21, "end": 26} in payload["annotations"]

    def test_summary_reports_every_input(self, input_dir, tmp_path, mention_config):
        output_dir = tmp_path / "out"

        summary = run_propagation.run_batch(input_dir, output_dir, mention_config)

        by_id = {entry["document_id"]: entry for entry in summary}
        assert set(by_id) == {"payload-001", "nosource-001", "broken"}

        assert by_id["payload-001"]["error"] is None
        assert by_id["payload-001"]["processing_metadata"]["annotations_created"] == 1
        assert by_id["nosource-001"]["error"].startswith("UnknownTypeError")
        assert by_id["broken"]["error"].startswith("ValidationError")

        on_disk = json.loads((output_dir / run_propagation.SUMMARY_FILE_NAME).read_text(encoding="utf-8"))
        assert on_disk == summary
        for entry in on_disk:
            validate(instance=entry, schema=PROPAGATION_OUTPUT_SCHEMA)

    def test_empty_input_directory(self, tmp_path, mention_config):
        empty = tmp_path / "empty"
        empty.mkdir()

        summary = run_propagation.run_batch(empty, tmp_path / "out", mention_config)

        assert summary == []
        assert (tmp_path / "out" / run_propagation.SUMMARY_FILE_NAME).exists()


class TestMain:
    """Tests for run_propagation.main() driven by settings."""

    def test_main_uses_settings(self, input_dir, tmp_path, monkeypatch, capsys):
        output_dir = tmp_path / "settings-out"
        monkeypatch.setattr(settings, "INPUT_DIR", str(input_dir))
        monkeypatch.setattr(settings, "OUTPUT_DIR", str(output_dir))
        monkeypatch.setattr(settings, "SPAN_SOURCE_TYPE", "Mention")
        monkeypatch.setattr(settings, "SPAN_TARGET_TYPE", "Sentence")
        monkeypatch.setattr(settings, "SPAN_RESPECT_WORD_BOUNDARIES", True)
        monkeypatch.setattr(settings, "SPAN_CASE_SENSITIVE", True)

        run_propagation.main()

        assert (output_dir / "good.json").exists()
        assert not (output_dir / "nosource.json").exists()
        printed = capsys.readouterr().out
        assert "payload-001" in printed
        assert "FAILED" in printed
