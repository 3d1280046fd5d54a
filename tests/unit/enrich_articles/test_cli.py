"""Tests for the enrich_articles CLI."""

from __future__ import annotations

import gzip
import io
import json
from unittest.mock import patch

import pytest

from enrich_articles.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("ENRICH_ARTICLES_CONFIG", raising=False)


class TestMain:
    def test_prints_enriched_sample(self, capsys) -> None:
        main([])
        output = json.loads(capsys.readouterr().out)
        assert output == [
            {
                "id": 123,
                "title": "News article",
                "body": "The body",
                "mainImage": {"id": "image234", "filename": "234.png"},
                "tags": [
                    {"id": "tag345", "name": "news"},
                    {"id": "tag789", "name": "sport"},
                ],
            },
            {"id": 999, "title": "Another news article", "body": "The other body"},
        ]

    def test_reads_input_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "articles.json"
        path.write_text('[{"id": 1, "mainImage": "img", "tags": ["tag789"]}]')

        main(["--input", str(path)])

        assert capsys.readouterr().out.strip() == (
            '[{"id":1,"mainImage":{"id":"image234","filename":"234.png"},'
            '"tags":[{"id":"tag789","name":"sport"}]}]'
        )

    def test_reads_gzip_input(self, tmp_path, capsys) -> None:
        path = tmp_path / "articles.json.gz"
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write('[{"id": 2, "tags": []}]')

        main(["--input", str(path)])

        assert capsys.readouterr().out.strip() == '[{"id":2}]'

    def test_reads_stdin(self, capsys) -> None:
        with patch("sys.stdin", io.StringIO('[{"id": 3}]')):
            main(["--input", "-"])
        assert capsys.readouterr().out.strip() == '[{"id":3}]'

    def test_indent_flag(self, capsys) -> None:
        main(["--indent", "2"])
        out = capsys.readouterr().out
        assert out.startswith('[\n  {\n    "id": 123,')

    def test_config_indent(self, capsys) -> None:
        main(["--config", "debug"])
        assert capsys.readouterr().out.startswith("[\n  {")

    def test_invalid_json_exits(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[{")

        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(path)])

        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_non_array_document_exits(self, tmp_path) -> None:
        path = tmp_path / "object.json"
        path.write_text('{"id": 1}')

        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(path)])

        assert exc_info.value.code == 1

    def test_missing_input_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1

    def test_missing_config_exits(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", "does-not-exist"])
        assert exc_info.value.code == 1

    def test_non_utf8_input_exits(self, tmp_path, capsys) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"title": "\xff"}]')

        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(path)])

        assert exc_info.value.code == 1
        assert capsys.readouterr().out == ""

    def test_invalid_log_level_in_config_exits(self, tmp_path) -> None:
        path = tmp_path / "loud.yaml"
        path.write_text("log_level: LOUD\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path)])

        assert exc_info.value.code == 1

    def test_negative_indent_in_config_exits(self, tmp_path) -> None:
        path = tmp_path / "indent.yaml"
        path.write_text("output:\n  indent: -2\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path)])

        assert exc_info.value.code == 1

    def test_malformed_yaml_config_exits(self, tmp_path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("output: [indent\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path)])

        assert exc_info.value.code == 1

    def test_negative_indent_flag_exits(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--indent", "-1"])

        assert exc_info.value.code == 2
        assert capsys.readouterr().out == ""

    @patch("enrich_articles.cli.enrich_document")
    def test_passes_lookup_tables(self, mock_enrich, capsys) -> None:
        mock_enrich.return_value = "[]"

        main([])

        from enrich_articles.lookups import MAIN_IMAGE, SAMPLE_DOCUMENT, TAGS_BY_ID

        mock_enrich.assert_called_once_with(
            SAMPLE_DOCUMENT, MAIN_IMAGE, TAGS_BY_ID, indent=None, sort_keys=False
        )
        assert capsys.readouterr().out == "[]\n"
