"""
Tests for the harvestdoc command line.
"""
from unittest.mock import Mock

import pytest
import requests

from harvestdoc import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep CLI runs from installing handlers on captured streams."""
    monkeypatch.setattr(cli, "setup_logger", Mock())


class TestExport:
    """Tests for the export command."""

    def test_file_to_stdout(self, catalog_file, patient_csv, capsys):
        """Test a catalog file is written to stdout as CSV."""
        assert cli.main([str(catalog_file)]) == 0

        captured = capsys.readouterr()
        assert captured.out == patient_csv
        assert captured.err == ""

    def test_format_csv_accepted(self, catalog_file, patient_csv, capsys):
        assert cli.main(["--format=csv", str(catalog_file)]) == 0
        assert capsys.readouterr().out == patient_csv

    def test_other_format_rejected(self, catalog_file, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--format=json", str(catalog_file)])

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_missing_target_prints_usage(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])

        assert exc_info.value.code == 2
        assert "usage: harvestdoc" in capsys.readouterr().err

    def test_missing_file_fails(self, tmp_path, capsys):
        """Test a missing file exits non-zero with the error on stderr."""
        assert cli.main([str(tmp_path / "missing.json")]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "missing.json" in captured.err

    def test_malformed_file_fails(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("not json", encoding="utf-8")

        assert cli.main([str(path)]) == 1
        assert "json" in capsys.readouterr().err

    def test_remote_not_found(self, monkeypatch, http_response, capsys):
        """Test a 404 from the API exits 1 with the status on stderr."""
        get = Mock(return_value=http_response(404, "", reason="Not Found"))
        monkeypatch.setattr(requests.Session, "get", get)

        assert cli.main(["http://harvest.example.org/api/"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "404 Not Found" in captured.err

    def test_malformed_url_fails(self, capsys):
        """Test an unparseable URL exits 1 with a transport error."""
        assert cli.main(["http://[::1"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "transport" in captured.err

    def test_remote_with_token(self, monkeypatch, http_response, patient_csv, capsys):
        """Test --token is sent to the API and the CSV reaches stdout."""
        seen = {}

        def fake_get(self, url, headers=None, timeout=None):
            seen.update(url=url, headers=headers, timeout=timeout)
            return http_response(200, PATIENT_BODY)

        monkeypatch.setattr(requests.Session, "get", fake_get)

        assert cli.main(["--token=abc", "https://harvest.example.org/api"]) == 0

        assert capsys.readouterr().out == patient_csv
        assert seen["url"] == "https://harvest.example.org/api/concepts/"
        assert seen["headers"]["Api-Token"] == "abc"
        assert seen["timeout"] == 5.0


class TestHttpCommand:
    """Tests for the http subcommand."""

    def test_defaults(self, monkeypatch):
        serve = Mock()
        monkeypatch.setattr(cli, "serve", serve)

        assert cli.main(["http"]) == 0
        serve.assert_called_once_with("127.0.0.1", 8000)

    def test_host_and_port(self, monkeypatch):
        serve = Mock()
        monkeypatch.setattr(cli, "serve", serve)

        assert cli.main(["http", "--host=0.0.0.0", "--port=9000"]) == 0
        serve.assert_called_once_with("0.0.0.0", 9000)


PATIENT_BODY = (
    '[{"id": 1, "name": "Patient", "category": {"id": 1, "name": "Demographics"},'
    ' "fields": [{"pk": 1, "name": "Age", "description": " years old "},'
    ' {"pk": 2, "name": "Sex", "description": "M/F"}]}]'
)
