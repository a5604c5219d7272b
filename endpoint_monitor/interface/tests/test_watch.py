"""
Tests for the endpoint monitor CLI.
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from endpoint_monitor.interface import watch

DOCUMENT = {
    "endpoints": [
        {"name": "api", "url": "https://api.example.com/health"},
        {"name": "web", "url": "https://www.example.com"},
    ],
    "webhook_url": "https://x/$DISCORD_WEBHOOK_ID/$DISCORD_WEBHOOK_TOKEN",
}


def _fake_get(url, timeout=None):
    response = MagicMock(status_code=200)
    if "www" in url:
        raise requests.exceptions.ConnectionError("Connection refused")
    return response


class TestWatchCli:
    """Tests for watch.main."""

    @pytest.fixture
    def store_file(self, tmp_path):
        """Create a store file holding functions/config."""
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"functions": {"config": DOCUMENT}}), encoding="utf-8")
        return path

    @pytest.fixture(autouse=True)
    def env(self, monkeypatch):
        """Provide webhook credentials."""
        monkeypatch.setenv("DISCORD_WEBHOOK_ID", "ID")
        monkeypatch.setenv("DISCORD_WEBHOOK_TOKEN", "TOK")
        monkeypatch.delenv("ENDPOINT_MONITOR_STORE", raising=False)

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_success(self, mock_get, mock_post, store_file):
        """Test a full run posts the report to the resolved URL."""
        mock_get.side_effect = _fake_get
        mock_post.return_value = MagicMock(status_code=204)

        exit_code = watch.main(["--store", str(store_file)])

        assert exit_code == 0
        mock_post.assert_called_once()
        assert mock_post.call_args[0][0] == "https://x/ID/TOK"
        assert mock_post.call_args[1]["json"] == {
            "content": "✅ api is healthy (200)\n🔥 web did not respond normally (0)"
        }

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_store_from_environment(
        self, mock_get, mock_post, store_file, monkeypatch
    ):
        """Test the store path can come from the environment."""
        monkeypatch.setenv("ENDPOINT_MONITOR_STORE", str(store_file))
        mock_get.side_effect = _fake_get
        mock_post.return_value = MagicMock(status_code=204)

        assert watch.main([]) == 0

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_store_not_utf8(self, mock_get, mock_post, tmp_path):
        """Test an undecodable store fails the run without network calls."""
        store_file = tmp_path / "store.json"
        store_file.write_bytes(b"\xff{}")

        assert watch.main(["--store", str(store_file)]) == 3
        mock_get.assert_not_called()
        mock_post.assert_not_called()

    def test_main_configuration_error_logs_traceback(self, tmp_path, caplog):
        """Test a configuration failure is logged with its traceback."""
        with caplog.at_level(logging.ERROR):
            watch.main(["--store", str(tmp_path / "missing.json")])

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert errors
        assert errors[0].exc_info is not None

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_store_is_directory(self, mock_get, mock_post, tmp_path):
        """Test a directory passed as --store fails the run."""
        assert watch.main(["--store", str(tmp_path)]) == 3
        mock_get.assert_not_called()

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_missing_document(self, mock_get, mock_post, tmp_path):
        """Test a missing configuration fails without network calls."""
        exit_code = watch.main(["--store", str(tmp_path / "missing.json")])

        assert exit_code == 3
        mock_get.assert_not_called()
        mock_post.assert_not_called()

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_missing_credentials(
        self, mock_get, mock_post, store_file, monkeypatch
    ):
        """Test a missing webhook token fails the run."""
        monkeypatch.delenv("DISCORD_WEBHOOK_TOKEN")

        assert watch.main(["--store", str(store_file)]) == 3
        mock_post.assert_not_called()

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_delivery_failure(self, mock_get, mock_post, store_file):
        """Test a failed webhook call fails the run."""
        mock_get.side_effect = _fake_get
        mock_post.side_effect = requests.exceptions.ConnectionError("down")

        assert watch.main(["--store", str(store_file)]) == 3

    @patch("endpoint_monitor.adapters.notifiers.webhook.requests.post")
    @patch("endpoint_monitor.adapters.probers.http.requests.get")
    def test_main_dry_run(self, mock_get, mock_post, store_file, monkeypatch, capsys):
        """Test dry-run prints the report and needs no credentials."""
        monkeypatch.delenv("DISCORD_WEBHOOK_ID")
        monkeypatch.delenv("DISCORD_WEBHOOK_TOKEN")
        mock_get.side_effect = _fake_get

        exit_code = watch.main(["--store", str(store_file), "--dry-run"])

        assert exit_code == 0
        mock_post.assert_not_called()
        assert "✅ api is healthy (200)" in capsys.readouterr().out

    def test_main_invalid_max_workers(self, store_file):
        """Test a non-positive worker count is rejected."""
        assert watch.main(["--store", str(store_file), "--max-workers", "0"]) == 3


class TestLoadCredentials:
    """Tests for load_credentials."""

    def test_load_credentials_from_mapping(self):
        """Test credentials are read from the given mapping."""
        credentials = watch.load_credentials(
            {"DISCORD_WEBHOOK_ID": "ID", "DISCORD_WEBHOOK_TOKEN": "TOK"}
        )

        assert credentials.webhook_id == "ID"
        assert credentials.webhook_token == "TOK"

    def test_load_credentials_unset(self):
        """Test unset variables become None."""
        credentials = watch.load_credentials({})

        assert credentials.webhook_id is None
        assert credentials.webhook_token is None
