"""Tests for the server entry point: argument handling, settings overrides and logging setup."""

import json
import logging
import os
import time

import pytest

from bzcalc_server import BZCalcDispatchMode, BZCalcSettingsError
from bzcalc_server.__main__ import build_settings, cleanup_old_logs, main, parse_args, setup_logging


class TestBuildSettings:
    """Combining a settings file with command line flags."""

    def test_defaults_without_config(self):
        """No flags gives default settings."""
        settings = build_settings(parse_args([]))

        assert settings.port == 49212
        assert settings.dispatch_mode == BZCalcDispatchMode.POOL

    def test_flags_override_file(self, tmp_path):
        """Command line values win over the settings file."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"host": "10.0.0.1", "port": 8000, "dispatchMode": "pool"}), encoding="utf-8")

        settings = build_settings(parse_args([
            "--config", str(path),
            "--port", "8001",
            "--dispatch", "thread",
            "--workers", "3",
            "--resource-path", "pages"
        ]))

        assert settings.host == "10.0.0.1"
        assert settings.port == 8001
        assert settings.dispatch_mode == BZCalcDispatchMode.THREAD_PER_REQUEST
        assert settings.max_workers == 3
        assert settings.resource_path == "pages"

    def test_invalid_override(self):
        """Overrides are validated too."""
        with pytest.raises(BZCalcSettingsError):
            build_settings(parse_args(["--port", "0"]))


class TestMain:
    """Start-up failures are reported before anything is started."""

    def test_bad_config_file(self, tmp_path, capsys):
        """An unreadable config exits with status 2."""
        assert main(["--config", str(tmp_path / "absent.json")]) == 2
        assert capsys.readouterr().err.startswith("Error:")

    def test_bad_port(self, capsys):
        """An invalid port exits with status 2."""
        assert main(["--port", "99999"]) == 2
        assert "Port must be between" in capsys.readouterr().err


class TestLogging:
    """Log file setup and pruning."""

    def test_setup_logging_creates_log_file(self, tmp_path, monkeypatch):
        """A timestamped log file is created in the log directory."""
        captured = {}

        def fake_basic_config(**kwargs):
            captured.update(kwargs)

        monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
        log_dir = tmp_path / "logs"

        setup_logging("debug", str(log_dir))

        try:
            assert captured["level"] == logging.DEBUG
            assert len(list(log_dir.glob("*.log"))) == 1

        finally:
            for handler in captured.get("handlers", []):
                handler.close()

    def test_cleanup_old_logs(self, tmp_path):
        """Only the newest max_logs files are kept."""
        for i in range(5):
            path = tmp_path / f"{i}.log"
            path.write_text("x", encoding="utf-8")
            os.utime(path, (time.time() + i, time.time() + i))

        cleanup_old_logs(str(tmp_path), max_logs=3)

        assert len(list(tmp_path.glob("*.log*"))) == 3
