"""Tests for the command-line front end."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml

from chromarole.app import configure_logging, run_cli
from chromarole.config.settings import EngineSettings


@pytest.fixture(autouse=True)
def _reset_logger():
    logger = logging.getLogger("chromarole")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    logger.handlers.clear()
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config(tmp_path: Path) -> Path:
    path = tmp_path / "settings.yaml"
    data = {"log_file": str(tmp_path / "logs" / "chromarole.log"), "log_level": "DEBUG"}
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_theme_command(config: Path, capsys):
    assert run_cli(["--config", str(config), "theme", "light", "#2563eb"]) == 0

    data = json.loads(capsys.readouterr().out)
    light = data["variants"]["light"]
    assert light["colors"]["background"] == "#ffffff"
    assert light["colors"]["text"] == "#1e293b"


def test_roles_command(config: Path, capsys):
    code = run_cli(
        ["--config", str(config), "roles", "#2563eb", "#10b981", "--roles", "primary,success"]
    )
    assert code == 0

    data = json.loads(capsys.readouterr().out)
    assert [m["role"] for m in data["semantic_mapping"]] == ["primary", "success"]


def test_optimize_command(config: Path, capsys):
    code = run_cli(
        [
            "--config",
            str(config),
            "optimize",
            "#FF0000",
            "--use-case",
            "text",
            "--preserve",
            "#FF0000",
        ]
    )
    assert code == 0

    data = json.loads(capsys.readouterr().out)
    [result] = data["optimization_results"]
    assert result["adjusted"] is False
    assert result["notes"] == ["Color preserved as brand color"]


def test_settings_supply_defaults(tmp_path: Path, capsys):
    path = tmp_path / "settings.yaml"
    path.write_text(
        yaml.safe_dump({"style": "ios", "log_file": str(tmp_path / "chromarole.log")}),
        encoding="utf-8",
    )
    assert run_cli(["--config", str(path), "theme", "dark", "#2563eb"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["style"] == "ios"
    assert data["variants"]["dark"]["colors"]["background"] == "#000000"


def test_input_error_exit_code(config: Path, capsys):
    assert run_cli(["--config", str(config), "roles", "#2563eb", "notacolor"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    error = json.loads(captured.err)
    assert error["code"] == "INVALID_COLOR"
    assert error["details"]["index"] == 1


def test_malformed_config_exit_code(tmp_path: Path, capsys):
    path = tmp_path / "settings.yaml"
    path.write_text("style: [material\n", encoding="utf-8")

    assert run_cli(["--config", str(path), "theme", "light", "#2563eb"]) == 2
    assert json.loads(capsys.readouterr().err)["code"] == "CONFIG_INVALID"


def test_configure_logging_writes_rotating_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "chromarole.log"
    settings = EngineSettings({"log_file": str(log_file)})

    logger = configure_logging(settings)
    assert configure_logging(settings) is logger
    assert len(logger.handlers) == 1
    assert logger.propagate is False

    logger.info("hello")
    logger.handlers[0].flush()
    assert "INFO hello" in log_file.read_text(encoding="utf-8")


def test_missing_explicit_config_exit_code(tmp_path: Path, capsys):
    path = tmp_path / "nope.yaml"

    assert run_cli(["--config", str(path), "theme", "light", "#2563eb"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    error = json.loads(captured.err)
    assert error["code"] == "CONFIG_MISSING"
    assert error["details"]["path"] == str(path)
    assert error["suggestions"] == ["Create the settings file or omit --config"]


def test_config_command_saves_settings(tmp_path: Path, capsys):
    path = tmp_path / "nested" / "settings.yaml"
    code = run_cli(
        [
            "--config",
            str(path),
            "config",
            "--level",
            "AAA",
            "--style",
            "fluent",
            "--no-ensure-contrast",
            "--save",
        ]
    )
    assert code == 0

    shown = json.loads(capsys.readouterr().out)
    assert shown["accessibility_level"] == "AAA"
    assert shown["style"] == "fluent"
    assert shown["ensure_contrast"] is False

    saved = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert saved == shown


def test_config_command_without_save_leaves_disk_alone(config: Path, capsys):
    before = config.read_text(encoding="utf-8")

    assert run_cli(["--config", str(config), "config", "--context", "print"]) == 0

    assert json.loads(capsys.readouterr().out)["context"] == "print"
    assert config.read_text(encoding="utf-8") == before
