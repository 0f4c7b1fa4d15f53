# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_picker

import importlib
import shutil
from pathlib import Path

import pytest


@pytest.fixture
def clean_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path / "logs"


def test_logger_creates_directory_and_sinks(clean_log_dir: Path) -> None:
    # GIVEN a fresh working directory
    assert not clean_log_dir.exists()

    # WHEN the logger module is reloaded
    logger_module = importlib.reload(importlib.import_module("coreason_picker.utils.logger"))

    # THEN the logs directory exists and two sinks are configured (stderr and file)
    assert clean_log_dir.is_dir()
    assert len(logger_module.logger._core.handlers) == 2

    logger_module.logger.remove()
    shutil.rmtree(clean_log_dir)


def test_logger_sink_configuration(clean_log_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    logger_module = importlib.reload(importlib.import_module("coreason_picker.utils.logger"))

    test_message = "Picker response built."
    logger_module.logger.info(test_message)

    # stderr sink
    captured = capsys.readouterr()
    assert test_message in captured.err

    # Remove the handlers so the enqueued file sink is flushed before reading.
    logger_module.logger.remove()

    log_content = (clean_log_dir / "app.log").read_text()
    assert '"message": "' + test_message + '"' in log_content
