from __future__ import annotations

import logging
from typing import Iterator

import pytest

import mstimecode.config as config_module
from mstimecode.cli import main

_CONFIG_ENV_KEYS = [
    "TIMECODE_SEPARATOR",
    "TIMECODE_WITH_MILLI",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_FILE",
    "LOG_TO_FILE",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(config_module, "load_dotenv", lambda override=False: None)
    for key in _CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    # main() cấu hình lại root logger, cần trả về trạng thái cũ sau mỗi test
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_main_prints_normalized_timecodes(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["01:02:03,004", "crouching.tiger.00:00:01.hidden.timecode"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out == "01:02:03.004\n00:00:01.000\n"


def test_main_comma_without_milli(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--comma", "--no-milli", "01:02:03.004"])

    assert exit_code == 0
    assert capsys.readouterr().out == "01:02:03\n"


def test_main_uses_configured_separator(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("TIMECODE_SEPARATOR", ",")

    assert main(["01:02:03.004"]) == 0
    assert capsys.readouterr().out == "01:02:03,004\n"

    # Tham số dòng lệnh được ưu tiên hơn cấu hình
    assert main(["--dot", "01:02:03,004"]) == 0
    assert capsys.readouterr().out == "01:02:03.004\n"


def test_main_shift(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--shift=-00:00:01.500", "00:00:01", "00:00:02,000"])

    assert exit_code == 0
    assert capsys.readouterr().out == "-00:00:00.500\n00:00:00.500\n"


def test_main_negative_input_after_double_dash(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--", "-01:02:03.456"]) == 0
    assert capsys.readouterr().out == "-01:02:03.456\n"


def test_main_reports_malformed_input(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["nope", "00:00:01"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == "00:00:01.000\n"
    assert "not a timecode: 'nope'" in captured.err


def test_main_rejects_invalid_shift(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--shift=later", "00:00:01"])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert captured.out == ""
    assert "invalid --shift" in captured.err


def test_main_requires_text() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
