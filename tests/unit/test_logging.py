import json
import logging

import pytest
import structlog

from binstring import BinString, InvalidTextError
from binstring.logging import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)


def _records(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_records_are_json_lines(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info")
    structlog.get_logger("binstring.test").info("payload_seen", size=3)
    records = _records(capsys.readouterr().out)
    assert records[-1]["msg"] == "payload_seen"
    assert records[-1]["level"] == "info"
    assert records[-1]["component"] == "binstring.test"
    assert records[-1]["size"] == 3
    assert "ts" in records[-1]


def test_level_filters_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning")
    structlog.get_logger("binstring.test").debug("hidden")
    assert capsys.readouterr().out == ""


def test_decode_failure_is_logged_at_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("debug")
    with pytest.raises(InvalidTextError):
        BinString(b"\xff").decode()
    records = _records(capsys.readouterr().out)
    failures = [record for record in records if record["msg"] == "text.decode_failed"]
    assert failures
    assert failures[0]["offset"] == 0
    assert failures[0]["component"] == "binstring.utils.text"
