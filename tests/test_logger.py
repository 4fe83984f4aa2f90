import json
import os
import re

import pytest

from crtscene.entry import Entry
from crtscene.logger import Logger, debug, error, fatal, get_logger, info, warn
from crtscene.severity import Severity


@pytest.fixture
def logger(tmp_path):
    return Logger(directory=str(tmp_path))


def test_log_file_is_created_with_timestamp_name(logger, tmp_path):
    assert os.path.dirname(logger.log_path) == str(tmp_path)
    assert re.fullmatch(r"\d{2}-\d{2}-\d{4}_\d{2}-\d{2}-\d{2}\.log", os.path.basename(logger.log_path))
    assert os.path.isfile(logger.log_path)


def test_log_records_and_saves(logger, capsys):
    entry = logger.log(Severity.WARN, "src/app.cpp", "run", 7, "careful")
    assert logger.entries == [entry]
    with open(logger.log_path, encoding="utf-8") as handle:
        records = json.load(handle)
    assert records == [entry.to_dict()]
    assert capsys.readouterr().out == entry.to_string() + "\n"


def test_add_entry_appends_in_order(logger):
    first = Entry(Severity.INFO, "a.cpp", "f", 1, "one")
    second = Entry(Severity.ERROR, "b.cpp", "g", 2, "two")
    logger.add_entry(first)
    logger.add_entry(second)
    with open(logger.log_path, encoding="utf-8") as handle:
        records = json.load(handle)
    assert [record["message"] for record in records] == ["one", "two"]


def test_missing_directory_keeps_entries_in_memory(tmp_path):
    logger = Logger(directory=str(tmp_path / "absent"))
    logger.log(Severity.INFO, "x.cpp", "main", 3, "hello")
    assert len(logger.entries) == 1
    assert not os.path.exists(logger.log_path)


def test_get_logger_is_shared():
    get_logger().log(Severity.INFO, "shared.cpp", "main", 5, "shared message")
    latest = get_logger().entries[-1]
    assert latest.message == "shared message"
    assert latest.line == 5


def test_info_captures_caller():
    info("Shader '{}' not found", "crt")
    entry = get_logger().entries[-1]
    assert entry.message == "Shader 'crt' not found"
    assert entry.severity is Severity.INFO
    assert entry.function == "test_info_captures_caller"
    assert entry.filename == os.path.basename(__file__)


@pytest.mark.parametrize(
    "function, severity",
    [(debug, Severity.DEBUG), (warn, Severity.WARN), (error, Severity.ERROR), (fatal, Severity.FATAL)],
)
def test_level_functions(function, severity, capsys):
    function("value {} of {}", 1, 2)
    entry = get_logger().entries[-1]
    assert entry.severity is severity
    assert entry.message == "value 1 of 2"
    assert "value 1 of 2" in capsys.readouterr().out


def test_missing_format_argument_raises():
    with pytest.raises(IndexError):
        error("needs {}")