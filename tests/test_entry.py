from datetime import datetime

from crtscene.colour import ansi_background_from_hex
from crtscene.entry import Entry
from crtscene.severity import Severity


def make_entry(severity=Severity.ERROR):
    return Entry(severity, "src/engine/engine.cpp", "render", 42, "Shader not found")


def test_fields_from_constructor():
    entry = make_entry()
    assert entry.filename == "engine.cpp"
    assert entry.severity is Severity.ERROR
    assert entry.line == 42


def test_integer_severity_is_converted():
    entry = make_entry(severity=2)
    assert entry.severity is Severity.WARN


def test_to_dict_contents():
    entry = make_entry()
    record = entry.to_dict()
    assert set(record) == {"severity", "level", "date", "time", "file", "function", "line", "message"}
    assert record["severity"] == "ERROR"
    assert record["level"] == int(Severity.ERROR)
    assert record["file"] == "src/engine/engine.cpp"
    assert record["function"] == "render"
    assert record["line"] == 42
    assert record["message"] == "Shader not found"
    assert record["date"] == entry.date and record["time"] == entry.time


def test_time_shape():
    value = make_entry().time
    assert len(value) == 8
    assert datetime.strptime(value, "%H:%M:%S").strftime("%H:%M:%S") == value


def test_to_string_layout():
    entry = make_entry()
    header, body = entry.to_string().split("\n")
    assert header.startswith("\x1b[1m" + ansi_background_from_hex("#eba0ac"))
    assert "[ERROR]\x1b[0m" in header
    assert f"[{entry.date} ~ {entry.time}]" in header
    assert header.endswith("[engine.cpp | render:42]")
    assert body == "  Shader not found"