import io
from pathlib import Path

import pytest

from starlight.document import GLV_LOG, Document
from starlight.paths import ConfigPaths
from starlight.prompts import parse_file_input, read_line, run_input_func
from starlight.writer import conandwrite


@pytest.fixture
def paths(tmp_path):
    result = ConfigPaths(root=tmp_path, out=io.StringIO())
    conandwrite(Document.from_template("glv"), result.glv_path())
    return result


def test_read_line_logs_input(paths):
    line = read_line(paths, io.StringIO("status\n"))
    assert line == "status"
    assert paths.load_globals().get_str_array(GLV_LOG)[-1].endswith("executed 'status'")


def test_read_line_at_end_of_input(paths):
    with pytest.raises(EOFError):
        read_line(paths, io.StringIO(""))


def test_parse_file_input_relative(tmp_path):
    assert parse_file_input("file(notes.txt)", tmp_path) == tmp_path / "notes.txt"


def test_parse_file_input_absolute_drive():
    assert parse_file_input("file(C:/data/x.json)") == Path("C:/data/x.json")


def test_parse_file_input_without_name():
    with pytest.raises(ValueError):
        parse_file_input("file()")


def test_parse_file_input_too_short():
    with pytest.raises(ValueError):
        parse_file_input("fil")


def test_string_input(paths, tmp_path):
    result = run_input_func("string(hello)", paths, io.StringIO(), tmp_path, io.StringIO())
    assert result.text == "hello"
    assert result.number is None


def test_integer_input(paths, tmp_path):
    result = run_input_func("integer(42)", paths, io.StringIO(), tmp_path, io.StringIO())
    assert result.number == 42


def test_integer_input_rejects_text(paths, tmp_path):
    with pytest.raises(ValueError):
        run_input_func("integer(abc)", paths, io.StringIO(), tmp_path, io.StringIO())


def test_file_input_reads_stream(paths, tmp_path):
    result = run_input_func("file", paths, io.StringIO("file(a.txt)\n"), tmp_path, io.StringIO())
    assert result.path == tmp_path / "a.txt"


def test_config_input_missing(paths, tmp_path):
    out = io.StringIO()
    result = run_input_func("config(nothing.cfg)", paths, io.StringIO(), tmp_path, out)
    assert result.path is None
    assert "Error/FileNotFound The system could not find this file" in out.getvalue()


def test_config_input_existing(paths, tmp_path):
    config_dir = tmp_path / "Console_Config" / "system" / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "custom.cfg").write_text("x", encoding="utf-8")
    result = run_input_func("config(custom.cfg)", paths, io.StringIO(), tmp_path, io.StringIO())
    assert result.path == config_dir / "custom.cfg"
    assert result.config == "custom"


def test_plain_input_reads_and_logs(paths, tmp_path):
    result = run_input_func("anything", paths, io.StringIO("reply\n"), tmp_path, io.StringIO())
    assert result.text == "reply"
    assert paths.load_globals().get_str_array(GLV_LOG)[-1].endswith("executed 'reply'")