import os

import pytest

from crtscene.files import (
    basename_from_path,
    create_file,
    files_in_directory,
    filename_from_path,
    is_directory,
    is_file,
    load_json,
    parent_directory,
    path_exists,
    paths_in_directory,
    read_file,
    save_json,
)


def test_read_file_preserves_content(tmp_path):
    target = tmp_path / "shader.vert"
    target.write_bytes(b"line one\r\nline two")
    assert read_file(target) == "line one\r\nline two"


def test_read_missing_file_is_empty(tmp_path):
    assert read_file(tmp_path / "missing.frag") == ""


def test_path_components():
    path = "resources/shaders/crt.vert"
    assert filename_from_path(path) == "crt.vert"
    assert basename_from_path(path) == "crt"
    assert parent_directory(path) == "resources/shaders"


def test_basename_strips_only_last_extension():
    assert basename_from_path("logs/archive.tar.gz") == "archive.tar"


def test_hidden_file_keeps_its_name():
    assert basename_from_path(".hidden") == ".hidden"


def test_trailing_separator_has_empty_filename():
    assert filename_from_path("resources/shaders/") == ""
    assert parent_directory("resources/shaders/") == "resources/shaders"


def test_create_file_makes_empty_file(tmp_path):
    target = tmp_path / "new.log"
    create_file(target)
    assert is_file(target)
    assert target.read_text() == ""


def test_create_file_keeps_existing_content(tmp_path):
    target = tmp_path / "kept.log"
    target.write_text("keep me")
    create_file(target)
    assert target.read_text() == "keep me"


def test_create_file_in_missing_directory_does_nothing(tmp_path):
    target = tmp_path / "missing" / "new.log"
    create_file(target)
    assert not path_exists(target)


def test_json_round_trip(tmp_path):
    target = tmp_path / "data.json"
    data = [{"message": "héllo", "line": 3}, {"level": 1}]
    save_json(data, target)
    assert load_json(target) == data


def test_save_json_sorts_keys_and_indents(tmp_path):
    target = tmp_path / "data.json"
    save_json({"zeta": 1, "alpha": 2}, target)
    text = target.read_text(encoding="utf-8")
    assert text.index('"alpha"') < text.index('"zeta"')
    assert '\n  "alpha": 2' in text


def test_load_missing_json_is_none(tmp_path):
    assert load_json(tmp_path / "absent.json") is None


def test_save_json_to_missing_directory_is_skipped(tmp_path):
    target = tmp_path / "missing" / "data.json"
    save_json([1, 2], target)
    assert not path_exists(target)


def test_files_in_directory_walks_tree(tmp_path):
    root = str(tmp_path)
    os.makedirs(os.path.join(root, "sub", "deeper"))
    os.makedirs(os.path.join(root, "empty"))
    expected = [
        os.path.join(root, "a.vert"),
        os.path.join(root, "sub", "b.frag"),
        os.path.join(root, "sub", "deeper", "c.vert"),
    ]
    for path in expected:
        with open(path, "w") as handle:
            handle.write("x")
    assert sorted(files_in_directory(root)) == sorted(expected)


def test_files_in_missing_directory_is_empty(tmp_path):
    assert files_in_directory(str(tmp_path / "nowhere")) == []


def test_paths_in_directory_lists_children(tmp_path):
    root = str(tmp_path)
    os.makedirs(os.path.join(root, "child"))
    with open(os.path.join(root, "file.txt"), "w") as handle:
        handle.write("x")
    assert sorted(paths_in_directory(root)) == sorted(
        [os.path.join(root, "child"), os.path.join(root, "file.txt")]
    )


def test_paths_in_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        paths_in_directory(str(tmp_path / "nowhere"))


def test_is_file_and_is_directory(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")
    assert is_file(target) and not is_directory(target)
    assert is_directory(tmp_path) and not is_file(tmp_path)
    assert path_exists(target)