import json

import pytest

from aboutmig import storage
from aboutmig.colorcodes import FG_YELLOW, RESET


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def ready(home):
    storage.create_storage_dir()
    storage.create_datafile()
    return home


def test_storage_dir_under_home(home):
    assert storage.storage_dir() == home / ".local" / "share" / "aboutmig"


def test_storage_dir_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(storage.StorageError, match="HOME"):
        storage.storage_dir()


def test_create_storage_dir(home):
    assert storage.storage_dir_exists() is False
    storage.create_storage_dir()
    assert storage.storage_dir_exists() is True
    storage.create_storage_dir()
    assert storage.storage_dir().is_dir()


def test_datafile_path(home):
    assert storage.datafile_path() == storage.storage_dir() / "data.json"


def test_create_datafile_writes_empty_array(home):
    storage.create_storage_dir()
    assert storage.datafile_exists() is False
    storage.create_datafile()
    assert storage.datafile_exists() is True
    assert storage.datafile_path().read_text(encoding="utf-8") == "[]\n"


def test_create_datafile_without_directory(home):
    with pytest.raises(storage.StorageError, match="Failed to create datafile"):
        storage.create_datafile()


def test_save_entry_round_trip(ready):
    storage.save_entry("NAME", "Alice")
    data = json.loads(storage.datafile_path().read_text(encoding="utf-8"))
    assert data == [{"[NAME]": "Alice"}]


def test_save_entry_keeps_order(ready):
    storage.save_entry("A", "first")
    storage.save_entry("B", "second")
    data = json.loads(storage.datafile_path().read_text(encoding="utf-8"))
    assert data == [{"[A]": "first"}, {"[B]": "second"}]


def test_save_entry_format_is_indented(ready):
    storage.save_entry("A", "x")
    text = storage.datafile_path().read_text(encoding="utf-8")
    assert text.startswith("[\n  {\n")
    assert text.endswith("]\n")


def test_save_entry_replaces_corrupt_file(ready):
    storage.datafile_path().write_text("not json", encoding="utf-8")
    storage.save_entry("A", "x")
    data = json.loads(storage.datafile_path().read_text(encoding="utf-8"))
    assert data == [{"[A]": "x"}]


def test_save_entry_on_empty_file(ready):
    storage.datafile_path().write_text("", encoding="utf-8")
    storage.save_entry("A", "x")
    data = json.loads(storage.datafile_path().read_text(encoding="utf-8"))
    assert data == [{"[A]": "x"}]


def test_save_entry_unicode(ready):
    storage.save_entry("CITY", "Zürich")
    text = storage.datafile_path().read_text(encoding="utf-8")
    assert "Zürich" in text
    assert json.loads(text) == [{"[CITY]": "Zürich"}]


def test_read_datafile_empty(ready):
    assert storage.read_datafile() == ""


def test_read_datafile_lines(ready):
    storage.save_entry("NAME", "Alice")
    storage.save_entry("AGE", "30")
    expected = f"{FG_YELLOW}[NAME]{RESET}:Alice\n{FG_YELLOW}[AGE]{RESET}:30\n"
    assert storage.read_datafile() == expected


def test_read_datafile_skips_non_objects(ready):
    storage.datafile_path().write_text('[1, "x", {"[A]": "b"}]', encoding="utf-8")
    assert storage.read_datafile() == f"{FG_YELLOW}[A]{RESET}:b\n"


def test_read_datafile_non_string_value(ready):
    storage.datafile_path().write_text('[{"[A]": 5}]', encoding="utf-8")
    with pytest.raises(storage.StorageError):
        storage.read_datafile()


def test_read_datafile_missing(home):
    with pytest.raises(storage.StorageError):
        storage.read_datafile()


def test_read_datafile_invalid_json(ready):
    storage.datafile_path().write_text("{oops", encoding="utf-8")
    with pytest.raises(storage.StorageError):
        storage.read_datafile()


def test_delete_datafile(ready):
    storage.delete_datafile()
    assert storage.datafile_exists() is False
    storage.delete_datafile()
    assert storage.storage_dir_exists() is True