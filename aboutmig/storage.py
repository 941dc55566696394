"""Location and contents of the data directory and the JSON datafile."""

import contextlib
import json
import os
from pathlib import Path

from .colorcodes import FG_YELLOW, RESET

_DATAFILE_NAME = "data.json"


class StorageError(Exception):
    """Raised when the data directory or the datafile cannot be used."""


def storage_dir() -> Path:
    """Return the directory that holds the application's data."""
    home = os.environ.get("HOME")
    if home is None:
        raise StorageError("HOME environment variable not set.")
    return Path(home) / ".local" / "share" / "aboutmig"


def storage_dir_exists() -> bool:
    """Tell whether the data directory exists."""
    return storage_dir().is_dir()


def create_storage_dir() -> None:
    """Create the data directory and any missing parents."""
    storage_dir().mkdir(parents=True, exist_ok=True)


def datafile_path() -> Path:
    """Return the path of the datafile."""
    return storage_dir() / _DATAFILE_NAME


def datafile_exists() -> bool:
    """Tell whether the datafile exists as a regular file."""
    return datafile_path().is_file()


def create_datafile() -> None:
    """Create the datafile holding an empty JSON array."""
    path = datafile_path()
    try:
        path.write_text("[]\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Failed to create datafile: {path}") from exc


def _load_entries(path: Path) -> list:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return []
    return data if isinstance(data, list) else []


def save_entry(category: str, value: str) -> None:
    """Append a ``[category]: value`` entry to the datafile."""
    path = datafile_path()
    entries = _load_entries(path)
    entries.append({f"[{category}]": value})
    path.write_text(json.dumps(entries, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def read_datafile() -> str:
    """Return every stored entry, one coloured ``key:value`` line each."""
    path = datafile_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise StorageError(f"Cannot read datafile: {path}") from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"Datafile is not valid JSON: {exc}") from exc
    if isinstance(data, dict):
        data = list(data.values())
    elif not isinstance(data, list):
        data = []

    lines = []
    for item in data:
        if not isinstance(item, dict):
            continue
        for key, value in sorted(item.items()):
            if not isinstance(value, str):
                raise StorageError(f"Value of {key} is not a string")
            lines.append(f"{FG_YELLOW}{key}{RESET}:{value}\n")
    return "".join(lines)


def delete_datafile() -> None:
    """Remove the datafile, ignoring any failure."""
    with contextlib.suppress(OSError):
        datafile_path().unlink()