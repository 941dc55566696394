# aboutmig

Store small pieces of information about yourself from the command line.

Each entry has a category and a value. Entries are kept as a JSON array of
one-key objects, such as `[{"[EMAIL]": "me@example.com"}]`, in
`$HOME/.local/share/aboutmig/data.json`. The directory and the file are
created by `--add` and `--list` when they are missing.

The package has no dependencies outside the Python standard library.

## Installation

```
pip install .
```

## Usage

```
aboutmig --add        # prompt for a category and a value, then store them
aboutmig --list       # print every stored entry
aboutmig --reset      # delete the datafile (asks for confirmation)
aboutmig --license    # print a notice for the third-party components in use
aboutmig --version    # print the version
aboutmig --help       # print the help text
```

Short forms are `-a`, `-l`, `-r`, `-L`, `-v` and `-h`. The same command is
also available as `python -m aboutmig.cli`.

- `--add` asks for a category and a value. The category is stored in upper
  case and wrapped in square brackets, so `email` becomes `[EMAIL]`.
- `--list` prints one line per entry, `[CATEGORY]:value`, with the category
  shown in yellow.
- `--reset` asks for confirmation; only `y` or `Y` deletes the datafile,
  anything else prints `Aborted.`.

Options may be combined. They are handled in this order: help, add, list,
reset, version, license. `--help`, `--version` and `--license` end the run
once they have printed their output, and so does a declined `--reset`.

An empty input, or one made only of whitespace, is rejected with exit code 5.

### Exit codes

| Code | Meaning                                  |
|------|------------------------------------------|
| 0    | success                                  |
| 1    | unexpected error (storage or file error) |
| 3    | no arguments given                       |
| 4    | unknown option                           |
| 5    | empty or whitespace-only input           |

`aboutmig.cli.ExitCode` holds these values.

## Library use

The storage functions can be used directly:

```python
from aboutmig import storage

storage.create_storage_dir()
storage.create_datafile()
storage.save_entry("EMAIL", "me@example.com")
print(storage.read_datafile(), end="")
```

- `storage_dir()` and `datafile_path()` return `pathlib.Path` objects;
  `storage_dir_exists()` and `datafile_exists()` check for them.
- `save_entry(category, value)` appends `{"[category]": value}` to the file.
  It does not create the directory. A missing, empty or unreadable-as-JSON
  datafile is started over as an empty array.
- `read_datafile()` returns the coloured listing as one string. It raises
  `StorageError` if the file cannot be read, is not valid JSON, or holds a
  value that is not a string.
- `delete_datafile()` removes the file and ignores any failure.

If `HOME` is not set, the storage functions raise `storage.StorageError`.

`aboutmig.colorcodes` holds the terminal escape sequences used for output
(`FG_*`, `BG_*`, `RESET`) and `colorize(text, code)`, which wraps text in a
code followed by a reset.

## What it does not do

There is no way to edit or remove a single entry; `--reset` deletes the whole
datafile. The data location is fixed under `$HOME` and cannot be changed.
Output always contains colour escape sequences, even when it is not sent to a
terminal.

## Running the tests

```
pip install ".[test]"
pytest
```