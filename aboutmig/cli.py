"""Command-line interface for storing information about yourself."""

import argparse
import enum
import sys
from dataclasses import dataclass

from . import storage
from .colorcodes import (
    BG_RED,
    FG_BLUE,
    FG_BRIGHT_GREEN,
    FG_GREEN,
    FG_MAGENTA,
    FG_YELLOW,
    colorize,
)

VERSION = "0.1.6"


class ExitCode(enum.IntEnum):
    """Process exit statuses."""

    NOERROR = 0
    GENERALERROR = 1
    MISSING_ARGUMENT = 3
    INVALID_ARGUMENT = 4
    EMPTY_INPUT = 5


@dataclass(frozen=True)
class LicenseInfo:
    """A third-party component and the terms it is used under."""

    name: str
    license: str
    url: str


LICENSES = (
    LicenseInfo(
        "Python standard library",
        "PSF-2.0",
        "see the documentation of your Python installation",
    ),
)


class EmptyInputError(ValueError):
    """Raised when the user enters nothing but whitespace."""


class _OptionError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _OptionError(message)


def version_message() -> str:
    """Return the version line."""
    return f"AboutMig {VERSION}"


def license_message() -> str:
    """Return a notice for every third-party component in use."""
    return "".join(
        f"This project uses the '{colorize(lib.name, FG_GREEN)}' library "
        f"({colorize(lib.license, FG_GREEN)}).\n"
        f"More information: {colorize(lib.url, FG_BLUE)}\n\n"
        for lib in LICENSES
    )


def ensure_storage_files_exist() -> None:
    """Create the data directory and datafile when missing."""
    if not storage.storage_dir_exists():
        storage.create_storage_dir()
    if not storage.datafile_exists():
        storage.create_datafile()


def get_input(prompt: str) -> str:
    """Read one line from the user, rejecting empty or blank input."""
    try:
        text = input(prompt)
    except EOFError:
        text = ""
    if not text.strip():
        raise EmptyInputError("Input cannot be empty or whitespace.")
    return text


def build_parser() -> argparse.ArgumentParser:
    """Build the option parser."""
    parser = _Parser(
        prog="aboutmig",
        description=(
            "Cross-platform software to add information about yourself. "
            f"Version {VERSION}"
        ),
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print helper text.")
    parser.add_argument("-a", "--add", action="store_true", help="Add information.")
    parser.add_argument(
        "-l", "--list", action="store_true", help="List all currently stored information."
    )
    parser.add_argument("-r", "--reset", action="store_true", help="Reset datafile.")
    parser.add_argument("-L", "--license", action="store_true", help="List all licenses.")
    parser.add_argument("-v", "--version", action="store_true", help="Print version.")
    return parser


def _error(text: str) -> None:
    print(colorize(text, BG_RED), file=sys.stderr)


def _run(parser: argparse.ArgumentParser, args: list) -> ExitCode:
    options, extras = parser.parse_known_args(args)
    unknown = [arg for arg in extras if arg.startswith("-") and arg != "-"]
    if unknown:
        raise _OptionError(f"Option '{unknown[0]}' does not exist")

    if options.help:
        print(parser.format_help())
        return ExitCode.NOERROR
    if options.add:
        ensure_storage_files_exist()
        category = get_input("Enter category: ").upper()
        value = get_input("Enter value: ")
        print(f"\nYou entered:\n{colorize(f'[{category}]', FG_YELLOW)}: {value}")
        storage.save_entry(category, value)
    if options.list:
        ensure_storage_files_exist()
        print(storage.read_datafile(), end="")
    if options.reset:
        confirm = get_input("Are you sure you want to delete the datafile? [y/N]: ")
        if confirm not in ("y", "Y"):
            print(colorize("Aborted.", FG_MAGENTA))
            return ExitCode.NOERROR
        storage.delete_datafile()
        print(colorize("Deleted datafile.", FG_BRIGHT_GREEN))
    if options.version:
        print(version_message())
        return ExitCode.NOERROR
    if options.license:
        print(license_message(), end="")
        return ExitCode.NOERROR
    return ExitCode.NOERROR


def main(argv=None) -> int:
    """Run the command line and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _error("Error: No arguments provided.")
        return ExitCode.MISSING_ARGUMENT

    try:
        return _run(build_parser(), args)
    except _OptionError as exc:
        _error(f"Error: Unknown option provided. {exc}")
        return ExitCode.INVALID_ARGUMENT
    except EmptyInputError as exc:
        _error(str(exc))
        return ExitCode.EMPTY_INPUT
    except (storage.StorageError, OSError) as exc:
        _error(f"Unexpected error: {exc}")
        return ExitCode.GENERALERROR


if __name__ == "__main__":
    sys.exit(main())