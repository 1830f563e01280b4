"""Command-line option parsing for the directory lister."""

from __future__ import annotations

from dataclasses import dataclass

FLAG_LETTERS = "AaRlmS1tucrGpFT@fChU"
USAGE = "usage: uls [-ACRFGSTUacfhlmprtu1] [file ...]"

_FIELDS = {
    "A": "almost_all",
    "a": "all",
    "R": "recursive",
    "l": "long_format",
    "m": "stream",
    "S": "by_size",
    "1": "one_per_line",
    "t": "by_time",
    "u": "access_time",
    "c": "change_time",
    "r": "reverse",
    "G": "color",
    "p": "slash",
    "F": "classify",
    "T": "full_time",
    "@": "xattrs",
    "f": "unsorted",
    "C": "columns",
    "h": "human",
    "U": "birth_time",
}

# Flags inside one of these groups override each other: the last one wins.
_LAYOUT_FIELDS = ("long_format", "columns", "one_per_line")
_TIME_FIELDS = ("access_time", "change_time")


class UsageError(Exception):
    """Raised when an option letter is not recognised."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"uls: illegal option -- {option}\n{USAGE}")


@dataclass
class Options:
    """The set of flags selected on the command line."""

    long_format: bool = False
    all: bool = False
    almost_all: bool = False
    recursive: bool = False
    stream: bool = False
    one_per_line: bool = False
    by_size: bool = False
    by_time: bool = False
    access_time: bool = False
    change_time: bool = False
    reverse: bool = False
    color: bool = False
    slash: bool = False
    classify: bool = False
    full_time: bool = False
    xattrs: bool = False
    unsorted: bool = False
    columns: bool = False
    human: bool = False
    birth_time: bool = False

    def _apply(self, letter: str) -> None:
        field = _FIELDS.get(letter)
        if field is None:
            raise UsageError(letter)
        if field in _LAYOUT_FIELDS:
            for other in _LAYOUT_FIELDS:
                setattr(self, other, False)
        elif field in _TIME_FIELDS:
            for other in _TIME_FIELDS:
                setattr(self, other, False)
        setattr(self, field, True)


def parse_args(argv: list[str]) -> tuple[Options, list[str]]:
    """Split arguments (without the program name) into options and operands.

    Options are read until the first argument that does not start with a dash
    or until an argument starting with ``--``; everything after that is an
    operand.
    """
    options = Options()
    operands: list[str] = []
    taking_options = True
    for arg in argv:
        if not taking_options:
            operands.append(arg)
        elif arg.startswith("--"):
            taking_options = False
        elif arg.startswith("-"):
            for letter in arg[1:]:
                options._apply(letter)
        else:
            taking_options = False
            operands.append(arg)
    return options, operands