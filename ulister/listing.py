"""Walking operands and directories and printing their listings."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Sequence
from typing import TextIO

from .layout import (
    render_colored,
    render_plain,
    render_single,
    render_stream,
    terminal_width,
)
from .longformat import render_long
from .options import Options, UsageError, parse_args
from .sorting import sort_names


def _looks_like_directory(info: os.stat_result) -> bool:
    # A mask test rather than S_ISDIR: every mode carrying the directory bit counts.
    return (info.st_mode & stat.S_IFDIR) == stat.S_IFDIR


def _child_path(directory: str, name: str) -> str:
    if directory == "/":
        return f"/{name}"
    return f"{directory}/{name}"


class Lister:
    """Prints listings of files and directories according to ``options``.

    Output goes to ``out`` and error messages to ``err``; both default to the
    process streams at the time of writing. ``status`` becomes 1 once any
    error has been reported.
    """

    def __init__(
        self,
        options: Options,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.options = options
        self._out = out
        self._err = err
        self.status = 0
        self._header_shown = False

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _fail(self, message: str) -> None:
        self.status = 1
        self.err.write(message)

    def _is_tty(self) -> bool:
        isatty = getattr(self.out, "isatty", None)
        return bool(isatty is not None and isatty())

    def _stat(self, path: str) -> os.stat_result | None:
        try:
            if self.options.long_format:
                return os.lstat(path)
            return os.stat(path)
        except OSError:
            return None

    def _read_entries(self, path: str) -> list[str] | None:
        try:
            found = os.listdir(path)
        except OSError as exc:
            name = path.rsplit("/", 1)[-1]
            reason = exc.strerror or os.strerror(exc.errno or 0)
            self._fail(f"uls: {name}: {reason}\n")
            return None
        names = [".", ".."] + found
        options = self.options
        if options.all or options.unsorted:
            return names
        if options.almost_all:
            return [name for name in names if name[1:2] not in ("", ".")]
        return [name for name in names if not name.startswith(".")]

    def _render(
        self, names: Sequence[str], directory: str | None, comma: bool = False
    ) -> str:
        options = self.options
        if options.stream:
            return render_stream(names) + (", " if comma else "") + "\n"
        if options.one_per_line:
            return render_single(names)
        if options.long_format:
            return render_long(names, directory, options)
        tty = self._is_tty()
        width = terminal_width() if tty else 0
        if options.color:
            return render_colored(names, options, directory, width, tty)
        return render_plain(names, options, directory, width, tty)

    def _subdirectories(self, directory: str, names: Sequence[str]) -> list[str]:
        result = []
        for name in names:
            if name in (".", ".."):
                continue
            path = _child_path(directory, name)
            info = self._stat(path)
            if info is not None and _looks_like_directory(info):
                result.append(path)
        return result

    def _recurse(self, directories: Sequence[str], announce: bool) -> None:
        for directory in directories:
            names = self._read_entries(directory)
            if not names:
                continue
            if announce or self._header_shown:
                self._write(f"\n{directory}:\n")
            self._header_shown = True
            names = sort_names(names, self.options, directory)
            self._write(self._render(names, directory))
            inner = self._subdirectories(directory, names)
            if inner:
                self._recurse(inner, announce)

    def list_directory(self, path: str) -> None:
        """List the entries of the directory ``path``."""
        names = self._read_entries(path)
        if not names:
            return
        names = sort_names(names, self.options, path)
        self._write(self._render(names, path))
        if self.options.recursive and not self.options.unsorted:
            self._recurse(self._subdirectories(path, names), announce=True)

    def _print_directories(self, directories: Sequence[str], file_count: int) -> None:
        if file_count and directories:
            self._write("\n")
        last = len(directories) - 1
        for index, directory in enumerate(directories):
            if len(directories) != 1 or file_count:
                self._write(f"{directory}:\n")
            self.list_directory(directory)
            if index != last:
                self._write("\n")

    def list_operands(self, operands: Sequence[str]) -> None:
        """List command-line operands: plain files first, then directories."""
        files: list[str] = []
        directories: list[str] = []
        for operand in operands:
            info = self._stat(operand)
            if info is None:
                self._fail(f"uls: {operand}: No such file or directory\n")
            elif _looks_like_directory(info):
                directories.append(operand)
            else:
                files.append(operand)
        if files:
            files = sort_names(files, self.options)
            self._write(self._render(files, None, comma=bool(directories)))
        directories = sort_names(directories, self.options)
        if self.options.recursive and not self.options.unsorted:
            self._recurse(directories, announce=bool(files))
        else:
            self._print_directories(directories, len(files))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lister on ``argv`` (default: the process arguments)."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options, operands = parse_args(list(argv))
    except UsageError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    lister = Lister(options)
    if operands:
        lister.list_operands(operands)
    else:
        lister.list_directory(".")
    return lister.status


if __name__ == "__main__":
    raise SystemExit(main())