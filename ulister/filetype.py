"""File kinds, type indicators, colours and permission strings."""

from __future__ import annotations

import os
import stat

from .options import Options

RESET = "\33[0m"

# Kinds are single characters:
#   s socket, l symlink, f regular file, e executable, u setuid executable,
#   g setgid executable, b block device, c character device, p fifo,
#   d directory, x sticky world-writable directory, n world-writable
#   directory, - anything else.

_CLASSIFY_MARKS = {"l": "@", "e": "*", "d": "/", "s": "=", "p": "|"}

_COLORS = {
    "d": "\33[0;34m",
    "l": "\33[0;35m",
    "e": "\33[0;31m",
    "c": "\33[0;34;43m",
    "b": "\33[0;34;46m",
    "x": "\33[0;30;42m",
    "u": "\33[0;30;41m",
    "s": "\33[0;32m",
    "g": "\33[0;30;46m",
    "n": "\33[0;30;41m",
    "-": "\33[0;34m",
}

_TYPE_CHARS = {
    stat.S_IFDIR: "d",
    stat.S_IFCHR: "c",
    stat.S_IFBLK: "b",
    stat.S_IFLNK: "l",
}

_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def join_path(directory: str | None, name: str) -> str:
    """Return the path of ``name`` inside ``directory`` (or ``name`` itself)."""
    if directory is None:
        return name
    return f"{directory}/{name}"


def kind_of(mode: int) -> str:
    """Classify a ``st_mode`` value into a one-character kind."""
    fmt = stat.S_IFMT(mode)
    if fmt == stat.S_IFSOCK:
        return "s"
    if fmt == stat.S_IFLNK:
        return "l"
    if fmt == stat.S_IFREG:
        if not mode & stat.S_IXUSR:
            return "f"
        if mode & stat.S_ISUID:
            return "u"
        if mode & stat.S_ISGID:
            return "g"
        return "e"
    if fmt == stat.S_IFBLK:
        return "b"
    if fmt == stat.S_IFCHR:
        return "c"
    if fmt == stat.S_IFIFO:
        return "p"
    if fmt == stat.S_IFDIR:
        if mode & stat.S_IWOTH:
            return "x" if mode & stat.S_ISVTX else "n"
        return "d"
    return "-"


def entry_kind(name: str, directory: str | None) -> str:
    """Kind of the entry ``name`` in ``directory``, without following links."""
    try:
        mode = os.lstat(join_path(directory, name)).st_mode
    except OSError:
        return "-"
    return kind_of(mode)


def indicator(kind: str, options: Options) -> str:
    """The mark appended after a name for ``-F`` or ``-p``."""
    if options.classify:
        return _CLASSIFY_MARKS.get(kind, "")
    if options.slash and kind == "d":
        return "/"
    return ""


def color_start(kind: str) -> str:
    """The escape sequence that starts the colour for ``kind``."""
    return _COLORS.get(kind, "")


def colorize(name: str, kind: str) -> str:
    """Wrap ``name`` in the colour for ``kind``."""
    return f"{RESET}{color_start(kind)}{name}{RESET}"


def mode_string(mode: int, extended: str = " ") -> str:
    """The eleven-character permission column of the long format.

    ``extended`` is the trailing mark: ``"@"`` for extended attributes,
    ``"+"`` for an access control list, ``" "`` otherwise.
    """
    chars = ["-"] * 10
    chars[0] = _TYPE_CHARS.get(stat.S_IFMT(mode), "-")
    for index, (bit, letter) in enumerate(_PERMISSION_BITS, start=1):
        if mode & bit:
            chars[index] = letter
    # Set-id bits are always shown as an upper-case S.
    if mode & stat.S_ISUID:
        chars[3] = "S"
    if mode & stat.S_ISGID:
        chars[6] = "S"
    if mode & stat.S_ISVTX:
        chars[9] = "t" if chars[9] == "x" else "T"
    return "".join(chars) + extended