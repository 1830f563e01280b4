"""The long listing format (``-l``): one detailed line per entry."""

from __future__ import annotations

import grp
import os
import pwd
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .filetype import colorize, entry_kind, indicator, mode_string
from .options import Options
from .sizes import device_field, human_size, intlen, size_field, split_device

SIX_MONTHS = 15552000
_XATTR_NAME_WIDTH = 24
_XATTR_SIZE_WIDTH = 3
_XATTR_INDENT = 8
_DEVICE_PAD = 7


@dataclass
class ColumnWidths:
    """Widest values of the padded columns in one long listing."""

    links: int = 0
    user: int = 0
    group: int = 0
    size: int = 0


def owner_name(uid: int) -> str:
    """Name of the user ``uid``, or the number itself when it is unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return str(uid)


def group_name(gid: int) -> str:
    """Name of the group ``gid``, or the number itself when it is unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return str(gid)


def format_time(timestamp: float, now: float, full: bool = False) -> str:
    """The date column: ``Mon dd hh:mm``, ``Mon dd  yyyy`` when older than
    six months, or the full ``Mon dd hh:mm:ss yyyy`` when ``full`` is set."""
    stamp = time.ctime(int(timestamp))
    if full:
        return stamp[4:24]
    if now - timestamp > SIX_MONTHS:
        return f"{stamp[4:10]}  {stamp[20:24]}"
    return stamp[4:16]


def _entry_path(directory: str | None, name: str) -> str:
    if directory is None:
        return name
    if directory == "/":
        return f"/{name}"
    return f"{directory}/{name}"


def _measure(stats: Iterable[os.stat_result]) -> ColumnWidths:
    widths = ColumnWidths()
    for info in stats:
        widths.links = max(widths.links, intlen(info.st_nlink))
        widths.user = max(widths.user, len(owner_name(info.st_uid)))
        widths.group = max(widths.group, len(group_name(info.st_gid)))
        widths.size = max(widths.size, intlen(info.st_size))
    return widths


def _xattr_names(path: str) -> list[str]:
    try:
        return os.listxattr(path, follow_symlinks=False)
    except (OSError, AttributeError):
        return []


def _xattr_detail(path: str, names: Sequence[str]) -> str:
    if not names:
        return ""
    first = names[0]
    try:
        size = len(os.getxattr(path, first, follow_symlinks=False))
    except OSError:
        size = 0
    return (
        "\n"
        + " " * _XATTR_INDENT
        + first
        + " " * (_XATTR_NAME_WIDTH - len(first) + 1)
        + " " * (_XATTR_SIZE_WIDTH - intlen(size))
        + str(size)
    )


def _link_target(path: str) -> str:
    try:
        target = os.readlink(path)
    except OSError:
        return ""
    return f" -> {target}" if target else ""


def _chosen_time(info: os.stat_result, options: Options) -> float:
    if options.access_time:
        return info.st_atime
    if options.change_time:
        return info.st_ctime
    if options.birth_time:
        return getattr(info, "st_birthtime", info.st_mtime)
    return info.st_mtime


def _name_column(name: str, directory: str | None, options: Options) -> str:
    if options.color:
        return colorize(name, entry_kind(name, directory))
    if options.slash or options.classify:
        return name + indicator(entry_kind(name, directory), options)
    return name


def render_long(
    names: Sequence[str],
    directory: str | None = None,
    options: Options | None = None,
    now: float | None = None,
) -> str:
    """Render ``names`` in the long format.

    When ``directory`` is given the names are looked up inside it and a
    ``total`` line of allocated blocks comes first.
    """
    options = options if options is not None else Options()
    now = time.time() if now is None else now
    entries = []
    for name in names:
        path = _entry_path(directory, name)
        try:
            entries.append((name, path, os.lstat(path)))
        except OSError:
            continue
    widths = _measure(info for _, _, info in entries)
    out: list[str] = []
    if directory is not None:
        total = sum(getattr(info, "st_blocks", 0) for _, _, info in entries)
        out.append(f"total {total}\n")
    saw_device = False
    for name, path, info in entries:
        xattrs = _xattr_names(path)
        mode = mode_string(info.st_mode, "@" if xattrs else " ")
        owner = owner_name(info.st_uid)
        group = group_name(info.st_gid)
        parts = [
            mode,
            " " * (widths.links - intlen(info.st_nlink) + 1),
            str(info.st_nlink),
            " ",
            owner,
            " " * (widths.user - len(owner) + 2),
            group,
            " " * (widths.group - len(group) + 1),
        ]
        if mode[0] in "bc":
            saw_device = True
            parts.append(device_field(*split_device(info.st_rdev)))
        else:
            if saw_device:
                parts.append(" " * _DEVICE_PAD)
            parts.append(
                size_field(
                    human_size(info.st_size, options.human),
                    widths.size - intlen(info.st_size),
                    options.human,
                )
            )
        parts.append(format_time(_chosen_time(info, options), now, options.full_time))
        parts.append(" ")
        parts.append(_name_column(name, directory, options))
        if mode[0] == "l":
            parts.append(_link_target(path))
        if mode[10] == "@" and options.xattrs:
            parts.append(_xattr_detail(path, xattrs))
        parts.append("\n")
        out.append("".join(parts))
    return "".join(out)