"""Ordering of directory entries and command-line operands."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .filetype import join_path
from .options import Options


def _lstat(name: str, directory: str | None) -> os.stat_result | None:
    try:
        return os.lstat(join_path(directory, name))
    except OSError:
        return None


def _size_of(name: str, directory: str | None) -> int:
    info = _lstat(name, directory)
    return info.st_size if info is not None else 0


def _time_attribute(options: Options) -> str:
    if options.access_time and not options.change_time:
        return "st_atime"
    if options.change_time and not options.access_time:
        return "st_ctime"
    return "st_mtime"


def _time_of(name: str, directory: str | None, attribute: str) -> int:
    info = _lstat(name, directory)
    return int(getattr(info, attribute)) if info is not None else 0


def sort_names(
    names: Iterable[str], options: Options, directory: str | None = None
) -> list[str]:
    """Return ``names`` in the order the options ask for.

    Names are first ordered byte-wise; ``-S`` then orders by size and ``-t``
    by time, largest or newest first, keeping the name order among equals.
    ``-r`` reverses the result and ``-f`` leaves the order untouched.
    Entries are looked up inside ``directory`` without following links.
    """
    result = list(names)
    if options.unsorted:
        return result
    result.sort(key=os.fsencode)
    if options.by_size:
        result.sort(key=lambda name: _size_of(name, directory), reverse=True)
    elif options.by_time:
        attribute = _time_attribute(options)
        result.sort(
            key=lambda name: _time_of(name, directory, attribute), reverse=True
        )
    if options.reverse:
        result.reverse()
    return result