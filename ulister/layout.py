"""Arrangements of names on the screen: columns, streams and single lines."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from .filetype import colorize, entry_kind, indicator
from .options import Options

_TAB = 8
_PIPE_WIDTH = 79
_DEFAULT_WIDTH = 80


def terminal_width() -> int:
    """Width of the terminal on standard output, or 80 when there is none."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (OSError, ValueError, AttributeError):
        return _DEFAULT_WIDTH


def _max_len(names: Sequence[str]) -> int:
    return max((len(name) for name in names), default=0)


def _decorated(name: str, options: Options, directory: str | None) -> str:
    if options.classify or options.slash:
        return name + indicator(entry_kind(name, directory), options)
    return name


def render_stream(names: Sequence[str]) -> str:
    """Names separated by commas, as ``-m`` prints them (no newline)."""
    return ", ".join(names)


def render_single(names: Sequence[str]) -> str:
    """One name per line, as ``-1`` prints them."""
    return "".join(f"{name}\n" for name in names)


def render_lines(
    names: Sequence[str], options: Options, directory: str | None = None
) -> str:
    """One name per line with its ``-F``/``-p`` mark; used when output is not a terminal."""
    return "".join(f"{_decorated(name, options, directory)}\n" for name in names)


def render_plain(
    names: Sequence[str],
    options: Options,
    directory: str | None,
    width: int,
    is_tty: bool,
) -> str:
    """Tab-separated columns filled top to bottom, then left to right."""
    if not is_tty and not options.columns:
        return render_lines(names, options, directory)
    if not is_tty:
        width = _PIPE_WIDTH
    count = len(names)
    max_len = _max_len(names)
    cols = width // ((_TAB - max_len % _TAB) + max_len)
    lines = count // cols if cols else 0
    if lines == 0 or (cols and count % cols):
        lines += 1
    max_tabs = max_len // _TAB + 1
    rows = []
    for row in range(lines):
        parts = []
        for position in range(row, count, lines):
            name = names[position]
            parts.append(_decorated(name, options, directory))
            if position + lines < count:
                parts.append("\t" * max(0, max_tabs - len(name) // _TAB))
        rows.append("".join(parts) + "\n")
    return "".join(rows)


def render_colored(
    names: Sequence[str],
    options: Options,
    directory: str | None,
    width: int,
    is_tty: bool,
) -> str:
    """Coloured names in space-padded columns, as ``-G`` prints them."""
    if not is_tty:
        return render_lines(names, options, directory)
    count = len(names)
    max_len = _max_len(names)
    if width <= max_len + 1:
        rows = count
    else:
        per_line = width // (max_len + 1)
        rows = -(-count // per_line)
    out = []
    for row in range(rows):
        parts = []
        for position in range(row, count, rows):
            name = names[position]
            kind = entry_kind(name, directory)
            text = colorize(name, kind)
            if options.classify or options.slash:
                text += indicator(kind, options)
            spacing = 0 if position + rows >= count else max_len - len(name) + 1
            parts.append(text + " " * spacing)
        out.append("".join(parts) + "\n")
    return "".join(out)