import os
import time

import pytest

from ulister.longformat import (
    ColumnWidths,
    format_time,
    group_name,
    owner_name,
    render_long,
)
from ulister.options import Options


@pytest.fixture
def sample(tmp_path):
    (tmp_path / "a").write_bytes(b"x" * 5)
    (tmp_path / "b").write_bytes(b"y" * 12345)
    os.chmod(tmp_path / "a", 0o644)
    os.chmod(tmp_path / "b", 0o644)
    (tmp_path / "sub").mkdir()
    os.symlink("a", tmp_path / "ln")
    return tmp_path


def test_column_widths_defaults():
    widths = ColumnWidths()
    assert (widths.links, widths.user, widths.group, widths.size) == (0, 0, 0, 0)


def test_owner_name_known_user():
    import pwd

    uid = os.getuid()
    assert owner_name(uid) == pwd.getpwuid(uid).pw_name


def test_unknown_ids_fall_back_to_numbers():
    unused = 2**31 - 7
    assert owner_name(unused) == str(unused)
    assert group_name(unused) == str(unused)


def test_format_time_recent_has_clock():
    t = time.time()
    text = format_time(t, t, False)
    assert len(text) == 12
    assert text[9] == ":"


def test_format_time_old_shows_year():
    t = time.time() - 20_000_000
    text = format_time(t, time.time(), False)
    assert len(text) == 12
    assert text.endswith(str(time.localtime(int(t)).tm_year))
    assert ":" not in text


def test_format_time_full():
    t = time.time() - 20_000_000
    text = format_time(t, time.time(), True)
    assert len(text) == 20
    assert text.count(":") == 2
    assert text.endswith(str(time.localtime(int(t)).tm_year))


def test_total_line_only_with_directory(sample):
    with_dir = render_long(["a", "b"], str(sample), Options(long_format=True))
    assert with_dir.startswith("total ")
    os.chdir(sample)
    without = render_long(["a", "b"], None, Options(long_format=True))
    assert not without.startswith("total")
    assert len(without.splitlines()) == 2


def test_lines_in_given_order(sample):
    text = render_long(["b", "a"], str(sample), Options(long_format=True))
    lines = text.splitlines()[1:]
    assert [line.rsplit(" ", 1)[1] for line in lines] == ["b", "a"]


def test_mode_and_sizes(sample):
    lines = render_long(["a", "b"], str(sample), Options()).splitlines()[1:]
    assert lines[0][:10] == "-rw-r--r--"
    assert " 12345 " in lines[1]
    # Same-width names and right-aligned fields give equal line lengths.
    assert len(lines[0]) == len(lines[1])


def test_symlink_target(sample):
    lines = render_long(["ln"], str(sample), Options()).splitlines()
    assert lines[1].startswith("l")
    assert lines[1].endswith("ln -> a")


def test_slash_marks_directory(sample):
    lines = render_long(["sub"], str(sample), Options(slash=True)).splitlines()
    assert lines[1].startswith("d")
    assert lines[1].endswith("sub/")


def test_color_wraps_directory(sample):
    text = render_long(["sub"], str(sample), Options(color=True))
    assert "\33[0m\33[0;34msub\33[0m" in text


def test_human_sizes(tmp_path):
    (tmp_path / "k").write_bytes(b"z" * 2048)
    text = render_long(["k"], str(tmp_path), Options(human=True))
    assert "    2K " in text


def test_old_entry_shows_year(sample):
    mtime = os.lstat(sample / "a").st_mtime
    text = render_long(["a"], str(sample), Options(), now=mtime + 20_000_000)
    year = str(time.localtime(int(mtime)).tm_year)
    assert f"  {year} a" in text


def test_missing_entries_are_skipped(sample):
    text = render_long(["a", "missing"], str(sample), Options())
    assert len(text.splitlines()) == 2