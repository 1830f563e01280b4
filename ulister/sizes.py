"""Size, number and device-number fields of the long format."""

from __future__ import annotations

_UNITS = ("B", "K", "M", "G", "T")


def intlen(n: int) -> int:
    """Number of decimal digits of ``n``; anything below 10 counts as one."""
    n = int(n)
    return len(str(n)) if n > 9 else 1


def human_size(size: float, human: bool) -> str:
    """Render a file size, with a unit suffix when ``human`` is set."""
    if not human:
        return str(int(size))
    unit = 0
    while size > 1024 and unit < len(_UNITS) - 1:
        size /= 1024.0
        unit += 1
    return f"{int(size)}{_UNITS[unit]}"


def hex_minor(n: int) -> str:
    """A minor device number as ``0x`` and eight hexadecimal digits."""
    return f"0x{n:08x}"


def split_device(rdev: int) -> tuple[int, int]:
    """Split a device number into its major and minor parts."""
    return (rdev >> 24) & 0xFF, rdev & 0xFFFFFF


def device_field(major: int, minor: int) -> str:
    """The column shown in place of the size for device files."""
    head = " " * (4 - intlen(major)) + f"{major},"
    if minor < 256:
        return head + " " * (4 - intlen(minor)) + f"{minor} "
    return head + f" {hex_minor(minor)} "


def size_field(text: str, width: int, human: bool) -> str:
    """Right-align a size text: fixed six columns when ``human``, else padded by ``width``."""
    if human:
        return " " * (6 - len(text)) + text + " "
    return " " * (width + 1) + text + " "