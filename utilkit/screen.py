"""A 32-bit pixel buffer sized like a window's client area, plus window style bits."""

from __future__ import annotations

from array import array
from enum import IntEnum

BI_RGB = 0


def _to_short(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class WindowStyle(IntEnum):
    """Bit positions of window styles; ``FRAME`` with ``BORDER`` gives a caption."""

    MAXBOX = 16
    MINBOX = 17
    SIZEBOX = 18
    SYSMENU = 19
    HSCROLL = 20
    VSCROLL = 21
    FRAME = 22
    BORDER = 23
    MAXIMIZED = 24
    CLIP_CHILDREN = 25
    CLIP_SIBLINGS = 26
    DISABLED = 27
    VISIBLE = 28
    MINIMIZED = 29
    CHILD = 30
    POPUP = 31

    @property
    def flag(self) -> int:
        """The style as a bit mask."""
        return 1 << self.value


class WindowExStyle(IntEnum):
    """Bit positions of extended window styles."""

    DLG_MODAL_FRAME = 0
    RESERVED_1 = 1
    NO_PARENT_NOTIFY = 2
    TOPMOST = 3
    ACCEPT_FILES = 4
    TRANSPARENT = 5
    MDI_CHILD = 6
    TOOL_WINDOW = 7
    RAISED_EDGE = 8
    SUNKEN_EDGE = 9
    CONTEXT_HELP = 10
    RESERVED_2 = 11
    RIGHT = 12
    RTL_READING = 13
    LEFT_SCROLLBAR = 14
    RESERVED_3 = 15
    CONTROL_PARENT = 16
    STATIC_EDGE = 17
    APP_WINDOW = 18
    LAYERED = 19
    NO_INHERIT_LAYOUT = 20
    NO_REDIRECTION_BITMAP = 21
    LAYOUT_RTL = 22
    COMPOSITED = 23
    RESERVED_4 = 24
    NOACTIVATE = 25

    @property
    def flag(self) -> int:
        """The style as a bit mask."""
        return 1 << self.value


class Screen:
    """An ``x`` by ``y`` buffer of 32-bit pixels described by a bitmap header."""

    planes = 1
    bit_count = 32
    compression = BI_RGB

    def __init__(self, x: int, y: int) -> None:
        self.x = 0
        self.y = 0
        self.memsize = 0
        self.mem = array("I")
        self.resize(x, y)

    @property
    def width(self) -> int:
        return self.x

    @property
    def height(self) -> int:
        return self.y

    def resize(self, x: int, y: int) -> None:
        """Set the dimensions (as 16-bit signed values) and allocate a fresh buffer."""
        x, y = _to_short(x), _to_short(y)
        memsize = x * y
        if memsize < 0:
            raise ValueError(f"cannot allocate a {x}x{y} pixel buffer")
        self.x, self.y, self.memsize = x, y, memsize
        self.mem = array("I", bytes(4 * memsize))

    def resize_packed(self, value: int) -> None:
        """Resize from a packed value: width in the low word, height in the high word."""
        self.resize(value & 0xFFFF, (value >> 16) & 0xFFFF)

    def __call__(self, x: int, y: int) -> None:
        self.resize(x, y)