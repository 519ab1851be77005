import pytest

from utilkit.screen import Screen, WindowExStyle, WindowStyle


def test_initial_size():
    screen = Screen(4, 3)
    assert screen.width == 4
    assert screen.height == 3
    assert screen.memsize == 12
    assert len(screen.mem) == screen.memsize


def test_header_constants():
    screen = Screen(1, 1)
    assert screen.planes == 1
    assert screen.bit_count == 32


def test_resize_replaces_buffer():
    screen = Screen(2, 2)
    screen.mem[0] = 7
    screen.resize(5, 6)
    assert (screen.x, screen.y) == (5, 6)
    assert len(screen.mem) == 30
    assert all(pixel == 0 for pixel in screen.mem)


def test_call_resizes():
    screen = Screen(1, 1)
    screen(8, 9)
    assert (screen.x, screen.y) == (8, 9)
    assert screen.memsize == 72


def test_resize_packed_round_trip():
    screen = Screen(1, 1)
    screen.resize_packed(640 | (480 << 16))
    assert (screen.x, screen.y) == (640, 480)
    assert screen.memsize == 640 * 480


def test_resize_packed_signed_words():
    screen = Screen(1, 1)
    screen.resize_packed(0xFFFFFFFF)
    assert (screen.x, screen.y) == (-1, -1)
    assert screen.memsize == 1


def test_negative_area_rejected():
    screen = Screen(3, 3)
    with pytest.raises(ValueError):
        screen.resize_packed(0xFFFF0002)
    assert (screen.x, screen.y) == (3, 3)


def test_resize_to_zero():
    screen = Screen(3, 3)
    screen.resize(0, 0)
    assert screen.memsize == 0
    assert len(screen.mem) == 0


def test_style_lookup_by_position():
    assert WindowStyle(16) is WindowStyle.MAXBOX
    assert WindowStyle(31) is WindowStyle.POPUP
    assert WindowStyle(30).flag == 1 << 30
    assert WindowExStyle(0) is WindowExStyle.DLG_MODAL_FRAME
    assert WindowExStyle(25) is WindowExStyle.NOACTIVATE


def test_style_unknown_position_rejected():
    with pytest.raises(ValueError):
        WindowStyle(15)