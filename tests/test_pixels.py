import pytest

from ftlib.pixels import BPP, Texture, draw_pixel


def test_draw_pixel_writes_rgba_bytes_in_order():
    buffer = bytearray(8)
    draw_pixel(buffer, 4, 0x11223344)
    assert buffer == bytearray(b"\x00\x00\x00\x00\x11\x22\x33\x44")


def test_draw_pixel_masks_color():
    buffer = bytearray(4)
    draw_pixel(buffer, 0, 0x1_AABBCCDD)
    assert buffer == bytearray(b"\xaa\xbb\xcc\xdd")


@pytest.mark.parametrize("offset", [-1, 5, 8])
def test_draw_pixel_out_of_range(offset):
    with pytest.raises(IndexError):
        draw_pixel(bytearray(8), offset, 0)


def test_new_texture_is_zero_filled():
    texture = Texture(3, 2)
    assert texture.pixels == bytearray(3 * 2 * BPP)
    assert texture.bytes_per_pixel == BPP


def test_put_then_get_round_trip():
    texture = Texture(4, 3)
    texture.put_pixel(2, 1, 0xDEADBEEF)
    assert texture.get_pixel(2, 1) == 0xDEADBEEF
    assert texture.get_pixel(1, 2) == 0


def test_put_pixel_layout_is_row_major():
    texture = Texture(2, 2)
    texture.put_pixel(1, 1, 0x01020304)
    assert texture.pixels[12:16] == bytearray(b"\x01\x02\x03\x04")
    assert texture.pixels[:12] == bytearray(12)


@pytest.mark.parametrize("x, y", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_bounds_pixel(x, y):
    texture = Texture(2, 2)
    with pytest.raises(IndexError):
        texture.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        texture.get_pixel(x, y)


def test_existing_pixels_are_used():
    data = bytearray(b"\x10\x20\x30\x40")
    texture = Texture(1, 1, data)
    assert texture.get_pixel(0, 0) == 0x10203040


def test_wrong_pixel_length_raises():
    with pytest.raises(ValueError):
        Texture(2, 2, bytearray(3))


def test_negative_dimension_raises():
    with pytest.raises(ValueError):
        Texture(-1, 2)