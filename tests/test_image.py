import pytest

from raycube.image import Image, good_color

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize(
    "size,kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)]
)
def test_color_map_fill_reads_back(size, kind):
    w, h = size
    img = Image(w, h)
    for y in range(h):
        for x in range(w):
            img.put_pixel(y, x, good_color(_color_map(x, y, w, h, kind), 24, [0] * 6))
    for y in (0, h // 2, h - 1):
        for x in (0, w // 3, w - 1):
            assert img.get_pixel(y, x) == _color_map(x, y, w, h, kind)


def test_image_layout_attributes():
    img = Image(IM1_SX, IM1_SY)
    assert img.bpp == 32
    assert img.size_line == IM1_SX * 4
    assert len(img.data) == IM1_SX * 4 * IM1_SY
    assert img.endian in (0, 1)


def test_new_image_is_zero_filled():
    img = Image(5, 3)
    assert all(byte == 0 for byte in img.data)
    assert img.get_pixel(2, 4) == 0


def test_put_pixel_masks_to_32_bits():
    img = Image(2, 2)
    img.put_pixel(0, 0, -1)
    img.put_pixel(1, 1, 0xFF000000)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF
    assert img.get_pixel(1, 1) == 0xFF000000


def test_pixel_lands_at_row_offset():
    img = Image(4, 3)
    img.put_pixel(2, 1, 0x00FF99FF)
    offset = 2 * img.size_line + 1 * 4
    stored = int.from_bytes(
        img.data[offset : offset + 4], "little" if img.endian == 0 else "big"
    )
    assert stored == 0x00FF99FF


@pytest.mark.parametrize("y,x", [(-1, 0), (0, -1), (3, 0), (0, 4)])
def test_out_of_bounds_pixel_raises(y, x):
    img = Image(4, 3)
    with pytest.raises(IndexError):
        img.put_pixel(y, x, 1)
    with pytest.raises(IndexError):
        img.get_pixel(y, x)


@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_raises(w, h):
    with pytest.raises(ValueError):
        Image(w, h)


def test_vertical_line_is_inclusive():
    img = Image(3, 10)
    img.draw_vertical_line(1, 2, 6, 0x00FFFF)
    column = [img.get_pixel(y, 1) for y in range(10)]
    assert column == [0, 0] + [0x00FFFF] * 5 + [0, 0, 0]
    assert all(img.get_pixel(y, 0) == 0 for y in range(10))
    assert all(img.get_pixel(y, 2) == 0 for y in range(10))


def test_vertical_line_empty_when_top_below_bottom():
    img = Image(2, 4)
    img.draw_vertical_line(0, 3, 1, 0xFFFFFF)
    assert all(img.get_pixel(y, 0) == 0 for y in range(4))


def test_to_rgb_bytes_channel_order():
    img = Image(2, 1)
    img.put_pixel(0, 0, 0x123456)
    img.put_pixel(0, 1, 0xFF99FF)
    assert img.to_rgb_bytes() == bytes([0x12, 0x34, 0x56, 0xFF, 0x99, 0xFF])


def test_to_rgb_bytes_drops_alpha():
    img = Image(3, 2)
    img.put_pixel(1, 2, 0xFF000000)
    out = img.to_rgb_bytes()
    assert len(out) == 3 * 2 * 3
    assert out == bytes(18)


def test_good_color_identity_for_truecolor():
    assert good_color(0xFF99FF, 24, [16, 8, 8, 8, 0, 8]) == 0xFF99FF
    assert good_color(0x00FFFF, 32, [0] * 6) == 0x00FFFF


def test_good_color_rgb565():
    decrgb = [11, 5, 5, 6, 0, 5]
    assert good_color(0xFFFFFF, 16, decrgb) == 0xFFFF
    assert good_color(0x000000, 16, decrgb) == 0
    assert good_color(0xFF0000, 16, decrgb) == 0xF800