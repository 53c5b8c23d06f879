import pytest

from raycub.framebuffer import Image


def test_new_image_is_black():
    image = Image(3, 2)
    assert len(image.data) == 6
    assert all(pixel == 0 for pixel in image.data)


def test_put_then_read_round_trip():
    image = Image(4, 4)
    image.put_pixel(2, 3, 0xABCDEF)
    assert image.pixel(2, 3) == 0xABCDEF
    assert image.pixel(3, 2) == 0


def test_out_of_bounds_put_is_ignored():
    image = Image(2, 2)
    for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
        image.put_pixel(x, y, 0xFFFFFF)
    assert image.data == [0, 0, 0, 0]


def test_reading_outside_raises():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_given_data_is_used_row_by_row():
    image = Image(2, 2, [1, 2, 3, 4])
    assert image.pixel(1, 0) == 2
    assert image.pixel(0, 1) == 3


def test_wrong_data_length_rejected():
    with pytest.raises(ValueError):
        Image(2, 2, [1, 2, 3])


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)