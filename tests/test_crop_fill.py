import unittest

import numpy as np

from raster_editor.core.errors import InvalidHexError
from raster_editor.domain.color import Color
from raster_editor.domain.image import Image
from raster_editor.services import editor


def gradient(w, h):
    """Every pixel distinct: R=x, G=y, B=x+y, A=255."""
    arr = np.zeros((h, w, 4), dtype=np.uint8)
    ys, xs = np.mgrid[0:h, 0:w]
    arr[..., 0] = xs
    arr[..., 1] = ys
    arr[..., 2] = xs + ys
    arr[..., 3] = 255
    return Image.from_array(arr)


class TestCrop(unittest.TestCase):
    def test_top_left_crop_copies_pixels(self):
        img = gradient(10, 8)
        editor.crop(img, 4, 3, "top-left", 2, 1)
        self.assertEqual(img.size, (4, 3))
        self.assertEqual(len(img.bytes), 4 * 3 * 4)
        self.assertEqual(img.get_pixel(0, 0), Color(2, 1, 3, 255))
        self.assertEqual(img.get_pixel(3, 2), Color(5, 3, 8, 255))

    def test_center_crop(self):
        img = gradient(10, 10)
        editor.crop(img, 4, 4, "center", 0, 0)
        self.assertEqual(img.size, (4, 4))
        self.assertEqual(img.get_pixel(0, 0), Color(3, 3, 6, 255))

    def test_bottom_right_crop(self):
        img = gradient(10, 6)
        editor.crop(img, 3, 2, "bottom-right", 0, 0)
        self.assertEqual(img.get_pixel(2, 1), Color(9, 5, 14, 255))

    def test_negative_start_is_pulled_back_to_origin(self):
        img = gradient(10, 10)
        editor.crop(img, 4, 4, "top-left", -3, -2)
        self.assertEqual(img.size, (4, 4))
        self.assertEqual(img.get_pixel(0, 0), Color(0, 0, 0, 255))

    def test_rectangle_past_the_edge_is_truncated(self):
        img = gradient(10, 10)
        editor.crop(img, 8, 8, "top-left", 5, 6)
        self.assertEqual(img.size, (5, 4))
        self.assertEqual(img.get_pixel(4, 3), Color(9, 9, 18, 255))

    def test_crop_larger_than_image_keeps_everything(self):
        img = gradient(6, 4)
        before = img.copy()
        editor.crop(img, 20, 20, "center", 0, 0)
        self.assertEqual(img, before)

    def test_start_past_far_edge_gives_empty_image(self):
        img = gradient(10, 10)
        editor.crop(img, 4, 4, "top-left", 12, 0)
        self.assertEqual(img.width, 0)
        self.assertEqual(len(img.bytes), 0)

    def test_non_positive_size_gives_empty_image(self):
        cases = [
            (-10, 10, "center", 0, 0),
            (-10, 10, "top-left", 20, 0),
            (10, -3, "bottom-right", 0, 0),
            (0, 0, "top-left", 0, 0),
        ]
        for w, h, anchor, dx, dy in cases:
            img = gradient(100, 100)
            editor.crop(img, w, h, anchor, dx, dy)
            self.assertTrue(img.width == 0 or img.height == 0, (w, h, anchor))
            self.assertEqual(len(img.bytes), 0)

    def test_zero_width_keeps_clamped_height(self):
        img = gradient(10, 10)
        editor.crop(img, 0, 4, "top-left", 0, 8)
        self.assertEqual(img.size, (0, 2))

    def test_recrop_is_idempotent(self):
        img = gradient(20, 15)
        editor.crop(img, 7, 5, "center", 1, -1)
        once = bytes(img.bytes)
        editor.crop(img, 7, 5, "center", 0, 0)
        self.assertEqual(img.size, (7, 5))
        self.assertEqual(bytes(img.bytes), once)


class TestFill(unittest.TestCase):
    def test_every_pixel_equals_color(self):
        img = Image.blank(7, 5)
        color = Color(12, 34, 56, 78)
        editor.fill(img, color)
        for y in range(img.height):
            for x in range(img.width):
                self.assertEqual(img.get_pixel(x, y), color)
        self.assertEqual(img.size, (7, 5))

    def test_fill_with_hex(self):
        img = Image.blank(2, 2)
        editor.fill(img, "#CCCCCC")
        self.assertEqual(img.get_pixel(1, 1), Color(204, 204, 204, 255))
        with self.assertRaises(InvalidHexError):
            editor.fill(img, "grey")

    def test_fill_empty_image(self):
        img = Image.blank(0, 3)
        editor.fill(img, Color.red())
        self.assertEqual(len(img.bytes), 0)


if __name__ == "__main__":
    unittest.main()
