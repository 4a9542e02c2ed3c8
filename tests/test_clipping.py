import unittest

from raster_editor.core.errors import OutsideCanvasError
from raster_editor.services.clipping import ClipRegion, clip_region


class TestClipRegion(unittest.TestCase):
    def test_inside_placement_is_full_overlay(self):
        self.assertEqual(clip_region(100, 100, 20, 20, 40, 40), ClipRegion(0, 20, 0, 20))
        self.assertEqual(clip_region(100, 100, 20, 20, 0, 0), ClipRegion(0, 20, 0, 20))
        self.assertEqual(clip_region(100, 100, 20, 20, 80, 80), ClipRegion(0, 20, 0, 20))

    def test_negative_placement_skips_leading_pixels(self):
        self.assertEqual(clip_region(100, 100, 20, 20, -5, -5), ClipRegion(5, 20, 5, 20))

    def test_far_edge_truncates(self):
        r = clip_region(50, 40, 20, 20, 45, 30)
        self.assertEqual(r, ClipRegion(0, 5, 0, 10))
        self.assertEqual((r.width, r.height), (5, 10))

    def test_overlay_larger_than_canvas(self):
        self.assertEqual(clip_region(10, 10, 30, 30, -10, -10), ClipRegion(10, 20, 10, 20))

    def test_single_pixel_overlap(self):
        self.assertEqual(clip_region(10, 10, 5, 5, 9, -4), ClipRegion(0, 1, 4, 5))

    def test_outside_canvas(self):
        for x, y in [(50, 0), (0, 50), (-20, 0), (0, -20), (60, 0)]:
            with self.assertRaises(OutsideCanvasError):
                clip_region(50, 50, 20, 20, x, y)

    def test_bounds_map_to_valid_canvas_pixels(self):
        cw, ch, ow, oh = 13, 7, 6, 9
        for x in range(-6, 14):
            for y in range(-9, 8):
                try:
                    r = clip_region(cw, ch, ow, oh, x, y)
                except OutsideCanvasError:
                    continue
                self.assertTrue(0 <= r.loop_start_x <= r.loop_end_x <= ow)
                self.assertTrue(0 <= r.loop_start_y <= r.loop_end_y <= oh)
                self.assertEqual(x + r.loop_start_x, max(0, x))
                self.assertEqual(x + r.loop_end_x, min(cw, x + ow))
                self.assertEqual(y + r.loop_start_y, max(0, y))
                self.assertEqual(y + r.loop_end_y, min(ch, y + oh))


if __name__ == "__main__":
    unittest.main()
