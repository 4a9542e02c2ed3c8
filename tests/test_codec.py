import io
import tempfile
import unittest
from pathlib import Path

from PIL import Image as PILImage

from raster_editor.domain.color import Color
from raster_editor.domain.image import Image
from raster_editor.services.codec import decode_image, encode_image, open_image, save_image


class TestCodec(unittest.TestCase):
    def test_decode_normalises_to_rgba(self):
        buf = io.BytesIO()
        PILImage.new("RGB", (3, 2), (10, 20, 30)).save(buf, format="PNG")
        img = decode_image(buf.getvalue())
        self.assertEqual(img.size, (3, 2))
        self.assertEqual(img.get_pixel(2, 1), Color(10, 20, 30, 255))

    def test_png_keeps_alpha(self):
        img = Image.blank(2, 2)
        img.set_pixel(1, 0, Color(1, 2, 3, 100))
        self.assertEqual(decode_image(encode_image(img)), img)

    def test_jpeg_drops_alpha(self):
        img = Image.blank(4, 4)
        data = encode_image(img, format="jpg")
        with PILImage.open(io.BytesIO(data)) as pil:
            self.assertEqual(pil.format, "JPEG")
            self.assertEqual(pil.mode, "RGB")

    def test_open_and_save(self):
        img = Image.blank(5, 4)
        img.set_pixel(4, 3, Color.blue())
        with tempfile.TemporaryDirectory() as tmp:
            path = save_image(img, Path(tmp) / "out.png")
            self.assertEqual(open_image(path), img)
            with self.assertRaises(FileNotFoundError):
                open_image(Path(tmp) / "missing.png")


if __name__ == "__main__":
    unittest.main()
