import io
import sys
import unittest
from pathlib import Path

import numpy as np

try:
    from PIL import Image
except Exception:  # pragma: no cover
    Image = None

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "decoder"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "tests"))

from asciipng_core.pipeline import decode_and_render, decode_png, target_height_for
from asciipng_decoder.errors import UnsupportedColorTypeError
from pngfactory import build_test_pattern


def _pillow_png(mode: str, width: int, height: int, **save_kwargs) -> tuple[bytes, "Image.Image"]:
    alpha = mode == "RGBA"
    rows = build_test_pattern("gradient", width, height, alpha=alpha)
    img = Image.new(mode, (width, height))
    img.putdata([px for row in rows for px in row])
    buf = io.BytesIO()
    img.save(buf, format="PNG", **save_kwargs)
    return buf.getvalue(), img


class PillowCrossCheckTests(unittest.TestCase):
    def setUp(self):
        if Image is None:
            self.skipTest("Pillow not installed")

    def test_rgb_matches_pillow(self):
        data, img = _pillow_png("RGB", 37, 23, optimize=True)
        _, image = decode_png(data)
        expected = np.asarray(img.convert("RGBA"), dtype=np.uint8)
        self.assertTrue(np.array_equal(image.data, expected))

    def test_rgba_matches_pillow(self):
        data, img = _pillow_png("RGBA", 31, 17, compress_level=9)
        _, image = decode_png(data)
        self.assertTrue(np.array_equal(image.data, np.asarray(img, dtype=np.uint8)))

    def test_end_to_end_geometry(self):
        data, _ = _pillow_png("RGB", 120, 45)
        art = decode_and_render(data, 50)
        self.assertEqual(art.height, target_height_for(120, 45, 50))
        self.assertTrue(all(len(row) == 50 for row in art.rows))

    def test_grayscale_rejected(self):
        buf = io.BytesIO()
        Image.new("L", (4, 4), 128).save(buf, format="PNG")
        with self.assertRaises(UnsupportedColorTypeError):
            decode_png(buf.getvalue())

    def test_palette_rejected(self):
        buf = io.BytesIO()
        Image.new("P", (4, 4), 3).save(buf, format="PNG")
        with self.assertRaises(UnsupportedColorTypeError):
            decode_png(buf.getvalue())


if __name__ == "__main__":
    unittest.main()
