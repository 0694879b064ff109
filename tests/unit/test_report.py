import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "decoder"))
sys.path.insert(0, str(ROOT / "tests"))

from asciipng_decoder.errors import InvalidSignatureError
from asciipng_decoder.report import inspect_png
from pngfactory import SIGNATURE, chunk, encode_png, ihdr


class ChunkReportTests(unittest.TestCase):
    def test_well_formed_file(self):
        data = encode_png(4, 4, [bytes(12)] * 4, idat_parts=2)
        report = inspect_png(data, strict=True)
        self.assertEqual(report.chunk_counts["IHDR"], 1)
        self.assertGreaterEqual(report.chunk_counts["IDAT"], 1)
        self.assertGreater(report.idat_bytes, 0)
        self.assertEqual(report.errors, [])
        self.assertEqual(report.crc_mismatches, [])
        self.assertEqual(report.header.width, 4)

    def test_layout_errors(self):
        data = SIGNATURE + chunk("tEXt", b"a\x00b") + ihdr(2, 2)
        report = inspect_png(data, strict=True)
        self.assertIn("ihdr_not_first", report.errors)
        self.assertIn("missing_idat", report.errors)
        self.assertIn("missing_iend", report.errors)

    def test_non_strict_skips_layout_checks(self):
        report = inspect_png(SIGNATURE + chunk("IEND", b""), strict=False)
        self.assertEqual(report.errors, [])
        self.assertIsNotNone(report.header_error)

    def test_crc_mismatch_is_reported_not_raised(self):
        data = SIGNATURE + ihdr(1, 1) + chunk("IEND", b"", crc=1)
        report = inspect_png(data)
        self.assertEqual(report.crc_mismatches, ["IEND"])
        self.assertFalse(report.entries[-1].crc_ok)

    def test_signature_failure_propagates(self):
        with self.assertRaises(InvalidSignatureError):
            inspect_png(b"\x00" * 16)


if __name__ == "__main__":
    unittest.main()
