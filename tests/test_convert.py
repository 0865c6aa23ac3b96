from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor

import cv2
import numpy as np

from laserdot.api.errors import DimensionMismatchError
from laserdot.render.convert import gray_to_rgba, rgba_to_bgr, row_ranges


class RowRangesTest(unittest.TestCase):
    def test_ranges_cover_rows_once(self) -> None:
        for height, parts in [(600, 4), (7, 3), (5, 8), (1, 1)]:
            ranges = row_ranges(height, parts)
            rows = [r for (a, b) in ranges for r in range(a, b)]
            self.assertEqual(rows, list(range(height)))
            self.assertLessEqual(len(ranges), min(parts, height))


class ConvertTest(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(7)
        self.rgba = rng.integers(0, 256, size=(60, 80, 4), dtype=np.uint8)

    def test_rgba_to_bgr_matches_opencv(self) -> None:
        expected = cv2.cvtColor(self.rgba, cv2.COLOR_RGBA2BGR)
        for workers in (1, 3, 16):
            got = rgba_to_bgr(self.rgba.reshape(-1), 80, 60, workers=workers)
            self.assertTrue(np.array_equal(got, expected), workers)

    def test_shared_pool_matches_private_pool(self) -> None:
        expected = cv2.cvtColor(self.rgba, cv2.COLOR_RGBA2BGR)
        with ThreadPoolExecutor(max_workers=2) as pool:
            for _ in range(3):
                got = rgba_to_bgr(self.rgba, 80, 60, workers=4, pool=pool)
                self.assertTrue(np.array_equal(got, expected))
                rgba = gray_to_rgba(self.rgba[:, :, 0].copy(), workers=4, pool=pool)
                self.assertTrue(np.array_equal(rgba[:, :, 2], self.rgba[:, :, 0]))

    def test_rgba_to_bgr_into_out(self) -> None:
        out = np.zeros((60, 80, 3), dtype=np.uint8)
        res = rgba_to_bgr(self.rgba, 80, 60, out=out)
        self.assertIs(res, out)
        self.assertEqual(out[5, 6].tolist(), self.rgba[5, 6, 2::-1].tolist())

    def test_rgba_size_mismatch(self) -> None:
        with self.assertRaises(DimensionMismatchError):
            rgba_to_bgr(self.rgba, 800, 600)
        with self.assertRaises(DimensionMismatchError):
            rgba_to_bgr(self.rgba, 80, 60, out=np.zeros((10, 10, 3), dtype=np.uint8))
        with self.assertRaises(DimensionMismatchError):
            rgba_to_bgr(self.rgba.astype(np.float32), 80, 60)

    def test_gray_to_rgba(self) -> None:
        plane = self.rgba[:, :, 1].copy()
        out = gray_to_rgba(plane, workers=4)
        self.assertEqual(out.shape, (60, 80, 4))
        for c in range(3):
            self.assertTrue(np.array_equal(out[:, :, c], plane))
        self.assertFalse(out[:, :, 3].any())
        self.assertTrue((gray_to_rgba(plane, alpha=255)[:, :, 3] == 255).all())

    def test_gray_to_rgba_rejects_color(self) -> None:
        with self.assertRaises(DimensionMismatchError):
            gray_to_rgba(self.rgba)
        with self.assertRaises(DimensionMismatchError):
            gray_to_rgba(self.rgba[:, :, 0].copy(), out=np.zeros((60, 80, 3), dtype=np.uint8))


if __name__ == "__main__":
    unittest.main()
