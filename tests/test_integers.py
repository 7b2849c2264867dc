import unittest

import numpy as np

from ratio.integers import (
    DEFAULT_DTYPE,
    as_int,
    bounds,
    checked,
    fits,
    infer_dtype,
    promote,
    resolve_dtype,
)


class IntegerDomainTests(unittest.TestCase):
    def test_resolve_dtype(self):
        self.assertEqual(resolve_dtype(None), np.dtype(np.int64))
        self.assertEqual(resolve_dtype(None), DEFAULT_DTYPE)
        self.assertEqual(resolve_dtype(np.int16), np.dtype(np.int16))
        self.assertEqual(resolve_dtype("int32"), np.dtype(np.int32))
        for bad in (np.uint8, np.float32, "not a dtype"):
            with self.assertRaises(TypeError):
                resolve_dtype(bad)

    def test_bounds_and_checks(self):
        int8 = np.dtype(np.int8)
        self.assertEqual(bounds(int8), (-128, 127))
        self.assertTrue(fits(-128, int8))
        self.assertFalse(fits(128, int8))
        self.assertEqual(checked(127, int8), 127)
        with self.assertRaises(OverflowError):
            checked(-129, int8)

    def test_as_int(self):
        self.assertEqual(as_int(np.int8(5), name="n"), 5)
        self.assertIsInstance(as_int(np.int8(5), name="n"), int)
        self.assertEqual(as_int(True, name="n"), 1)
        with self.assertRaises(TypeError):
            as_int(2.0, name="n")

    def test_promotion(self):
        self.assertEqual(promote(np.dtype(np.int8), np.dtype(np.int16)), np.dtype(np.int16))
        self.assertEqual(promote(np.dtype(np.int32), np.dtype(np.int32)), np.dtype(np.int32))
        self.assertEqual(infer_dtype(np.int8(1), np.int32(2)), np.dtype(np.int32))
        self.assertIsNone(infer_dtype(1, 2))
        self.assertIsNone(infer_dtype(np.uint8(1)))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
