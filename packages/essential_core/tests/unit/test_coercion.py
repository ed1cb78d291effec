"""Unit tests for the shared scalar coercion routine."""
from __future__ import annotations

import math
import unittest
from decimal import Decimal

from essential_core.database.coercion import ScalarType, coerce
from essential_core.errors import ScalarTypeError


class ScalarTypeResolveTests(unittest.TestCase):
    def test_builtins_map_to_scalar_types(self) -> None:
        self.assertIs(ScalarType.resolve(str), ScalarType.STRING)
        self.assertIs(ScalarType.resolve(int), ScalarType.INT64)
        self.assertIs(ScalarType.resolve(float), ScalarType.FLOAT64)
        self.assertIs(ScalarType.resolve(bool), ScalarType.BOOLEAN)

    def test_names_are_case_insensitive(self) -> None:
        self.assertIs(ScalarType.resolve("INT32"), ScalarType.INT32)
        self.assertIs(ScalarType.resolve(" float32 "), ScalarType.FLOAT32)

    def test_unsupported_targets_raise(self) -> None:
        for target in (bytes, list, "decimal", 42, None):
            with self.subTest(target=target):
                with self.assertRaises(ScalarTypeError):
                    ScalarType.resolve(target)

    def test_unsupported_target_raises_even_for_none(self) -> None:
        with self.assertRaises(ScalarTypeError):
            coerce(None, dict)


class CoerceTests(unittest.TestCase):
    def test_none_is_no_value_for_every_type(self) -> None:
        for scalar_type in ScalarType:
            with self.subTest(scalar_type=scalar_type):
                self.assertIsNone(coerce(None, scalar_type))

    def test_string_uses_textual_representation(self) -> None:
        self.assertEqual(coerce(42, ScalarType.STRING), "42")
        self.assertEqual(coerce(Decimal("1.50"), ScalarType.STRING), "1.50")
        self.assertEqual(coerce(b"home", ScalarType.STRING), "home")
        self.assertEqual(coerce(memoryview(b"spawn"), str), "spawn")

    def test_string_rejects_undecodable_bytes(self) -> None:
        with self.assertRaises(ScalarTypeError):
            coerce(b"\xff\xfe", ScalarType.STRING)

    def test_int_truncates_numeric_values(self) -> None:
        self.assertEqual(coerce(3.9, ScalarType.INT32), 3)
        self.assertEqual(coerce(-3.9, ScalarType.INT32), -3)
        self.assertEqual(coerce(Decimal("7.99"), ScalarType.INT64), 7)
        self.assertEqual(coerce(True, ScalarType.INT32), 1)

    def test_int32_wraps_wide_numeric_values(self) -> None:
        self.assertEqual(coerce(2 ** 31, ScalarType.INT32), -(2 ** 31))
        self.assertEqual(coerce(2 ** 32 + 5, ScalarType.INT32), 5)
        self.assertEqual(coerce(2 ** 31, ScalarType.INT64), 2 ** 31)

    def test_int_parses_text(self) -> None:
        self.assertEqual(coerce("42", ScalarType.INT64), 42)
        self.assertEqual(coerce(" -17 ", ScalarType.INT32), -17)
        self.assertEqual(coerce(b"9", ScalarType.INT32), 9)

    def test_int_rejects_non_integer_text(self) -> None:
        for text in ("3.14", "abc", "", "1_000", "0x10"):
            with self.subTest(text=text):
                with self.assertRaises(ScalarTypeError):
                    coerce(text, ScalarType.INT32)

    def test_int32_rejects_out_of_range_text(self) -> None:
        with self.assertRaises(ScalarTypeError):
            coerce(str(2 ** 31), ScalarType.INT32)
        self.assertEqual(coerce(str(2 ** 31), ScalarType.INT64), 2 ** 31)

    def test_only_ascii_digits_parse(self) -> None:
        for text in ("٣", "١٢", "７"):
            with self.subTest(text=text):
                with self.assertRaises(ScalarTypeError):
                    coerce(text, ScalarType.INT64)
        for text in ("٣.٥", "٣e2"):
            with self.subTest(text=text):
                with self.assertRaises(ScalarTypeError):
                    coerce(text, ScalarType.FLOAT64)

    def test_int_rejects_non_finite_floats(self) -> None:
        with self.assertRaises(ScalarTypeError):
            coerce(math.inf, ScalarType.INT64)
        with self.assertRaises(ScalarTypeError):
            coerce(math.nan, ScalarType.INT32)

    def test_float_converts_numbers_and_text(self) -> None:
        self.assertEqual(coerce(2, ScalarType.FLOAT64), 2.0)
        self.assertEqual(coerce("3.25", ScalarType.FLOAT64), 3.25)
        self.assertEqual(coerce("1e3", float), 1000.0)
        self.assertEqual(coerce(Decimal("0.5"), ScalarType.FLOAT32), 0.5)
        self.assertTrue(math.isinf(coerce("Infinity", ScalarType.FLOAT64)))

    def test_float32_rounds_to_single_precision(self) -> None:
        value = coerce(0.1, ScalarType.FLOAT32)
        self.assertNotEqual(value, 0.1)
        self.assertAlmostEqual(value, 0.1, places=6)
        self.assertEqual(coerce(1e300, ScalarType.FLOAT32), math.inf)

    def test_float_rejects_invalid_text(self) -> None:
        for text in ("abc", "1.2.3", "", "1_0"):
            with self.subTest(text=text):
                with self.assertRaises(ScalarTypeError):
                    coerce(text, ScalarType.FLOAT64)

    def test_boolean_passes_through_bool(self) -> None:
        self.assertIs(coerce(True, ScalarType.BOOLEAN), True)
        self.assertIs(coerce(False, bool), False)

    def test_boolean_accepts_one_zero_true_false(self) -> None:
        self.assertIs(coerce("true", ScalarType.BOOLEAN), True)
        self.assertIs(coerce(" TRUE ", ScalarType.BOOLEAN), True)
        self.assertIs(coerce("1", ScalarType.BOOLEAN), True)
        self.assertIs(coerce(1, ScalarType.BOOLEAN), True)
        self.assertIs(coerce("0", ScalarType.BOOLEAN), False)
        self.assertIs(coerce("False", ScalarType.BOOLEAN), False)
        self.assertIs(coerce(0, ScalarType.BOOLEAN), False)

    def test_boolean_rejects_other_text(self) -> None:
        for raw in ("yes", "no", "2", "1.0", ""):
            with self.subTest(raw=raw):
                with self.assertRaises(ScalarTypeError):
                    coerce(raw, ScalarType.BOOLEAN)

    def test_numeric_values_survive_text_round_trip(self) -> None:
        cases = [
            (123456789, ScalarType.INT32),
            (-(2 ** 63), ScalarType.INT64),
            (2.718281828459045, ScalarType.FLOAT64),
            (coerce(1.1, ScalarType.FLOAT32), ScalarType.FLOAT32),
        ]
        for value, scalar_type in cases:
            with self.subTest(value=value, scalar_type=scalar_type):
                text = coerce(value, ScalarType.STRING)
                self.assertEqual(coerce(text, scalar_type), value)


if __name__ == "__main__":
    unittest.main()
