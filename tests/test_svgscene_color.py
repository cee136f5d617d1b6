from __future__ import annotations

import unittest

from svgscene_core.color import Color, blend, color_to_hex, color_to_rgb, is_hex_color, parse_color
from svgscene_core.errors import FormatError


class ColorModelTests(unittest.TestCase):
    def test_parse_color_splits_hex_channels(self) -> None:
        self.assertEqual(parse_color("#FF0000"), Color(255, 0, 0))
        self.assertEqual(parse_color("#0a1B2c"), Color(10, 27, 44))

    def test_parse_color_rejects_non_strict_forms(self) -> None:
        for text in ("#FFF", "FF0000", "#GG0000", "#FF00001", "rgb(1, 2, 3)", "red", ""):
            with self.subTest(text=text):
                with self.assertRaises(FormatError):
                    parse_color(text)

    def test_format_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            parse_color("#12")

    def test_is_hex_color(self) -> None:
        self.assertTrue(is_hex_color("#abcdef"))
        self.assertFalse(is_hex_color(None))
        self.assertFalse(is_hex_color("none"))

    def test_hex_round_trip(self) -> None:
        for color in (Color(0, 0, 0), Color(255, 255, 255), Color(1, 128, 254), Color(16, 15, 171)):
            with self.subTest(color=color):
                self.assertEqual(parse_color(color_to_hex(color)), color)

    def test_color_to_hex_rounds_half_up_and_pads(self) -> None:
        self.assertEqual(color_to_hex(Color(127.5, 0, 127.5)), "#800080")
        self.assertEqual(color_to_hex(Color(1.2, 10, 255)), "#010aff")

    def test_color_to_rgb_uses_same_rounding(self) -> None:
        self.assertEqual(color_to_rgb(Color(127.5, 0, 127.5)), "rgb(128, 0, 128)")

    def test_blend_endpoints(self) -> None:
        a = Color(10, 20, 30)
        b = Color(200, 100, 0)
        self.assertEqual(blend(a, b, 1), a)
        self.assertEqual(blend(a, b, 0), b)

    def test_blend_midpoint_of_red_and_blue(self) -> None:
        self.assertEqual(blend(Color(255, 0, 0), Color(0, 0, 255), 0.5), Color(127.5, 0.0, 127.5))

    def test_blend_does_not_clamp(self) -> None:
        self.assertEqual(blend(Color(200, 0, 0), Color(0, 0, 0), 2.0).r, 400.0)


if __name__ == "__main__":
    unittest.main()
