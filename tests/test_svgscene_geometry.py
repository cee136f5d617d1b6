from __future__ import annotations

import math
import unittest
import xml.etree.ElementTree as ET

from svgscene_core.geometry import (
    GeometryAttribute,
    parse_number,
    parse_points,
    resolve_attribute,
    resolve_attributes,
)

A = GeometryAttribute


class ParseNumberTests(unittest.TestCase):
    def test_parses_numeric_prefix(self) -> None:
        self.assertEqual(parse_number("10"), 10.0)
        self.assertEqual(parse_number("10px"), 10.0)
        self.assertEqual(parse_number(" 3"), 3.0)
        self.assertEqual(parse_number(".5"), 0.5)
        self.assertEqual(parse_number("-2.5e1"), -25.0)

    def test_non_numeric_is_nan(self) -> None:
        self.assertTrue(math.isnan(parse_number("abc")))
        self.assertTrue(math.isnan(parse_number("")))


class ParsePointsTests(unittest.TestCase):
    def test_pairs_are_comma_separated_and_empty_tokens_skipped(self) -> None:
        self.assertEqual(parse_points("0,0 10,5  20,10 "), [(0.0, 0.0), (10.0, 5.0), (20.0, 10.0)])

    def test_missing_coordinate_is_nan(self) -> None:
        ((x, y),) = parse_points("1")
        self.assertEqual(x, 1.0)
        self.assertTrue(math.isnan(y))


class ResolveAttributeTests(unittest.TestCase):
    def test_present_attribute_is_parsed(self) -> None:
        element = ET.Element("circle", {"cx": "4", "cy": "5.5", "r": "2"})
        self.assertEqual(resolve_attributes(element, [A.CX, A.CY, A.R]), [4.0, 5.5, 2.0])

    def test_plain_defaults(self) -> None:
        element = ET.Element("rect")
        self.assertEqual(resolve_attributes(element, [A.X, A.Y, A.WIDTH, A.HEIGHT]), [0.0, 0.0, 100.0, 100.0])
        self.assertEqual(resolve_attribute(element, A.POINTS), [])
        self.assertIsNone(resolve_attribute(element, A.D))

    def test_rx_defaults_from_ry(self) -> None:
        element = ET.Element("ellipse", {"ry": "7"})
        self.assertEqual(resolve_attribute(element, A.RX), 7.0)
        self.assertEqual(resolve_attribute(element, A.RY), 7.0)

    def test_ry_defaults_from_rx(self) -> None:
        element = ET.Element("ellipse", {"rx": "3"})
        self.assertEqual(resolve_attribute(element, A.RY), 3.0)

    def test_both_radii_absent_resolve_to_zero(self) -> None:
        element = ET.Element("ellipse")
        self.assertEqual(resolve_attributes(element, [A.RX, A.RY]), [0.0, 0.0])

    def test_auto_or_garbage_sibling_collapses_to_zero(self) -> None:
        self.assertEqual(resolve_attribute(ET.Element("rect", {"ry": "auto"}), A.RX), 0.0)
        self.assertEqual(resolve_attribute(ET.Element("rect", {"ry": "abc"}), A.RX), 0.0)

    def test_malformed_numeric_degrades_to_nan(self) -> None:
        element = ET.Element("circle", {"cx": "oops"})
        self.assertTrue(math.isnan(resolve_attribute(element, A.CX)))

    def test_malformed_numeric_is_logged_at_debug(self) -> None:
        with self.assertLogs("svgscene_core.geometry", level="DEBUG") as logs:
            resolve_attribute(ET.Element("line", {"x1": "left"}), A.X1)
        self.assertIn("x1", logs.output[0])

    def test_path_data_is_passed_through(self) -> None:
        element = ET.Element("path", {"d": "M0 0 L1 1"})
        self.assertEqual(resolve_attribute(element, A.D), "M0 0 L1 1")


if __name__ == "__main__":
    unittest.main()
