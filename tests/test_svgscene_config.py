from __future__ import annotations

import os
from pathlib import Path
import tempfile
import unittest
from unittest import mock

from svgscene_core.config import DEFAULT_CONFIG, SceneConfig, load_scene_config, validate_scene_config


class SceneConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(DEFAULT_CONFIG, SceneConfig(tint_amount=0.5, color_format="rgb", propagate_tint=False))
        self.assertEqual(validate_scene_config(), DEFAULT_CONFIG)

    def test_overrides_are_merged(self) -> None:
        config = validate_scene_config({"tint_amount": 1, "propagate_tint": True})
        self.assertEqual(config.tint_amount, 1.0)
        self.assertTrue(config.propagate_tint)
        self.assertEqual(config.color_format, "rgb")

    def test_rejects_unknown_key(self) -> None:
        with self.assertRaises(ValueError):
            validate_scene_config({"tint": 0.2})

    def test_rejects_invalid_values(self) -> None:
        for overrides in ({"color_format": "hsl"}, {"tint_amount": "half"}, {"tint_amount": True}, {"propagate_tint": 1}):
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValueError):
                    validate_scene_config(overrides)

    def test_from_env(self) -> None:
        env = {
            "SVGSCENE_TINT_AMOUNT": "0.25",
            "SVGSCENE_COLOR_FORMAT": "hex",
            "SVGSCENE_PROPAGATE_TINT": "1",
        }
        with mock.patch.dict(os.environ, env):
            config = SceneConfig.from_env()
        self.assertEqual(config, SceneConfig(tint_amount=0.25, color_format="hex", propagate_tint=True))

    def test_from_env_without_variables_uses_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(SceneConfig.from_env(), DEFAULT_CONFIG)

    def test_from_env_rejects_bad_number(self) -> None:
        with mock.patch.dict(os.environ, {"SVGSCENE_TINT_AMOUNT": "lots"}):
            with self.assertRaises(ValueError):
                SceneConfig.from_env()

    def test_rejects_non_finite_tint_amount(self) -> None:
        for amount in (float("inf"), float("-inf"), float("nan")):
            with self.subTest(amount=amount):
                with self.assertRaises(ValueError):
                    validate_scene_config({"tint_amount": amount})

    def test_from_env_rejects_non_finite_tint_amount(self) -> None:
        with mock.patch.dict(os.environ, {"SVGSCENE_TINT_AMOUNT": "inf"}):
            with self.assertRaises(ValueError):
                SceneConfig.from_env()

    def test_from_env_accepts_boolean_words(self) -> None:
        cases = {"true": True, "Yes": True, "ON": True, "false": False, "0": False, "off": False}
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                with mock.patch.dict(os.environ, {"SVGSCENE_PROPAGATE_TINT": raw}, clear=True):
                    self.assertIs(SceneConfig.from_env().propagate_tint, expected)

    def test_from_env_rejects_unknown_boolean(self) -> None:
        with mock.patch.dict(os.environ, {"SVGSCENE_PROPAGATE_TINT": "maybe"}, clear=True):
            with self.assertRaises(ValueError):
                SceneConfig.from_env()

    def test_load_scene_config_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scene.toml"
            path.write_text('[scene]\ntint_amount = 0.75\ncolor_format = "hex"\n', encoding="utf-8")
            config = load_scene_config(path)
        self.assertEqual(config.tint_amount, 0.75)
        self.assertEqual(config.color_format, "hex")

    def test_load_scene_config_without_table_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scene.toml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(load_scene_config(path), DEFAULT_CONFIG)

    def test_load_scene_config_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_scene_config("/nonexistent/scene.toml")


if __name__ == "__main__":
    unittest.main()
