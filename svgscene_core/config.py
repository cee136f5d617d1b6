from __future__ import annotations

from dataclasses import asdict, dataclass
import math
import os
from pathlib import Path
import tomllib
from typing import Any, Mapping


COLOR_FORMATS = ("rgb", "hex")
_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class SceneConfig:
    """Draw-time defaults shared by every node of one scene."""

    tint_amount: float = 0.5
    color_format: str = "rgb"
    propagate_tint: bool = False

    @classmethod
    def from_env(
        cls,
        *,
        tint_amount_env_var: str = "SVGSCENE_TINT_AMOUNT",
        color_format_env_var: str = "SVGSCENE_COLOR_FORMAT",
        propagate_tint_env_var: str = "SVGSCENE_PROPAGATE_TINT",
    ) -> "SceneConfig":
        overrides: dict[str, Any] = {}
        raw_amount = os.getenv(tint_amount_env_var, "").strip()
        if raw_amount:
            try:
                overrides["tint_amount"] = float(raw_amount)
            except ValueError as exc:
                raise ValueError(f"{tint_amount_env_var} must be a number, got {raw_amount!r}") from exc
        raw_format = os.getenv(color_format_env_var, "").strip()
        if raw_format:
            overrides["color_format"] = raw_format
        raw_propagate = os.getenv(propagate_tint_env_var, "").strip()
        if raw_propagate:
            token = raw_propagate.lower()
            if token in _TRUE_TOKENS:
                overrides["propagate_tint"] = True
            elif token in _FALSE_TOKENS:
                overrides["propagate_tint"] = False
            else:
                raise ValueError(f"{propagate_tint_env_var} must be a boolean, got {raw_propagate!r}")
        return validate_scene_config(overrides)


DEFAULT_CONFIG = SceneConfig()


def validate_scene_config(overrides: Mapping[str, Any] | None = None) -> SceneConfig:
    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown scene config key: {key}")
            raw[key] = value

    amount = raw["tint_amount"]
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValueError("`tint_amount` must be a number")
    if not math.isfinite(float(amount)):
        raise ValueError("`tint_amount` must be finite")

    if raw["color_format"] not in COLOR_FORMATS:
        raise ValueError(f"`color_format` must be one of {', '.join(COLOR_FORMATS)}")

    if not isinstance(raw["propagate_tint"], bool):
        raise ValueError("`propagate_tint` must be a boolean")

    return SceneConfig(
        tint_amount=float(amount),
        color_format=str(raw["color_format"]),
        propagate_tint=bool(raw["propagate_tint"]),
    )


def load_scene_config(path: str | Path) -> SceneConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"scene config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    section = raw.get("scene", {})
    if not isinstance(section, dict):
        raise ValueError("`scene` must be a table")
    return validate_scene_config(section)
