"""YAML configuration and view defaults."""

from pathlib import Path

import yaml

from .layout.alignment import LabelAlignment
from .layout.radial import MAX_RADIUS, RadialViewState

DEFAULTS: dict = {
    "width": 800,
    "height": 600,
    "radius": 0.4,
    "rotation": 0.0,
    "alignment": "leading",
    "labels-angle": 0.0,
    "font-size": 14,
}


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values (empty for an empty file).

    Raises:
        ValueError: If the file does not hold a mapping.
    """
    with open(config_path) as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{config_path}: expected a mapping of settings")
    return config


def parse_alignment(value: str | LabelAlignment) -> LabelAlignment:
    """Parse an alignment name such as "leading"."""
    if isinstance(value, LabelAlignment):
        return value
    try:
        return LabelAlignment(str(value).lower())
    except ValueError as err:
        choices = ", ".join(a.value for a in LabelAlignment)
        raise ValueError(f"Unknown alignment '{value}' (expected one of: {choices})") from err


def view_from_settings(settings: dict) -> RadialViewState:
    """Build the initial ring state from merged settings.

    The radius is clamped to the valid ring range.
    """
    radius = float(settings.get("radius", DEFAULTS["radius"]))
    return RadialViewState(
        rotation=float(settings.get("rotation", DEFAULTS["rotation"])),
        radius=min(max(radius, -MAX_RADIUS), MAX_RADIUS),
        alignment=parse_alignment(settings.get("alignment", DEFAULTS["alignment"])),
    )
