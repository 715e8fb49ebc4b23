"""Layout settings and optional JSON overrides"""

import os
import json
import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from constants import (
    LAYOUT_MARGIN, LAYOUT_SPACING,
    LAYOUT_RIGHT_PADDING, LAYOUT_BOTTOM_PADDING,
    DEFAULT_CONTAINER_NAME, DEFAULT_CONTAINER_WIDTH, DEFAULT_CONTAINER_HEIGHT,
    CONFIG_FILE_NAME,
)
from utils.logger import loggerRaise

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutSettings:
    """Numbers used by the grid layout and new container creation

    Defaults reproduce the plugin's fixed layout exactly.
    """
    margin: float = LAYOUT_MARGIN
    spacing: float = LAYOUT_SPACING
    right_padding: float = LAYOUT_RIGHT_PADDING
    bottom_padding: float = LAYOUT_BOTTOM_PADDING
    container_name: str = DEFAULT_CONTAINER_NAME
    container_width: float = DEFAULT_CONTAINER_WIDTH
    container_height: float = DEFAULT_CONTAINER_HEIGHT


DEFAULT_SETTINGS = LayoutSettings()


def default_config_path(config_dir: Optional[str] = None) -> str:
    """Path of the settings file inside config_dir (user home by default)"""
    if config_dir is None:
        config_dir = os.path.join(os.path.expanduser('~'), '.sort_background_colors')
    return os.path.join(config_dir, CONFIG_FILE_NAME)


def load_settings(config_file: Optional[str] = None) -> LayoutSettings:
    """Load layout settings, falling back to defaults

    A missing file yields the defaults. Keys that are not settings are
    ignored with a warning. Numeric settings accept numbers or numeric
    strings and are stored as floats; anything else is reported through
    loggerRaise.

    Args:
        config_file: Path to JSON file, default_config_path() if None

    Returns:
        LayoutSettings with overrides applied
    """
    if config_file is None:
        config_file = default_config_path()

    if not os.path.exists(config_file):
        return DEFAULT_SETTINGS

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Expected a JSON object in {config_file}")
    except (OSError, ValueError) as e:
        loggerRaise(e, "Error loading layout settings")

    known = {f.name for f in fields(LayoutSettings)}
    overrides = {}
    for key, value in config.items():
        if key not in known:
            _logger.warning(f"Ignoring unknown layout setting: {key}")
            continue
        try:
            if key == 'container_name':
                if not isinstance(value, str):
                    raise TypeError(f"Layout setting {key} must be a string, got {value!r}")
                overrides[key] = value
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                    raise TypeError(f"Layout setting {key} must be a number, got {value!r}")
                overrides[key] = float(value)
        except (TypeError, ValueError) as e:
            loggerRaise(e, f"Invalid layout setting: {key}")

    settings = replace(DEFAULT_SETTINGS, **overrides)
    _logger.debug(f"Loaded layout settings from {config_file}: {settings}")
    return settings
