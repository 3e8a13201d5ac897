import os
import json
import logging
from dataclasses import dataclass, replace

from .exceptions import ConfigError

logger = logging.getLogger("FileSelector.Config")

SETTINGS_KEYS = {
    "open_button_text": "open",
    "save_button_text": "save",
    "close_button_text": "close",
}


@dataclass(frozen=True)
class Labels:
    """Button text shown by the selector. Has no effect on navigation."""

    open: str = "Open"
    save: str = "Save"
    close: str = "Close"


_default_labels = Labels()


def get_default_labels() -> Labels:
    return _default_labels


def set_default_labels(**overrides) -> Labels:
    """Override the process-wide labels used by selectors created without their own."""
    global _default_labels
    for key, value in overrides.items():
        if not isinstance(value, str):
            raise ConfigError(f"Label '{key}' must be a string, got {type(value).__name__}")
    try:
        _default_labels = replace(_default_labels, **overrides)
    except TypeError as e:
        raise ConfigError(f"Unknown label: {e}") from e
    return _default_labels


def reset_default_labels() -> Labels:
    global _default_labels
    _default_labels = Labels()
    return _default_labels


def load_labels(config_file, base=None) -> Labels:
    """
    Read button labels from a JSON settings file.
    Missing keys fall back to `base` (or the process-wide defaults).
    """
    base = base or get_default_labels()
    path = os.path.abspath(config_file)

    if not os.path.exists(path):
        logger.warning(f"Settings file not found at {path}. Using default labels.")
        return base

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse settings file: {e}")
        raise ConfigError(f"Invalid JSON in settings file: {path}") from e
    except OSError as e:
        logger.error(f"Failed to load settings: {e}")
        raise ConfigError(f"Could not load settings from {path}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file must contain a JSON object: {path}")

    overrides = {}
    for key, field in SETTINGS_KEYS.items():
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string in {path}")
        overrides[field] = value

    logger.debug(f"Loaded labels from {path}: {overrides}")
    return replace(base, **overrides)


def setup_logging(debug=False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[FileSelector] %(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    root_logger = logging.getLogger("FileSelector")
    if debug:
        root_logger.setLevel(logging.DEBUG)
        root_logger.debug("Debug mode enabled.")
    return root_logger
