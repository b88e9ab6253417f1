"""Configuration module for paragraph-wrap."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from wrapping.wrap_config import WrapConfig


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default.yaml'


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. Uses default.yaml if not specified.

    Returns:
        Dictionary containing configuration values.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the config file is invalid YAML.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.debug(f"Loading configuration from {path}")
    with open(path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}


def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary.
        key_path: Dot-separated path to the value (e.g., 'wrap.width').
        default: Default value if key is not found.

    Returns:
        The configuration value or default.
    """
    value = config
    for key in key_path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def load_wrap_config(config_path: Optional[str] = None, **overrides: Any) -> WrapConfig:
    """Build a WrapConfig from the 'wrap' section of a config file.

    Overrides set to None are ignored, so unset command-line options
    leave the file's values in place.

    Args:
        config_path: Path to config file. Uses default.yaml if not specified.
        **overrides: WrapConfig fields taking precedence over the file.

    Returns:
        Validated WrapConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If the config file is invalid YAML.
        InvalidConfigurationError: If the resulting options are invalid.
    """
    return build_wrap_config(load_config(config_path), **overrides)


def build_wrap_config(config: Dict[str, Any], **overrides: Any) -> WrapConfig:
    """Build a WrapConfig from an already loaded configuration dictionary.

    Args:
        config: Configuration dictionary as returned by load_config().
        **overrides: WrapConfig fields taking precedence; None is ignored.

    Returns:
        Validated WrapConfig.

    Raises:
        InvalidConfigurationError: If the resulting options are invalid.
    """
    section = get_config_value(config, 'wrap', {}) or {}
    options = dict(section)
    options.update({k: v for k, v in overrides.items() if v is not None})
    return WrapConfig.from_dict(options)


__all__ = [
    'load_config',
    'get_config_value',
    'load_wrap_config',
    'build_wrap_config',
    'DEFAULT_CONFIG_PATH',
]
