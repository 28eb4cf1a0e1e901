"""Config loader for festreceipt."""

from pathlib import Path
from typing import Any

from .model import AppConfig


from pydantic import ValidationError


import logging
import sys

logger = logging.getLogger(__name__)

_PATH_KEYS = {
    "input": ("path",),
    "output": ("path",),
    "receipt": ("logo_path",),
    "fonts": ("regular", "bold", "italic", "bold-italic"),
}


def _anchor_paths(config: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Resolve relative file paths against the config file's directory."""
    for section, keys in _PATH_KEYS.items():
        values = config.get(section)
        if not isinstance(values, dict):
            continue
        for key in keys:
            value = values.get(key)
            if isinstance(value, str) and not Path(value).is_absolute():
                values[key] = str(base_dir / value)
    return config


def load_config(config_file: str | Path) -> AppConfig:
    """Load configuration from a TOML file."""
    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib
    config_path = Path(config_file)
    try:
        with open(config_path, "rb") as f:
            config = tomllib.load(f)
            logger.debug("Configuration loaded successfully.")
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Config: {config}")

            config = _anchor_paths(config, config_path.resolve().parent)
            return AppConfig.model_validate(config)

    except FileNotFoundError:
        logger.critical(f"Configuration file not found: {config_path}")
        raise
    except tomllib.TOMLDecodeError:
        logger.critical("Error decoding TOML file")
        raise
    except ValidationError as e:
        logger.critical("Configuration validation failed.")
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            logger.critical(
                f"Error in field '{loc}': {error['msg']}. Provided input: {error['input']}"
            )
        raise
