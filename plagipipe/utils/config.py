"""
Configuration loading utility for PlagiPipe.

This module provides functions to load and validate a YAML pipeline
configuration, falling back to built-in defaults when no file is given.
"""

import yaml
from pathlib import Path
import logging
from pydantic import ValidationError
import sys
from typing import Optional

from .config_models import PipelineConfig

logger = logging.getLogger(__name__)


def default_config() -> dict:
    """Returns the built-in pipeline configuration as a plain dictionary."""
    return PipelineConfig().model_dump()


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Loads and validates a YAML configuration file from the specified path.

    Sections missing from the file take their default values. If the file is
    not found, unreadable, or fails validation, it logs a detailed error and
    terminates the program.

    Args:
        config_path (Optional[str]): The path to the YAML configuration file.
            When None, the built-in defaults are returned.

    Returns:
        dict: A dictionary containing the validated configuration.
    """
    if config_path is None:
        logger.debug("No configuration file given, using defaults.")
        return default_config()

    path = Path(config_path)
    if not path.is_file():
        logger.error(f"Configuration file not found or is not a file: '{path}'")
        sys.exit(1)

    logger.debug(f"Attempting to load and validate configuration from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        validated = PipelineConfig.model_validate(config)

        logger.info(
            f"Successfully loaded and validated configuration from: '{path}'"
        )
        return validated.model_dump()

    except (yaml.YAMLError, IOError) as e:
        logger.error(
            f"Error reading or parsing YAML file '{path}': {e}", exc_info=True
        )
        sys.exit(1)
    except ValidationError as e:
        logger.error(f"Configuration validation failed:\n{e}")
        sys.exit(1)
