"""Command line entry point for the SVG icon sprite compiler.

Running ``svg-icon-sprite`` with no arguments compiles ``icons-source/``
(and ``icons-source/color/``) into ``dist/``. An optional ``--config``
points at a YAML file overriding the defaults.
"""

import argparse
import asyncio
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from svg_icon_sprite.constants import (
    DEFAULT_CONFIG_FILENAME,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
)
from svg_icon_sprite.exceptions import (
    ConfigurationError,
    IconSpriteError,
    InvalidConfigError,
)
from svg_icon_sprite.models.config import AppConfig
from svg_icon_sprite.pipeline import SpritePipeline
from svg_icon_sprite.utils.early_error_handler import (
    handle_keyboard_interrupt,
    report_startup_exception,
)
from svg_icon_sprite.utils.logging import setup_logging
from svg_icon_sprite.utils.path_utils import validate_config_path


def load_config(config_path: Path | None) -> AppConfig:
    """Load the configuration file, or the defaults when there is none.

    Args:
        config_path: YAML configuration file, or None for defaults.

    Returns:
        The application configuration.

    Raises:
        InvalidConfigError: If the file cannot be read, parsed or validated.
    """
    if config_path is None:
        return AppConfig()

    try:
        return AppConfig.from_yaml(config_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise InvalidConfigError(
            f"Invalid configuration file {config_path}",
            {"path": str(config_path), "error": str(e)},
        ) from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the sprite compiler.

    Args:
        argv: Command line arguments; ``sys.argv`` when None.

    Returns:
        Process exit status: 0 on success (also when there are no icons),
        1 when the build fails, 130 when interrupted.
    """
    parser = argparse.ArgumentParser(
        description="Compile a directory of SVG icons into one sprite plus catalog and styles"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(validate_config_path(args.config))
    except ConfigurationError as e:
        report_startup_exception("CONFIG_ERROR", e)
        return EXIT_FAILURE

    setup_logging(config.logging, "svg_icon_sprite")
    logger = logging.getLogger(__name__)

    try:
        asyncio.run(SpritePipeline(config).run())
    except IconSpriteError as e:
        logger.error(f"Icons files generation failed: {e}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        handle_keyboard_interrupt()
        return EXIT_INTERRUPTED

    return EXIT_SUCCESS
