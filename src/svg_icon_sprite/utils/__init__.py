"""Module initialization."""

from svg_icon_sprite.utils.path_utils import path_resolver, validate_config_path

__all__ = [
    "path_resolver",
    "validate_config_path",
]
