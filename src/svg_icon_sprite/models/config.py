"""Configuration models for the SVG icon sprite compiler.

Defines Pydantic models for source discovery, output locations, layout,
optimizer namespacing rules and logging. Every field has a default so the
compiler can run without any configuration file.
"""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from svg_icon_sprite.constants import (
    CATALOG_FILENAME,
    COLOR_ID_TEMPLATE,
    DEFAULT_COLOR_SUBDIR,
    DEFAULT_ICON_EXTENSION,
    DEFAULT_ICONS_SUBDIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOURCE_DIR,
    ICON_GAP,
    ID_DELIMITER,
    MAX_CONCURRENT_PARSES,
    MIXINS_FILENAME,
    MONO_ID_TEMPLATE,
    MONO_STRIP_ATTRS,
    PREVIEW_FILENAME,
    SETTINGS_FILENAME,
    SHARED_REFERENCE_PREFIX,
    SPRITE_FILENAME,
    SPRITE_URL,
    STYLES_FILENAME,
)


def _normalize_path(path: str | Path) -> Path:
    """Convert a string path to a Path object.

    Internal utility function to avoid circular imports with path_resolver.

    Args:
        path: String or Path object

    Returns:
        A Path object.
    """
    return Path(path) if isinstance(path, str) else path


class SourceConfig(BaseModel):
    """Where icon sources are discovered."""

    source_dir: Path = Path(DEFAULT_SOURCE_DIR)
    color_subdir: str = DEFAULT_COLOR_SUBDIR
    extension: str = DEFAULT_ICON_EXTENSION
    sort_files: bool = False  # False keeps raw directory-listing order

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate the icon extension looks like a file suffix.

        Args:
            v: The extension string.

        Returns:
            The validated extension.

        Raises:
            ValueError: If the extension does not start with a dot.
        """
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("Icon extension must start with '.' (for example '.svg')")
        return v

    @property
    def mono_dir(self) -> Path:
        """Directory holding the monochrome icons."""
        return self.source_dir

    @property
    def color_dir(self) -> Path:
        """Directory holding the colored icons."""
        return self.source_dir / self.color_subdir


class OutputConfig(BaseModel):
    """Where generated artifacts are written."""

    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    icons_subdir: str = DEFAULT_ICONS_SUBDIR
    sprite_filename: str = SPRITE_FILENAME
    catalog_filename: str = CATALOG_FILENAME
    preview_filename: str = PREVIEW_FILENAME
    mixins_filename: str = MIXINS_FILENAME
    styles_filename: str = STYLES_FILENAME
    settings_filename: str = SETTINGS_FILENAME
    sprite_url: str = SPRITE_URL  # How the stylesheets reference the sprite

    @property
    def icons_dir(self) -> Path:
        """Directory receiving the sprite, the catalog and the preview page."""
        return self.output_dir / self.icons_subdir

    @property
    def sprite_path(self) -> Path:
        return self.icons_dir / self.sprite_filename

    @property
    def catalog_path(self) -> Path:
        return self.icons_dir / self.catalog_filename

    @property
    def preview_path(self) -> Path:
        return self.icons_dir / self.preview_filename

    @property
    def mixins_path(self) -> Path:
        return self.output_dir / self.mixins_filename

    @property
    def styles_path(self) -> Path:
        return self.output_dir / self.styles_filename

    @property
    def settings_path(self) -> Path:
        return self.output_dir / self.settings_filename


class LayoutConfig(BaseModel):
    """Sprite tiling configuration."""

    gap: int = ICON_GAP  # Vertical space left below every tile

    @field_validator("gap")
    @classmethod
    def validate_gap(cls, v: int) -> int:
        """Validate the gap between tiles is not negative.

        Args:
            v: The gap in sprite units.

        Returns:
            The validated gap.

        Raises:
            ValueError: If the gap is negative, which would make tiles overlap.
        """
        if v < 0:
            raise ValueError("Layout gap must be zero or positive")
        return v


class OptimizerConfig(BaseModel):
    """Identifier namespacing and paint stripping rules."""

    mono_id_template: str = MONO_ID_TEMPLATE
    color_id_template: str = COLOR_ID_TEMPLATE
    id_delimiter: str = ID_DELIMITER
    shared_reference_prefix: str = SHARED_REFERENCE_PREFIX
    mono_strip_attrs: list[str] = Field(default_factory=lambda: list(MONO_STRIP_ATTRS))

    @field_validator("mono_id_template", "color_id_template")
    @classmethod
    def validate_id_template(cls, v: str) -> str:
        """Validate an id template contains the ``{name}`` placeholder.

        Args:
            v: The id template.

        Returns:
            The validated template.

        Raises:
            ValueError: If the placeholder is missing.
        """
        if "{name}" not in v:
            raise ValueError("Icon id template must contain the '{name}' placeholder")
        return v

    @field_validator("mono_strip_attrs")
    @classmethod
    def validate_strip_rules(cls, v: list[str]) -> list[str]:
        """Validate every removeAttrs rule compiles as a regular expression.

        Args:
            v: Rules in ``element:attribute`` or ``attribute`` form.

        Returns:
            The validated rules.

        Raises:
            ValueError: If a rule part is not a valid regular expression.
        """
        for rule in v:
            for part in rule.rpartition(":")[::2]:
                try:
                    re.compile(part)
                except re.error as e:
                    raise ValueError(f"Invalid attribute rule {rule!r}: {e}") from e
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = None
    format: str = "text"
    max_size_mb: int = 5
    backup_count: int = 3


class AppConfig(BaseModel):
    """Main application configuration."""

    sources: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    max_concurrency: int = MAX_CONCURRENT_PARSES

    @field_validator("max_concurrency")
    @classmethod
    def validate_max_concurrency(cls, v: int) -> int:
        """Validate at least one file can be processed at a time.

        Args:
            v: Maximum number of concurrent parses.

        Returns:
            The validated bound.

        Raises:
            ValueError: If the bound is lower than 1.
        """
        if v < 1:
            raise ValueError("max_concurrency must be at least 1")
        return v

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AppConfig":
        """Load configuration from YAML file.

        An empty file yields the default configuration.

        Args:
            config_path: Path to the YAML configuration file. Can be a string path
                or a Path object.

        Returns:
            An initialized AppConfig object with values from the YAML file.

        Raises:
            FileNotFoundError: If the specified config file doesn't exist.
            yaml.YAMLError: If the YAML file has invalid syntax.
            ValidationError: If the configuration values don't match the expected schema.
        """
        import yaml

        # Use direct import to avoid circular imports
        from svg_icon_sprite.utils.file_utils import read_text

        path = _normalize_path(config_path)

        yaml_content = read_text(path)
        config_data = yaml.safe_load(yaml_content) or {}

        return cls.model_validate(config_data)
