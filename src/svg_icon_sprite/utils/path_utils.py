"""Path utility module for the SVG icon sprite compiler.

Provides centralized path resolution so the command line entry point, the
configuration loader and the pipeline agree on where configuration files are
searched and how relative paths are interpreted.
"""

from pathlib import Path

from svg_icon_sprite.constants import APP_NAME, DEFAULT_CONFIG_FILENAME
from svg_icon_sprite.exceptions import ConfigFileNotFoundError


class PathResolver:
    """Centralized utility for path resolution and management.

    Attributes:
        user_config_dir: User-specific configuration directory
    """

    def __init__(self) -> None:
        """Initialize the path resolver."""
        self.user_config_dir = Path.home() / ".config" / APP_NAME

    def config_search_paths(self, config_filename: str = DEFAULT_CONFIG_FILENAME) -> list[Path]:
        """List the locations searched for a configuration file, in priority order.

        1. Current working directory
        2. User's configuration directory

        Args:
            config_filename: Name of the configuration file

        Returns:
            Candidate configuration file paths.
        """
        return [
            Path.cwd() / config_filename,
            self.user_config_dir / config_filename,
        ]

    def get_config_path(self, config_filename: str = DEFAULT_CONFIG_FILENAME) -> Path | None:
        """Get the path to a configuration file.

        Args:
            config_filename: Name of the configuration file

        Returns:
            Path to the first existing configuration file, or None when no
            configuration file exists and defaults should be used.
        """
        for path in self.config_search_paths(config_filename):
            if path.is_file():
                return path
        return None

    def normalize_path(self, path: str | Path) -> Path:
        """Convert a string path to a Path object.

        Ensures consistent Path object usage throughout the application.

        Args:
            path: String or Path object

        Returns:
            A Path object.
        """
        return Path(path) if isinstance(path, str) else path

    def ensure_dir_exists(self, path: str | Path) -> Path:
        """Ensure a directory exists, creating it if necessary.

        Args:
            path: Directory path

        Returns:
            Path to the directory.
        """
        dir_path = self.normalize_path(path)
        dir_path.mkdir(exist_ok=True, parents=True)
        return dir_path

    def display_path(self, path: str | Path) -> str:
        """Render a path relative to the working directory when possible.

        Args:
            path: Any path

        Returns:
            The path as a string, relative to the current directory if it lies below it.
        """
        normalized = self.normalize_path(path)
        try:
            return str(normalized.resolve().relative_to(Path.cwd().resolve()))
        except ValueError:
            return str(normalized)


# Create a global instance for easy import
path_resolver = PathResolver()


def validate_config_path(config_path: str | Path | None = None) -> Path | None:
    """Validate and resolve the configuration file path.

    An explicitly requested file must exist. Without an explicit request the
    standard locations are searched, and finding nothing is not an error: the
    caller falls back to the built-in defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Resolved Path to the configuration file, or None to use defaults.

    Raises:
        ConfigFileNotFoundError: If an explicitly requested file does not exist.
    """
    if config_path is None:
        return path_resolver.get_config_path()

    resolved_path = path_resolver.normalize_path(config_path)
    if not resolved_path.is_file():
        raise ConfigFileNotFoundError(
            f"Configuration file not found: {resolved_path}",
            {"path": str(resolved_path), "cwd": str(Path.cwd())},
        )

    return resolved_path
