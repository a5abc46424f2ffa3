"""Custom exception hierarchy for the SVG icon sprite compiler.

This module defines domain-specific exceptions so that every fatal condition
of a build carries a clear message and the context (file path, destination)
needed to act on it.

Exception Hierarchy:
    IconSpriteError (Base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── ConfigFileNotFoundError
    ├── IconSourceError
    │   ├── OptimizerError
    │   ├── MissingViewBoxError
    │   ├── InvalidGeometryError
    │   └── DuplicateIconIdError
    └── ArtifactError
        ├── OutputResetError
        └── ArtifactWriteError
"""

from typing import Any


# Base Exception
class IconSpriteError(Exception):
    """Base exception for all sprite compiler errors.

    This is the root exception that all custom exceptions inherit from,
    allowing the command line entry point to turn any build failure into a
    non-success exit status.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(IconSpriteError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration contains invalid values.

    Example:
        raise InvalidConfigError(
            "Invalid configuration file",
            {"path": "icon-sprite.yaml", "error": "layout.gap: must be >= 0"}
        )
    """
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when an explicitly requested configuration file cannot be found.

    Example:
        raise ConfigFileNotFoundError(
            "Configuration file not found",
            {"path": "/work/icon-sprite.yaml", "cwd": "/work"}
        )
    """
    pass


# Icon source exceptions
class IconSourceError(IconSpriteError):
    """Base exception for errors caused by one icon source file.

    The ``path`` entry of ``details`` names the offending file, or the
    ``directory`` entry an unreadable source directory.
    """
    pass


class OptimizerError(IconSourceError):
    """Raised when the markup of an icon cannot be optimized.

    Example:
        raise OptimizerError(
            "Failed to optimize icon markup",
            {"path": "icons-source/arrow.svg", "error": "mismatched tag: line 3"}
        )
    """
    pass


class MissingViewBoxError(IconSourceError):
    """Raised when an optimized icon has no viewBox on its root element.

    Example:
        raise MissingViewBoxError(
            "SVG viewBox not found",
            {"path": "icons-source/arrow.svg"}
        )
    """
    pass


class InvalidGeometryError(IconSourceError):
    """Raised when the viewBox of an icon cannot be turned into a usable size.

    Example:
        raise InvalidGeometryError(
            "Invalid viewBox geometry",
            {"path": "icons-source/arrow.svg", "view_box": "0 0 -4 24"}
        )
    """
    pass


class DuplicateIconIdError(IconSourceError):
    """Raised when two icons normalize to the same identifier.

    Example:
        raise DuplicateIconIdError(
            "Duplicate icon id",
            {"id": "icon-arrow-up", "path": "arrow_up.svg", "conflicts_with": "arrow up.svg"}
        )
    """
    pass


# Artifact exceptions
class ArtifactError(IconSpriteError):
    """Base exception for errors touching the output area."""
    pass


class OutputResetError(ArtifactError):
    """Raised when the output area cannot be cleared and recreated.

    Example:
        raise OutputResetError(
            "Failed to reset output directory",
            {"destination": "dist", "error": "Permission denied"}
        )
    """
    pass


class ArtifactWriteError(ArtifactError):
    """Raised when a generated artifact cannot be written.

    Example:
        raise ArtifactWriteError(
            "Error generating dist/icons/icons.svg",
            {"destination": "dist/icons/icons.svg", "error": "No space left on device"}
        )
    """
    pass


# Utility function for exception chaining
def chain_exception(new_exception: IconSpriteError, cause: Exception) -> IconSpriteError:
    """Chain a new exception with its underlying cause.

    Args:
        new_exception: The new domain-specific exception to raise
        cause: The underlying exception that caused this error

    Returns:
        The new exception with cause properly chained

    Example:
        try:
            content = file_utils.read_text(path)
        except OSError as e:
            raise chain_exception(
                OptimizerError("Failed to read icon", {"path": str(path)}),
                e
            )
    """
    new_exception.__cause__ = cause
    return new_exception
