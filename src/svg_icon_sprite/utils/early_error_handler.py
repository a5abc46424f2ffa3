"""Early error handler for startup failures before logging is configured.

A missing or invalid configuration file is detected before the logging
system exists, so the report goes straight to stderr: one headline with the
error type, then the error details one per line.
"""

import sys
from datetime import datetime
from typing import Any

from svg_icon_sprite.exceptions import IconSpriteError


def format_startup_error(
    error_type: str, message: str, details: dict[str, Any] | None = None
) -> str:
    """Render a startup error report.

    Args:
        error_type: Type of error (e.g., "CONFIG_ERROR", "LOGGING_FILE_ERROR")
        message: Main error message
        details: Optional dictionary of additional error details

    Returns:
        The report text, details in key order.
    """
    lines = [f"[{datetime.now().isoformat()}] {error_type}: {message}"]
    if details:
        lines.append("Details:")
        lines.extend(f"  {key}: {details[key]}" for key in sorted(details))
    return "\n" + "\n".join(lines) + "\n"


def handle_startup_error(
    error_type: str, message: str, details: dict[str, Any] | None = None
) -> None:
    """Write a startup error report to stderr."""
    sys.stderr.write(format_startup_error(error_type, message, details))
    sys.stderr.flush()


def report_startup_exception(error_type: str, error: IconSpriteError) -> None:
    """Write the report of a sprite compiler exception raised during startup.

    Args:
        error_type: Type of error shown in the headline
        error: Exception carrying the message and details
    """
    handle_startup_error(error_type, error.message, error.details)


def handle_keyboard_interrupt() -> None:
    """Handle keyboard interrupt gracefully."""
    sys.stderr.write("\n\nBuild interrupted by user (Ctrl+C)\n")
    sys.stderr.flush()
