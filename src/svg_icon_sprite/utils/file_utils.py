"""File system abstraction for the SVG icon sprite compiler.

Provides a consistent interface for the file system operations the pipeline
performs: enumerating icon sources, reading them, resetting the output area
and writing generated artifacts. Works with path_utils.py for path handling.
"""

import shutil
from pathlib import Path

from svg_icon_sprite.utils.path_utils import path_resolver

# Type aliases for clarity and documentation
PathLike = str | Path


def read_text(file_path: PathLike) -> str:
    """Read text content from a file.

    Args:
        file_path: Path to the file (string or Path object)

    Returns:
        The text content of the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read due to permissions
        UnicodeDecodeError: If the file content cannot be decoded as text
    """
    normalized_path = path_resolver.normalize_path(file_path)
    with open(normalized_path, encoding="utf-8") as f:
        return f.read()


def write_text(file_path: PathLike, content: str, make_dirs: bool = True) -> None:
    """Write text content to a file.

    Args:
        file_path: Path to the file (string or Path object)
        content: Text content to write
        make_dirs: Whether to create parent directories if they don't exist

    Raises:
        FileNotFoundError: If the parent directory does not exist and make_dirs is False
        PermissionError: If the file cannot be written due to permissions
    """
    normalized_path = path_resolver.normalize_path(file_path)

    if make_dirs:
        ensure_dir_exists(normalized_path.parent)

    with open(normalized_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)


def ensure_dir_exists(dir_path: PathLike) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Wrapper around path_resolver.ensure_dir_exists for API consistency.

    Args:
        dir_path: Directory path (string or Path object)

    Returns:
        Path to the directory
    """
    return path_resolver.ensure_dir_exists(dir_path)


def dir_exists(dir_path: PathLike) -> bool:
    """Check if a directory exists.

    Args:
        dir_path: Path to the directory (string or Path object)

    Returns:
        True if the directory exists, False otherwise
    """
    normalized_path = path_resolver.normalize_path(dir_path)
    return normalized_path.exists() and normalized_path.is_dir()


def list_files(dir_path: PathLike, suffix: str | None = None, sort: bool = False) -> list[Path]:
    """List the files directly inside a directory.

    Entries come back in directory-listing order unless ``sort`` is set.
    Subdirectories are skipped.

    Args:
        dir_path: Path to the directory (string or Path object)
        suffix: Only keep file names ending with this suffix (case-sensitive)
        sort: Sort the result by file name

    Returns:
        List of Path objects for matching files

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path exists but is not a directory
    """
    normalized_path = path_resolver.normalize_path(dir_path)

    if not normalized_path.exists():
        raise FileNotFoundError(f"Directory not found: {normalized_path}")

    if not normalized_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {normalized_path}")

    paths = [
        p
        for p in normalized_path.iterdir()
        if p.is_file() and (suffix is None or p.name.endswith(suffix))
    ]

    if sort:
        paths.sort(key=lambda p: p.name)
    return paths


def delete_dir(dir_path: PathLike, recursive: bool = False) -> None:
    """Delete a directory.

    Args:
        dir_path: Path to the directory (string or Path object)
        recursive: Whether to recursively delete the directory and its contents

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path exists but is not a directory
        OSError: If the directory is not empty and recursive is False
    """
    normalized_path = path_resolver.normalize_path(dir_path)

    if not normalized_path.exists():
        raise FileNotFoundError(f"Directory not found: {normalized_path}")

    if not normalized_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {normalized_path}")

    if recursive:
        shutil.rmtree(normalized_path)
    else:
        normalized_path.rmdir()  # Raises if directory is not empty


def reset_dir(dir_path: PathLike) -> Path:
    """Remove a directory with all its contents, then recreate it empty.

    The directory may or may not exist beforehand; the result is the same.

    Args:
        dir_path: Path to the directory (string or Path object)

    Returns:
        Path to the (now empty) directory

    Raises:
        NotADirectoryError: If the path exists but is a file
        PermissionError: If the directory cannot be removed or created
    """
    normalized_path = path_resolver.normalize_path(dir_path)

    if normalized_path.exists():
        delete_dir(normalized_path, recursive=True)

    return ensure_dir_exists(normalized_path)
