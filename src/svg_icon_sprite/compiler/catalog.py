"""Catalog builder.

Discovers the icon files of one source group and parses them concurrently.
Results are joined back in enumeration order, never in completion order, so
the layout and every artifact derived from it are reproducible.
"""

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

import structlog

from svg_icon_sprite.compiler.parser import parse_icon_file
from svg_icon_sprite.exceptions import DuplicateIconIdError, IconSourceError
from svg_icon_sprite.models.config import AppConfig
from svg_icon_sprite.models.icon import Catalog, IconRecord
from svg_icon_sprite.utils import file_utils

logger = logging.getLogger(__name__)


def discover_icon_files(directory: Path, extension: str, sort: bool = False) -> list[Path]:
    """List the icon source files of a directory.

    Args:
        directory: Source group directory.
        extension: Recognized icon file extension.
        sort: Sort by file name instead of keeping directory-listing order.

    Returns:
        Icon file paths; subdirectories (such as the color group) are skipped.
    """
    return file_utils.list_files(directory, suffix=extension, sort=sort)


def ensure_unique_ids(icons: Iterable[IconRecord]) -> None:
    """Check that no two icons share an id.

    Args:
        icons: Icon records in catalog order.

    Raises:
        DuplicateIconIdError: On the first id seen twice.
    """
    seen: dict[str, IconRecord] = {}
    for icon in icons:
        previous = seen.get(icon.id)
        if previous is not None:
            raise DuplicateIconIdError(
                f"Duplicate icon id {icon.id!r} in file {icon.source_path}",
                {
                    "id": icon.id,
                    "path": str(icon.source_path),
                    "conflicts_with": str(previous.source_path),
                },
            )
        seen[icon.id] = icon


def merge_catalogs(catalogs: Iterable[Catalog]) -> list[IconRecord]:
    """Concatenate catalogs in the given order.

    Args:
        catalogs: Catalogs, monochrome group first.

    Returns:
        All icon records, group order then enumeration order.

    Raises:
        DuplicateIconIdError: If two icons of the merged list share an id.
    """
    icons = [icon for catalog in catalogs for icon in catalog.icons]
    ensure_unique_ids(icons)
    return icons


async def build_catalog(
    directory: Path,
    is_color: bool,
    config: AppConfig | None = None,
    semaphore: asyncio.Semaphore | None = None,
) -> Catalog:
    """Parse every icon of a source group.

    A missing directory is an empty group, reported with a warning. Any icon
    failing to parse aborts the whole catalog.

    Args:
        directory: Source group directory.
        is_color: Whether this is the color group.
        config: Application configuration; defaults when omitted.
        semaphore: Bound on concurrent parses, shared across groups when given.

    Returns:
        The catalog, in enumeration order.

    Raises:
        IconSourceError: If the directory cannot be listed, any icon cannot be
            read or parsed, or two icons share an id.
    """
    config = config or AppConfig()
    group = "color" if is_color else "mono"

    with structlog.contextvars.bound_contextvars(group=group, directory=str(directory)):
        return await _build_group(directory, is_color, group, config, semaphore)


async def _build_group(
    directory: Path,
    is_color: bool,
    group: str,
    config: AppConfig,
    semaphore: asyncio.Semaphore | None,
) -> Catalog:
    if not await asyncio.to_thread(file_utils.dir_exists, directory):
        logger.warning(f"Path to source SVG files not found ({group}): {directory}")
        return Catalog(is_color=is_color)

    try:
        paths = await asyncio.to_thread(
            discover_icon_files, directory, config.sources.extension, config.sources.sort_files
        )
    except OSError as e:
        raise IconSourceError(
            f"Failed to list SVG files ({group}) in {directory}",
            {"directory": str(directory), "error": str(e)},
        ) from e

    limiter = semaphore or asyncio.Semaphore(config.max_concurrency)

    async def parse_bounded(path: Path) -> IconRecord:
        async with limiter:
            return await parse_icon_file(
                path, is_color, config.optimizer, config.sources.extension
            )

    # gather keeps argument order regardless of which parse finishes first
    icons = await asyncio.gather(*(parse_bounded(path) for path in paths))

    ensure_unique_ids(icons)
    catalog = Catalog(is_color=is_color, icons=list(icons))
    logger.info(f"Found {len(catalog)} {group} icon(s) in {directory}")
    logger.debug(f"Catalog order ({group}): {', '.join(catalog.ids)}")
    return catalog
