"""Icon parser.

Turns one icon source file into an ``IconRecord``: computes its name and
namespaced id, runs the optimizer, recovers the geometry from the root
``viewBox`` and splits the body into drawing and shared definitions.
"""

import asyncio
import logging
import math
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from svg_icon_sprite.compiler.defs import extract_defs
from svg_icon_sprite.compiler.optimizer import optimize
from svg_icon_sprite.constants import DEFAULT_ICON_EXTENSION
from svg_icon_sprite.exceptions import (
    IconSourceError,
    InvalidGeometryError,
    MissingViewBoxError,
    OptimizerError,
    chain_exception,
)
from svg_icon_sprite.models.config import OptimizerConfig
from svg_icon_sprite.models.icon import IconMode, IconRecord
from svg_icon_sprite.utils import file_utils
from svg_icon_sprite.utils.markup import inner_markup, parse_document

logger = logging.getLogger(__name__)

_NAME_SEPARATOR_RE = re.compile(r"[\s_]+")
_VIEW_BOX_SEPARATOR_RE = re.compile(r"[\s,]+")


def icon_name(path: Path, extension: str = DEFAULT_ICON_EXTENSION) -> str:
    """Derive an icon name from its file name.

    Runs of whitespace and underscores become a single hyphen and the result
    is lower-cased: ``"Arrow  Up_big.svg"`` gives ``"arrow-up-big"``.

    Args:
        path: Icon source file.
        extension: Extension removed from the file name.

    Returns:
        The normalized icon name.
    """
    stem = path.name[: -len(extension)] if path.name.endswith(extension) else path.stem
    return _NAME_SEPARATOR_RE.sub("-", stem).lower()


def icon_id(name: str, is_color: bool, config: OptimizerConfig) -> str:
    """Build the namespaced id of an icon.

    Args:
        name: Normalized icon name.
        is_color: Whether the icon comes from the color group.
        config: Optimizer configuration holding the id templates.

    Returns:
        The icon id, for example ``icon-arrow`` or ``icon-color-flag``.
    """
    template = config.color_id_template if is_color else config.mono_id_template
    return template.format(name=name)


def parse_view_box(view_box: str, source_path: Path) -> tuple[float, float]:
    """Read width and height from a viewBox string.

    Args:
        view_box: ``"min-x min-y width height"``, separated by whitespace or commas.
        source_path: Icon source file, for error details.

    Returns:
        Tuple of (width, height).

    Raises:
        InvalidGeometryError: If the box does not hold four finite numbers or
            its width or height is negative.
    """
    parts = _VIEW_BOX_SEPARATOR_RE.split(view_box.strip())
    details = {"path": str(source_path), "view_box": view_box}
    if len(parts) != 4:
        raise InvalidGeometryError(
            f"SVG viewBox must have four numbers in file {source_path}", details
        )

    try:
        numbers = [float(part) for part in parts]
    except ValueError as e:
        raise chain_exception(
            InvalidGeometryError(f"SVG viewBox is not numeric in file {source_path}", details),
            e,
        )

    if not all(math.isfinite(number) for number in numbers):
        raise InvalidGeometryError(f"SVG viewBox is not finite in file {source_path}", details)

    width, height = numbers[2], numbers[3]
    if width < 0 or height < 0:
        raise InvalidGeometryError(
            f"SVG viewBox width and height must not be negative in file {source_path}", details
        )
    return width, height


def parse_icon(
    source_path: Path,
    raw_markup: str,
    is_color: bool,
    config: OptimizerConfig | None = None,
    extension: str = DEFAULT_ICON_EXTENSION,
) -> IconRecord:
    """Normalize one icon.

    Args:
        source_path: Icon source file, used for naming and diagnostics.
        raw_markup: Content of the source file.
        is_color: Whether the icon comes from the color group.
        config: Optimizer configuration; defaults when omitted.
        extension: Icon file extension, removed when deriving the name.

    Returns:
        The icon record.

    Raises:
        OptimizerError: If the markup cannot be optimized or re-parsed.
        MissingViewBoxError: If the optimized root element has no viewBox.
        InvalidGeometryError: If the viewBox is unusable.
    """
    config = config or OptimizerConfig()
    name = icon_name(source_path, extension)
    identifier = icon_id(name, is_color, config)

    try:
        optimized = optimize(raw_markup, identifier, IconMode.from_is_color(is_color), config)
    except OptimizerError as e:
        raise OptimizerError(
            f"Failed to optimize SVG file {source_path}",
            {**e.details, "path": str(source_path)},
        ) from e

    try:
        root = parse_document(optimized)
        body_markup = inner_markup(root).strip()
        defs = extract_defs(body_markup)
    except ET.ParseError as e:
        raise OptimizerError(
            f"Optimized markup is not well-formed in file {source_path}",
            {"path": str(source_path), "error": str(e)},
        ) from e

    view_box = (root.get("viewBox") or "").strip()
    if not view_box:
        raise MissingViewBoxError(
            f"SVG viewBox not found in file {source_path}", {"path": str(source_path)}
        )
    width, height = parse_view_box(view_box, source_path)

    return IconRecord(
        source_path=source_path,
        name=name,
        is_color=is_color,
        id=identifier,
        view_box=view_box,
        width=width,
        height=height,
        body_markup=body_markup,
        body_markup_no_defs=defs.markup_without_defs,
        defs_markup=defs.defs_markup,
    )


async def parse_icon_file(
    source_path: Path,
    is_color: bool,
    config: OptimizerConfig | None = None,
    extension: str = DEFAULT_ICON_EXTENSION,
) -> IconRecord:
    """Read one icon source file and normalize it.

    The read runs in a worker thread so several files can be read at once.

    Args:
        source_path: Icon source file.
        is_color: Whether the icon comes from the color group.
        config: Optimizer configuration; defaults when omitted.
        extension: Icon file extension, removed when deriving the name.

    Returns:
        The icon record.

    Raises:
        IconSourceError: If the file cannot be read or the icon is invalid.
    """
    try:
        raw_markup = await asyncio.to_thread(file_utils.read_text, source_path)
    except (OSError, UnicodeDecodeError) as e:
        raise IconSourceError(
            f"Failed to read SVG file {source_path}", {"path": str(source_path), "error": str(e)}
        ) from e

    record = parse_icon(source_path, raw_markup, is_color, config, extension)
    logger.debug(f"Parsed {source_path} as {record.id} ({record.view_box})")
    return record
