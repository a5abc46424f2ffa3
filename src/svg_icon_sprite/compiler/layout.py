"""Sprite layout engine.

Stacks icons vertically in one shared coordinate space. Each icon gets a
tile at the running cursor; the cursor then advances by the icon height plus
a fixed gap. Groups are folded one after the other, so the color group
continues exactly where the monochrome group stopped.
"""

from collections.abc import Sequence

from svg_icon_sprite.constants import ICON_GAP
from svg_icon_sprite.models.icon import Catalog
from svg_icon_sprite.models.layout import CompositeLayout, GroupLayout, LayoutTile


def layout_catalog(catalog: Catalog, start_y: float = 0, gap: int = ICON_GAP) -> GroupLayout:
    """Assign a tile to every icon of one catalog.

    Args:
        catalog: Icons in catalog order.
        start_y: Vertical position of the first tile.
        gap: Space left below every tile.

    Returns:
        The group layout; its ``cursor`` is where a following group starts.
    """
    tiles: list[LayoutTile] = []
    cursor = start_y
    max_width: float = 0
    total_height: float = 0

    for icon in catalog.icons:
        tiles.append(LayoutTile(icon=icon, y_offset=cursor))
        cursor += icon.height + gap
        total_height += icon.height + gap
        max_width = max(max_width, icon.width)

    return GroupLayout(
        catalog=catalog,
        tiles=tiles,
        start_y=start_y,
        cursor=cursor,
        max_width=max_width,
        total_height=total_height,
    )


def layout(groups: Sequence[Catalog], gap: int = ICON_GAP, start_y: float = 0) -> CompositeLayout:
    """Lay out several catalogs contiguously in one coordinate space.

    Args:
        groups: Catalogs in placement order (monochrome first, then color).
        gap: Space left below every tile.
        start_y: Vertical position of the very first tile.

    Returns:
        The composite layout. Its width is the widest icon of any group and
        its height the sum of every group's height.
    """
    group_layouts: list[GroupLayout] = []
    cursor = start_y
    for catalog in groups:
        group_layout = layout_catalog(catalog, cursor, gap)
        group_layouts.append(group_layout)
        cursor = group_layout.cursor

    return CompositeLayout(groups=group_layouts, gap=gap)
