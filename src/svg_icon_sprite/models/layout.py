"""Layout models produced by the sprite layout engine.

Tiles place every icon in one shared vertical coordinate space. They are
derived data: computed once per run, consumed by the artifact emitters,
never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field

from svg_icon_sprite.models.icon import Catalog, IconRecord, plain_number


def format_box(x: float, y: float, width: float, height: float) -> str:
    """Format a four-number SVG box string.

    Args:
        x: Left edge.
        y: Top edge.
        width: Box width.
        height: Box height.

    Returns:
        Box string such as ``"0 34 32 16"``.
    """
    return " ".join(str(plain_number(value)) for value in (x, y, width, height))


class LayoutTile(BaseModel):
    """Vertical slot assigned to one icon."""

    model_config = ConfigDict(frozen=True)

    icon: IconRecord
    y_offset: float

    @property
    def view_box(self) -> str:
        """The icon's view rectangle inside the sprite coordinate space."""
        return format_box(0, self.y_offset, self.icon.width, self.icon.height)

    @property
    def y(self) -> int | float:
        return plain_number(self.y_offset)


class GroupLayout(BaseModel):
    """Tiles of one catalog and the extent they occupy."""

    model_config = ConfigDict(frozen=True)

    catalog: Catalog
    tiles: list[LayoutTile] = Field(default_factory=list)
    start_y: float = 0
    cursor: float = 0  # Where the next group starts
    max_width: float = 0
    total_height: float = 0  # Sum of (height + gap) over the group


class CompositeLayout(BaseModel):
    """All groups laid out one after the other in one coordinate space."""

    model_config = ConfigDict(frozen=True)

    groups: list[GroupLayout] = Field(default_factory=list)
    gap: int

    @property
    def tiles(self) -> list[LayoutTile]:
        """Every tile, in placement order."""
        return [tile for group in self.groups for tile in group.tiles]

    @property
    def icons(self) -> list[IconRecord]:
        """Every icon, in placement order."""
        return [tile.icon for tile in self.tiles]

    @property
    def width(self) -> float:
        """Widest icon across all groups."""
        return max((group.max_width for group in self.groups), default=0)

    @property
    def height(self) -> float:
        """Total height of all groups, gaps included."""
        return sum(group.total_height for group in self.groups)

    @property
    def view_box(self) -> str:
        """Top-level viewBox of the sprite document."""
        return format_box(0, 0, self.width, self.height)

    def group(self, is_color: bool) -> GroupLayout | None:
        """Return the first laid-out group of the given kind, if any."""
        for group in self.groups:
            if group.catalog.is_color == is_color:
                return group
        return None
