"""Icon models shared by every stage of the sprite compilation pipeline.

An ``IconRecord`` is one normalized icon; a ``Catalog`` is the ordered set
of records discovered in one source group. Records are created by the icon
parser and never modified afterwards.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer
from pydantic.alias_generators import to_camel

from svg_icon_sprite.constants import VIEW_ID_SUFFIX


def plain_number(value: float) -> int | float:
    """Return ``value`` as an int when it has no fractional part.

    Keeps generated markup and JSON free of ``24.0`` style numbers.

    Args:
        value: A finite number.

    Returns:
        The same number, as an int when integral.
    """
    return int(value) if float(value).is_integer() else value


class IconMode(str, Enum):
    """Optimizer mode, one per source group."""

    MONO = "mono"
    COLOR = "color"

    @classmethod
    def from_is_color(cls, is_color: bool) -> "IconMode":
        """Pick the mode matching a source group.

        Args:
            is_color: Whether the icon comes from the color group.

        Returns:
            IconMode enum value
        """
        return cls.COLOR if is_color else cls.MONO


class IconRecord(BaseModel):
    """One normalized icon.

    Serialized with the camelCase names used by the catalog file
    (``sourcePath``, ``isColor``, ``viewBox``, ``bodyMarkupNoDefs``...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    source_path: Path
    name: str
    is_color: bool
    id: str
    view_box: str
    width: float
    height: float
    body_markup: str
    body_markup_no_defs: str
    defs_markup: str = ""

    @computed_field(alias="viewId")  # type: ignore[prop-decorator]
    @property
    def view_id(self) -> str:
        """Fragment identifier addressing this icon inside the sprite."""
        return f"{self.id}{VIEW_ID_SUFFIX}"

    @computed_field(alias="isRectangular")  # type: ignore[prop-decorator]
    @property
    def is_rectangular(self) -> bool:
        """True when the icon is not square."""
        return self.width != self.height

    @property
    def mode(self) -> IconMode:
        return IconMode.from_is_color(self.is_color)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height, used for width overrides of rectangular icons."""
        return self.width / self.height if self.height else 1.0

    @field_serializer("width", "height")
    def _serialize_dimension(self, value: float) -> int | float:
        return plain_number(value)

    @field_serializer("source_path")
    def _serialize_source_path(self, value: Path) -> str:
        return value.as_posix()


class Catalog(BaseModel):
    """Ordered icon records of one source group.

    Order is the directory enumeration order of the group, never the order
    in which files finished parsing.
    """

    is_color: bool
    icons: list[IconRecord] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.icons)

    @property
    def ids(self) -> list[str]:
        return [icon.id for icon in self.icons]

    @property
    def is_empty(self) -> bool:
        return not self.icons
