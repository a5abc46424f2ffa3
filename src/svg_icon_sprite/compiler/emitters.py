"""Artifact emitters.

Serialize the laid-out icons into the sprite document, the JSON catalog and
the stylesheet files. Emitters only read records and tiles; every output is
a string, written to disk by the pipeline.
"""

from collections.abc import Sequence

import jinja2
from pydantic import TypeAdapter

from svg_icon_sprite.constants import (
    CATALOG_JSON_INDENT,
    SHARED_REFERENCE_PREFIX,
    SVG_NAMESPACE,
    XLINK_NAMESPACE,
)
from svg_icon_sprite.models.config import OutputConfig
from svg_icon_sprite.models.icon import IconRecord, plain_number
from svg_icon_sprite.models.layout import CompositeLayout

_CATALOG_ADAPTER = TypeAdapter(list[IconRecord])


def _usage_name(identifier: str) -> str:
    """Icon id without its leading ``icon-``, as shown to people."""
    return identifier.replace(SHARED_REFERENCE_PREFIX, "", 1)


def create_environment() -> jinja2.Environment:
    """Create the Jinja2 environment holding the artifact templates.

    Only HTML templates are autoescaped; SVG and SCSS templates embed
    already-serialized markup.

    Returns:
        Configured environment.
    """
    env = jinja2.Environment(
        loader=jinja2.PackageLoader("svg_icon_sprite", "templates"),
        autoescape=jinja2.select_autoescape(enabled_extensions=("html.j2",), default=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["num"] = plain_number
    env.filters["usage_name"] = _usage_name
    return env


class ArtifactRenderer:
    """Renders every text artifact derived from the laid-out catalog."""

    def __init__(self, output: OutputConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
            output: Output configuration (filenames and the sprite URL).
        """
        self.output = output or OutputConfig()
        self.jinja_env = create_environment()

    @property
    def mixins_module(self) -> str:
        """Sass module name of the mixins file, as used by ``@use``."""
        stem = self.output.mixins_filename.removesuffix(".scss")
        return stem.removeprefix("_")

    def render_sprite(self, layout: CompositeLayout) -> str:
        """Render the sprite document.

        Every icon body is wrapped in a group positioned at its tile, every
        icon gets a ``view`` addressable by its view id, and all definitions
        are collected once in the top-level ``defs`` block.

        Args:
            layout: Composite layout of all groups.

        Returns:
            SVG document text.
        """
        template = self.jinja_env.get_template("icons.svg.j2")
        return template.render(
            layout=layout, svg_namespace=SVG_NAMESPACE, xlink_namespace=XLINK_NAMESPACE
        )

    def render_catalog(self, icons: Sequence[IconRecord]) -> str:
        """Render the JSON catalog of every icon record, in the given order."""
        data = _CATALOG_ADAPTER.dump_json(list(icons), indent=CATALOG_JSON_INDENT, by_alias=True)
        return data.decode("utf-8") + "\n"

    def render_mixins(self, icons: Sequence[IconRecord]) -> str:
        """Render one Sass mixin per icon.

        Monochrome icons are drawn through a mask so they follow the current
        color; colored icons are drawn as background images. Rectangular icons
        also override the width with their aspect ratio.
        """
        template = self.jinja_env.get_template("_icons-mixin.scss.j2")
        return template.render(icons=icons, sprite_url=self.output.sprite_url)

    def render_styles(self, icons: Sequence[IconRecord]) -> str:
        """Render the ``.o-icon--<id>`` classes that include the mixins."""
        template = self.jinja_env.get_template("_icons.scss.j2")
        return template.render(icons=icons, mixins_module=self.mixins_module)

    def render_settings(self, icons: Sequence[IconRecord]) -> str:
        """Render the Sass map of aspect ratios of rectangular icons."""
        template = self.jinja_env.get_template("_icon-settings.scss.j2")
        return template.render(icons=icons)
