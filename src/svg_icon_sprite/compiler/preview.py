"""Preview page renderer.

Produces a standalone HTML page showing every icon once, colored icons
first, each drawn through its view fragment of the sprite.
"""

from collections.abc import Sequence

import jinja2

from svg_icon_sprite.compiler.emitters import create_environment
from svg_icon_sprite.constants import SPRITE_FILENAME
from svg_icon_sprite.models.icon import IconRecord


def render_preview(
    mono_icons: Sequence[IconRecord],
    color_icons: Sequence[IconRecord],
    sprite_filename: str = SPRITE_FILENAME,
    env: jinja2.Environment | None = None,
) -> str:
    """Render the preview page.

    Args:
        mono_icons: Monochrome icons in catalog order.
        color_icons: Colored icons in catalog order.
        sprite_filename: Sprite file name, relative to the preview page.
        env: Template environment; a new one is created when omitted.

    Returns:
        HTML document text.
    """
    env = env or create_environment()
    template = env.get_template("preview.html.j2")
    return template.render(
        mono_icons=mono_icons,
        color_icons=color_icons,
        icons=[*color_icons, *mono_icons],
        sprite_filename=sprite_filename,
    )
