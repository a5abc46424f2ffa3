"""Tests for the preview page renderer."""

from collections.abc import Callable

from svg_icon_sprite.compiler.emitters import create_environment
from svg_icon_sprite.compiler.preview import render_preview
from svg_icon_sprite.models.icon import IconRecord


def test_color_section_first(make_icon: Callable[..., IconRecord]):
    html = render_preview([make_icon("arrow")], [make_icon("flag", is_color=True)])

    assert html.index("Colorful Icons") < html.index("Monochromatic Icons")
    assert html.index("icon-color-flag-view") < html.index("icon-arrow-view")


def test_icons_use_view_fragments(make_icon: Callable[..., IconRecord]):
    html = render_preview([make_icon("arrow")], [make_icon("flag", is_color=True)])

    assert "mask-image: url(./icons.svg#icon-arrow-view);" in html
    assert "background-image: url(./icons.svg#icon-color-flag-view);" in html
    assert ">arrow</p>" in html
    assert ">color-flag</p>" in html


def test_rectangular_width(make_icon: Callable[..., IconRecord]):
    html = render_preview([make_icon("wide", width=32, height=16), make_icon("arrow")], [])

    assert ".o-icon--icon-wide { width: calc(2 * 1em); }" in html
    assert ".o-icon--icon-arrow {" not in html


def test_custom_sprite_filename(make_icon: Callable[..., IconRecord]):
    html = render_preview([make_icon("arrow")], [], sprite_filename="sprite.svg")

    assert "url(./sprite.svg#icon-arrow-view)" in html


def test_shared_environment(make_icon: Callable[..., IconRecord]):
    env = create_environment()

    assert render_preview([make_icon("a")], [], env=env) == render_preview([make_icon("a")], [])


def test_empty_groups():
    html = render_preview([], [])

    assert "<h2>Colorful Icons</h2>" in html
    assert 'class="element"' not in html
