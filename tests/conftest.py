"""Common fixtures for testing the SVG icon sprite compiler."""

from collections.abc import Callable
from pathlib import Path

import pytest

from svg_icon_sprite.models.config import AppConfig, OutputConfig, SourceConfig
from svg_icon_sprite.models.icon import IconRecord

SVG_NS = "http://www.w3.org/2000/svg"

ARROW_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">'
    '<path d="M1 12h22" fill="#000" stroke="#111"/>'
    "</svg>"
)

WIDE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 16" fill="none">'
    '<rect width="32" height="16" rx="2"/>'
    "</svg>"
)

FLAG_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<defs><linearGradient id="g"><stop offset="0" stop-color="red"/></linearGradient></defs>'
    '<path d="M0 0h24v24H0z" fill="url(#g)"/>'
    "</svg>"
)

NO_VIEW_BOX_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">'
    '<path d="M0 0h24"/>'
    "</svg>"
)


@pytest.fixture()
def write_icon() -> Callable[[Path, str, str], Path]:
    """Return a helper writing one icon source file."""

    def _write(directory: Path, filename: str, markup: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(markup, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    """Create an application configuration rooted in a temporary directory."""
    return AppConfig(
        sources=SourceConfig(source_dir=tmp_path / "icons-source", sort_files=True),
        output=OutputConfig(output_dir=tmp_path / "dist"),
    )


@pytest.fixture()
def populated_sources(
    app_config: AppConfig, write_icon: Callable[[Path, str, str], Path]
) -> AppConfig:
    """Write two monochrome icons and one colored icon."""
    write_icon(app_config.sources.mono_dir, "arrow.svg", ARROW_SVG)
    write_icon(app_config.sources.mono_dir, "wide.svg", WIDE_SVG)
    write_icon(app_config.sources.color_dir, "flag.svg", FLAG_SVG)
    return app_config


@pytest.fixture()
def make_icon() -> Callable[..., IconRecord]:
    """Return a factory for icon records that skips parsing."""

    def _make(
        name: str,
        width: float = 24,
        height: float = 24,
        is_color: bool = False,
        body: str = '<path d="M0 0" />',
        defs: str = "",
        icon_id: str | None = None,
    ) -> IconRecord:
        identifier = icon_id or (f"icon-color-{name}" if is_color else f"icon-{name}")
        body_markup = f"<defs>{defs}</defs>{body}" if defs else body
        return IconRecord(
            source_path=Path("icons-source") / f"{name}.svg",
            name=name,
            is_color=is_color,
            id=identifier,
            view_box=f"0 0 {width} {height}",
            width=width,
            height=height,
            body_markup=body_markup,
            body_markup_no_defs=body,
            defs_markup=defs,
        )

    return _make


@pytest.fixture()
def svg_samples() -> dict[str, str]:
    """Sample icon documents keyed by a short description."""
    return {
        "arrow": ARROW_SVG,
        "wide": WIDE_SVG,
        "flag": FLAG_SVG,
        "no_view_box": NO_VIEW_BOX_SVG,
    }
