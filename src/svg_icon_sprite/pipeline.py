"""Sprite compilation pipeline.

Coordinates one full build: reset the output area, build the monochrome and
color catalogs concurrently, lay both out in one coordinate space and write
every derived artifact. Each run recomputes everything from the sources; any
fatal error aborts the whole build.
"""

import asyncio
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from svg_icon_sprite.compiler.catalog import build_catalog, merge_catalogs
from svg_icon_sprite.compiler.emitters import ArtifactRenderer
from svg_icon_sprite.compiler.layout import layout
from svg_icon_sprite.compiler.preview import render_preview
from svg_icon_sprite.exceptions import ArtifactWriteError, OutputResetError
from svg_icon_sprite.models.config import AppConfig
from svg_icon_sprite.models.icon import Catalog
from svg_icon_sprite.models.layout import CompositeLayout
from svg_icon_sprite.utils import file_utils, path_resolver


class BuildResult(BaseModel):
    """Summary of one pipeline run."""

    mono_count: int = 0
    color_count: int = 0
    artifacts: list[Path] = Field(default_factory=list)
    layout: CompositeLayout | None = None

    @property
    def icon_count(self) -> int:
        return self.mono_count + self.color_count


class SpritePipeline:
    """Runs the sprite compilation for one configuration.

    Attributes:
        config: Application configuration
        logger: Module logger
        renderer: Artifact renderer sharing one template environment
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        """Initialize the pipeline.

        Args:
            config: Application configuration; defaults when omitted.
        """
        self.config = config or AppConfig()
        self.logger = logging.getLogger(__name__)
        self.renderer = ArtifactRenderer(self.config.output)

    def reset_output_area(self) -> Path:
        """Remove the output directory if present and recreate it empty.

        Returns:
            The output directory.

        Raises:
            OutputResetError: If the directory overlaps the source directory,
                or cannot be removed or created.
        """
        output_dir = self.config.output.output_dir
        source_dir = self.config.sources.source_dir
        resolved_output = output_dir.resolve()
        resolved_source = source_dir.resolve()
        if (
            resolved_output == resolved_source
            or resolved_output in resolved_source.parents
            or resolved_source in resolved_output.parents
        ):
            raise OutputResetError(
                f"Output directory {output_dir} overlaps source directory {source_dir}",
                {"destination": str(output_dir), "source": str(source_dir)},
            )

        try:
            return file_utils.reset_dir(output_dir)
        except OSError as e:
            raise OutputResetError(
                f"Failed to reset output directory {output_dir}",
                {"destination": str(output_dir), "error": str(e)},
            ) from e

    async def collect_catalogs(self) -> tuple[Catalog, Catalog]:
        """Build the monochrome and color catalogs concurrently.

        Returns:
            Tuple of (mono catalog, color catalog).

        Raises:
            IconSourceError: If any icon of either group is invalid.
        """
        sources = self.config.sources
        semaphore = asyncio.Semaphore(self.config.max_concurrency)
        mono, color = await asyncio.gather(
            build_catalog(sources.mono_dir, False, self.config, semaphore),
            build_catalog(sources.color_dir, True, self.config, semaphore),
        )
        return mono, color

    def render_artifacts(self, mono: Catalog, color: Catalog) -> tuple[CompositeLayout, dict[Path, str]]:
        """Lay out both catalogs and render every artifact.

        Args:
            mono: Monochrome catalog.
            color: Color catalog.

        Returns:
            Tuple of (composite layout, artifact contents keyed by destination).

        Raises:
            DuplicateIconIdError: If an id appears in both groups.
        """
        icons = merge_catalogs([mono, color])
        composite = layout([mono, color], gap=self.config.layout.gap)
        output = self.config.output

        artifacts = {
            output.sprite_path: self.renderer.render_sprite(composite),
            output.catalog_path: self.renderer.render_catalog(icons),
            output.mixins_path: self.renderer.render_mixins(icons),
            output.styles_path: self.renderer.render_styles(icons),
            output.settings_path: self.renderer.render_settings(icons),
            output.preview_path: render_preview(
                mono.icons, color.icons, output.sprite_filename, self.renderer.jinja_env
            ),
        }
        return composite, artifacts

    async def write_artifact(self, destination: Path, content: str) -> Path:
        """Write one artifact.

        Args:
            destination: Target file.
            content: Text to write.

        Returns:
            The destination path.

        Raises:
            ArtifactWriteError: If the file cannot be written.
        """
        try:
            await asyncio.to_thread(file_utils.write_text, destination, content)
        except OSError as e:
            raise ArtifactWriteError(
                f"Error generating {destination}",
                {"destination": str(destination), "error": str(e)},
            ) from e
        self.logger.info(f"Generated {path_resolver.display_path(destination)}")
        return destination

    async def write_artifacts(self, artifacts: dict[Path, str]) -> list[Path]:
        """Write all artifacts independently of each other.

        Args:
            artifacts: Contents keyed by destination.

        Returns:
            Written paths, in the order given.

        Raises:
            ArtifactWriteError: If any file cannot be written. Files already
                written stay in place.
        """
        return list(
            await asyncio.gather(
                *(self.write_artifact(path, content) for path, content in artifacts.items())
            )
        )

    async def run(self) -> BuildResult:
        """Run the full pipeline.

        Returns:
            Build summary. With no icons at all, nothing is written and the
            summary lists no artifacts.

        Raises:
            IconSpriteError: On any fatal error.
        """
        self.logger.info("Starting icons files generation")
        self.logger.info(f"Path to source SVG files: {self.config.sources.source_dir}")

        self.reset_output_area()
        mono, color = await self.collect_catalogs()

        if mono.is_empty and color.is_empty:
            self.logger.warning("No icons found, skipping icons files generation")
            return BuildResult()

        composite, artifacts = self.render_artifacts(mono, color)
        written = await self.write_artifacts(artifacts)

        self.logger.info(
            f"Icons files generated successfully ({len(mono)} mono, {len(color)} color, "
            f"sprite viewBox {composite.view_box})"
        )
        return BuildResult(
            mono_count=len(mono),
            color_count=len(color),
            artifacts=written,
            layout=composite,
        )
