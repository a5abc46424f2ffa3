"""Tests for the catalog builder."""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog

from svg_icon_sprite.compiler.catalog import (
    build_catalog,
    discover_icon_files,
    ensure_unique_ids,
    merge_catalogs,
)
from svg_icon_sprite.compiler.parser import parse_icon_file
from svg_icon_sprite.exceptions import (
    DuplicateIconIdError,
    IconSourceError,
    MissingViewBoxError,
)
from svg_icon_sprite.models.config import AppConfig
from svg_icon_sprite.models.icon import Catalog, IconRecord

WriteIcon = Callable[[Path, str, str], Path]


class TestDiscovery:
    """Test discover_icon_files."""

    def test_skips_color_subdirectory(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        write_icon(app_config.sources.mono_dir, "arrow.svg", svg_samples["arrow"])
        write_icon(app_config.sources.color_dir, "flag.svg", svg_samples["flag"])
        write_icon(app_config.sources.mono_dir, "README.md", "# icons")

        paths = discover_icon_files(app_config.sources.mono_dir, ".svg")

        assert [p.name for p in paths] == ["arrow.svg"]


class TestBuildCatalog:
    """Test build_catalog."""

    @pytest.mark.asyncio()
    async def test_builds_in_enumeration_order(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        for name in ("c", "a", "b"):
            write_icon(app_config.sources.mono_dir, f"{name}.svg", svg_samples["arrow"])

        catalog = await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert catalog.is_color is False
        assert catalog.ids == ["icon-a", "icon-b", "icon-c"]

    @pytest.mark.asyncio()
    async def test_unsorted_follows_listing_order(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        app_config.sources.sort_files = False
        for name in ("c", "a", "b"):
            write_icon(app_config.sources.mono_dir, f"{name}.svg", svg_samples["arrow"])
        listing = [p.stem for p in app_config.sources.mono_dir.iterdir()]

        catalog = await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert [icon.name for icon in catalog.icons] == listing

    @pytest.mark.asyncio()
    async def test_order_independent_of_completion(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        """Test a file finishing last still keeps its enumeration slot."""
        for name in ("a", "b", "c"):
            write_icon(app_config.sources.mono_dir, f"{name}.svg", svg_samples["arrow"])
        completed: list[str] = []

        async def slow_first(path: Path, *args, **kwargs) -> IconRecord:
            await asyncio.sleep(0.05 if path.stem == "a" else 0)
            record = await parse_icon_file(path, *args, **kwargs)
            completed.append(record.name)
            return record

        with patch("svg_icon_sprite.compiler.catalog.parse_icon_file", new=slow_first):
            catalog = await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert completed[-1] == "a"
        assert [icon.name for icon in catalog.icons] == ["a", "b", "c"]

    @pytest.mark.asyncio()
    async def test_concurrency_is_bounded(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        for index in range(6):
            write_icon(app_config.sources.mono_dir, f"i{index}.svg", svg_samples["arrow"])
        running = 0
        peak = 0

        async def tracked(path: Path, *args, **kwargs) -> IconRecord:
            nonlocal running, peak
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1
            return await parse_icon_file(path, *args, **kwargs)

        with patch("svg_icon_sprite.compiler.catalog.parse_icon_file", new=tracked):
            catalog = await build_catalog(
                app_config.sources.mono_dir, False, app_config, asyncio.Semaphore(2)
            )

        assert len(catalog) == 6
        assert peak <= 2

    @pytest.mark.asyncio()
    async def test_color_group(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        write_icon(app_config.sources.color_dir, "flag.svg", svg_samples["flag"])

        catalog = await build_catalog(app_config.sources.color_dir, True, app_config)

        assert catalog.is_color is True
        assert catalog.ids == ["icon-color-flag"]
        assert catalog.icons[0].defs_markup

    @pytest.mark.asyncio()
    async def test_missing_directory(
        self, app_config: AppConfig, caplog: pytest.LogCaptureFixture
    ):
        with caplog.at_level(logging.WARNING):
            catalog = await build_catalog(app_config.sources.color_dir, True, app_config)

        assert catalog.is_empty
        assert catalog.is_color is True
        assert "not found" in caplog.text

    @pytest.mark.asyncio()
    async def test_empty_directory(self, app_config: AppConfig):
        app_config.sources.mono_dir.mkdir(parents=True)

        catalog = await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert catalog.is_empty

    @pytest.mark.asyncio()
    async def test_invalid_icon_aborts(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        write_icon(app_config.sources.mono_dir, "arrow.svg", svg_samples["arrow"])
        write_icon(app_config.sources.mono_dir, "broken.svg", svg_samples["no_view_box"])

        with pytest.raises(MissingViewBoxError) as exc_info:
            await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert exc_info.value.details["path"].endswith("broken.svg")

    @pytest.mark.asyncio()
    async def test_duplicate_names(
        self, app_config: AppConfig, write_icon: WriteIcon, svg_samples: dict[str, str]
    ):
        write_icon(app_config.sources.mono_dir, "arrow up.svg", svg_samples["arrow"])
        write_icon(app_config.sources.mono_dir, "arrow_up.svg", svg_samples["arrow"])

        with pytest.raises(DuplicateIconIdError) as exc_info:
            await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert exc_info.value.details["id"] == "icon-arrow-up"

    @pytest.mark.asyncio()
    async def test_unlistable_directory(self, app_config: AppConfig):
        app_config.sources.mono_dir.mkdir(parents=True)

        with patch(
            "svg_icon_sprite.utils.file_utils.list_files",
            side_effect=PermissionError("Permission denied"),
        ):
            with pytest.raises(IconSourceError) as exc_info:
                await build_catalog(app_config.sources.mono_dir, False, app_config)

        assert exc_info.value.details == {
            "directory": str(app_config.sources.mono_dir),
            "error": "Permission denied",
        }

    @pytest.mark.asyncio()
    async def test_group_context_bound_per_catalog(self, populated_sources: AppConfig):
        """Test each concurrently built group logs under its own context."""
        seen: dict[str, dict[str, object]] = {}

        async def recording(path: Path, *args, **kwargs) -> IconRecord:
            seen[path.name] = structlog.contextvars.get_contextvars()
            return await parse_icon_file(path, *args, **kwargs)

        sources = populated_sources.sources
        with patch("svg_icon_sprite.compiler.catalog.parse_icon_file", new=recording):
            await asyncio.gather(
                build_catalog(sources.mono_dir, False, populated_sources),
                build_catalog(sources.color_dir, True, populated_sources),
            )

        assert seen["arrow.svg"] == {"group": "mono", "directory": str(sources.mono_dir)}
        assert seen["flag.svg"] == {"group": "color", "directory": str(sources.color_dir)}
        assert structlog.contextvars.get_contextvars() == {}


class TestMerging:
    """Test ensure_unique_ids and merge_catalogs."""

    def test_merge_keeps_group_order(self, make_icon: Callable[..., IconRecord]):
        mono = Catalog(is_color=False, icons=[make_icon("b"), make_icon("a")])
        color = Catalog(is_color=True, icons=[make_icon("flag", is_color=True)])

        icons = merge_catalogs([mono, color])

        assert [icon.id for icon in icons] == ["icon-b", "icon-a", "icon-color-flag"]

    def test_merge_rejects_cross_group_duplicates(self, make_icon: Callable[..., IconRecord]):
        mono = Catalog(is_color=False, icons=[make_icon("x", icon_id="icon-x")])
        color = Catalog(is_color=True, icons=[make_icon("x", is_color=True, icon_id="icon-x")])

        with pytest.raises(DuplicateIconIdError):
            merge_catalogs([mono, color])

    def test_ensure_unique_ids_accepts_distinct(self, make_icon: Callable[..., IconRecord]):
        ensure_unique_ids([make_icon("a"), make_icon("b")])

    def test_ensure_unique_ids_reports_both_files(self, make_icon: Callable[..., IconRecord]):
        with pytest.raises(DuplicateIconIdError) as exc_info:
            ensure_unique_ids([make_icon("a"), make_icon("b", icon_id="icon-a")])

        assert exc_info.value.details["path"].endswith("b.svg")
        assert exc_info.value.details["conflicts_with"].endswith("a.svg")
