"""Shared pytest fixtures for rpsprites tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rpsprites.core.catalog import default_augments, default_elements
from rpsprites.core.compositing import RecordingCompositor
from rpsprites.core.generator import AssetGenerator

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Empty ./assets tree with a sources/ directory."""
    root = tmp_path / "assets"
    (root / "sources").mkdir(parents=True)
    return root


@pytest.fixture
def sources_dir(assets_dir: Path) -> Path:
    """Sources directory populated with a placeholder for every identity."""
    sources = assets_dir / "sources"
    for identity in [*default_elements(), *default_augments()]:
        (sources / f"{identity}.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return sources


# ============================================================================
# Compositor Fixtures
# ============================================================================


@pytest.fixture
def recorder() -> RecordingCompositor:
    """Compositor that records jobs instead of running ImageMagick."""
    return RecordingCompositor()


@pytest.fixture
def generator(recorder: RecordingCompositor, assets_dir: Path) -> AssetGenerator:
    """Generator wired to the recording compositor and a temp assets tree."""
    return AssetGenerator(recorder, sources_dir=assets_dir / "sources", output_dir=assets_dir)
