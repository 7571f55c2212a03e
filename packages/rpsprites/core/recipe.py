"""Compositing recipe - turns a Combination into a CompositeJob.

Layers are always stacked in the same order: base element at full canvas
size, then the augment badge (if any), then the aspect badge (if any).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rpsprites.core.catalog.models import Combination
from rpsprites.core.compositing.models import Canvas, CompositeJob, Geometry, Layer

SOURCE_SUFFIX = ".png"


@dataclass(frozen=True)
class SpriteLayout:
    """Canvas and badge placement shared by every sprite."""

    canvas: Canvas = field(default_factory=Canvas)
    augment_badge: Geometry = field(default_factory=lambda: Geometry(48, 48, 8, 72))
    aspect_badge: Geometry = field(default_factory=lambda: Geometry(48, 48, 72, 72))


def source_path(sources_dir: Path, identity: str) -> Path:
    """Path of the source image for an element or augment identity."""
    return sources_dir / f"{identity}{SOURCE_SUFFIX}"


def build_job(
    combination: Combination,
    sources_dir: Path,
    output_dir: Path,
    layout: SpriteLayout | None = None,
) -> CompositeJob:
    """Build the compositing job for one combination.

    Args:
        combination: Output to render
        sources_dir: Directory holding ``<identity>.png`` sources
        output_dir: Directory the output is written to
        layout: Canvas and badge geometry (defaults to the 128x128 layout)

    Returns:
        CompositeJob writing ``<output_dir>/<name>.png``
    """
    layout = layout or SpriteLayout()

    layers = [Layer(source_path(sources_dir, combination.element))]
    if combination.augment is not None:
        layers.append(Layer(source_path(sources_dir, combination.augment), layout.augment_badge))
    if combination.aspect is not None:
        layers.append(Layer(source_path(sources_dir, combination.aspect), layout.aspect_badge))

    return CompositeJob(
        canvas=layout.canvas,
        layers=tuple(layers),
        output=output_dir / combination.filename,
    )
