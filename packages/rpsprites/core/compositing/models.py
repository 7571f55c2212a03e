"""Compositing job models.

A CompositeJob is a complete, tool-agnostic description of one output
image: a blank canvas plus an ordered stack of layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

_GEOMETRY_RE = re.compile(r"^(\d+)x(\d+)([+-]\d+)([+-]\d+)$")


@dataclass(frozen=True)
class Geometry:
    """Size and placement of a layer on the canvas (``WIDTHxHEIGHT+X+Y``)."""

    width: int
    height: int
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Geometry size must be positive: {self.width}x{self.height}")

    @classmethod
    def parse(cls, spec: str) -> Geometry:
        """Parse an ImageMagick-style geometry string.

        Args:
            spec: Geometry such as ``48x48+8+72``

        Returns:
            Parsed Geometry

        Raises:
            ValueError: If the string is not of the form WIDTHxHEIGHT+X+Y

        Example:
            >>> Geometry.parse("48x48+72+72")
            Geometry(width=48, height=48, x=72, y=72)
        """
        match = _GEOMETRY_RE.match(spec.strip())
        if not match:
            raise ValueError(f"Malformed geometry: {spec!r} (expected WIDTHxHEIGHT+X+Y)")
        w, h, x, y = match.groups()
        return cls(width=int(w), height=int(h), x=int(x), y=int(y))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}{self.x:+d}{self.y:+d}"


@dataclass(frozen=True)
class Canvas:
    """Blank starting image every composite is drawn onto."""

    width: int = 128
    height: int = 128
    depth: int = 8
    background: str = "none"

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Layer:
    """A source image composited onto the canvas.

    Without a geometry the source is drawn at its natural size at the origin.
    """

    source: Path
    geometry: Geometry | None = None


@dataclass(frozen=True)
class CompositeJob:
    """One compositing invocation: canvas, ordered layers, output path."""

    canvas: Canvas
    layers: tuple[Layer, ...]
    output: Path

    @property
    def sources(self) -> tuple[Path, ...]:
        return tuple(layer.source for layer in self.layers)
