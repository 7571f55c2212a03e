"""Configuration models for rpsprites."""

from __future__ import annotations

from pathlib import Path
import re
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rpsprites.core.catalog.models import default_augments, default_elements
from rpsprites.core.compositing.models import Canvas, Geometry
from rpsprites.core.recipe import SpriteLayout

_IDENTITY_RE = re.compile(r"^[a-z0-9_]+$")


class ConfigBase(BaseModel):
    """Base class for rpsprites configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, or defaults if the default path is absent.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ValidationError: If config is invalid
        """
        from rpsprites.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
            if not Path(path).exists():
                return cls()
        raw = load_config(path)
        return cls.model_validate(raw)


class PathsConfig(BaseModel):
    """Input and output locations, relative to the working directory."""

    sources_dir: Path = Field(
        default=Path("assets/sources"), description="Directory of <identity>.png sources"
    )
    output_dir: Path = Field(default=Path("assets"), description="Directory outputs are written to")


class LayoutConfig(BaseModel):
    """Canvas and badge geometry."""

    width: int = Field(default=128, gt=0)
    height: int = Field(default=128, gt=0)
    depth: int = Field(default=8, gt=0, description="Bits per channel")
    background: str = Field(default="none", description="Canvas colour (none = transparent)")

    augment_badge: str = Field(default="48x48+8+72", description="Augment badge geometry")
    aspect_badge: str = Field(default="48x48+72+72", description="Aspect badge geometry")

    @field_validator("augment_badge", "aspect_badge")
    @classmethod
    def validate_geometry(cls, v: str) -> str:
        Geometry.parse(v)
        return v

    def to_layout(self) -> SpriteLayout:
        return SpriteLayout(
            canvas=Canvas(
                width=self.width,
                height=self.height,
                depth=self.depth,
                background=self.background,
            ),
            augment_badge=Geometry.parse(self.augment_badge),
            aspect_badge=Geometry.parse(self.aspect_badge),
        )


class CompositorConfig(BaseModel):
    """External compositing tool settings."""

    binary: str = Field(default="magick", min_length=1, description="ImageMagick executable")
    timeout_seconds: float | None = Field(
        default=None, gt=0, description="Per-invocation timeout (None = wait indefinitely)"
    )


class GenerationConfig(BaseModel):
    """Run policy."""

    keep_going: bool = Field(
        default=False,
        description="Continue past failed invocations and report them at the end",
    )
    check_sources: bool = Field(
        default=False,
        description="Skip (with a warning) outputs whose source images are missing",
    )
    prune_stale: bool = Field(
        default=False,
        description="Delete outputs not produced by the current identity sets",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (None = stderr)")


class AppConfig(ConfigBase):
    """Application configuration."""

    elements: list[str] = Field(default_factory=default_elements)
    augments: list[str] = Field(default_factory=default_augments)

    paths: PathsConfig = Field(default_factory=PathsConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    compositor: CompositorConfig = Field(default_factory=CompositorConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default_path(cls) -> Path:
        return Path("rpsprites.yaml")

    @field_validator("elements", "augments")
    @classmethod
    def validate_identities(cls, v: list[str]) -> list[str]:
        # identities become file names joined by "-"
        for identity in v:
            if not _IDENTITY_RE.match(identity):
                raise ValueError(
                    f"Invalid identity {identity!r}: use lowercase letters, digits or '_'"
                )
        if len(set(v)) != len(v):
            raise ValueError("Identities must not contain duplicates")
        return v

    @model_validator(mode="after")
    def validate_disjoint(self) -> Self:
        overlap = sorted(set(self.elements) & set(self.augments))
        if overlap:
            raise ValueError(f"Identities used as both element and augment: {', '.join(overlap)}")
        return self
