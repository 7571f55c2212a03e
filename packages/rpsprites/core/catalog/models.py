"""Catalog models - sprite identities and output combinations.

Defines the fixed element and augment vocabularies and the Combination
value type that names a single composited output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NAME_SEPARATOR = "-"


class Element(str, Enum):
    """Base sprite identity.

    Every element has exactly one source image named after its value.
    """

    AIR = "air"
    EARTH = "earth"
    FIRE = "fire"
    PAPER = "paper"
    ROCK = "rock"
    SCISSORS = "scissors"
    WATER = "water"


class Augment(str, Enum):
    """Badge modifier drawn in the lower-left corner of a sprite.

    Attributes:
        ARMORED: Damage reduction badge.
        COMBO: Follow-up attack badge.
        PARRY: Counter badge.
    """

    ARMORED = "armored"
    COMBO = "combo"
    PARRY = "parry"


class Family(str, Enum):
    """Output family a combination belongs to."""

    BARE = "bare"
    AUGMENTED = "augmented"
    ENCHANTED = "enchanted"
    AUGMENTED_ENCHANTED = "augmented_enchanted"


def default_elements() -> list[str]:
    """Return the full element catalogue in sorted order."""
    return sorted(e.value for e in Element)


def default_augments() -> list[str]:
    """Return the full augment catalogue in sorted order."""
    return sorted(a.value for a in Augment)


@dataclass(frozen=True)
class Combination:
    """One output sprite: a primary element, optional aspect and augment.

    The aspect is a second element drawn as a badge; it never equals the
    primary element.
    """

    element: str
    aspect: str | None = None
    augment: str | None = None

    def __post_init__(self) -> None:
        if self.aspect is not None and self.aspect == self.element:
            raise ValueError(f"Element cannot be its own aspect: {self.element}")

    @property
    def family(self) -> Family:
        if self.aspect is None:
            return Family.BARE if self.augment is None else Family.AUGMENTED
        return Family.ENCHANTED if self.augment is None else Family.AUGMENTED_ENCHANTED

    @property
    def parts(self) -> tuple[str, ...]:
        """Participating identities in naming order: element, aspect, augment."""
        return tuple(p for p in (self.element, self.aspect, self.augment) if p is not None)

    @property
    def name(self) -> str:
        """Output stem, e.g. ``fire-water-parry``."""
        return NAME_SEPARATOR.join(self.parts)

    @property
    def filename(self) -> str:
        return f"{self.name}.png"
