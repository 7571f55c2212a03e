"""Sprite identity catalogue and combination enumeration."""

from rpsprites.core.catalog.enumeration import enumerate_combinations, expected_output_count
from rpsprites.core.catalog.models import (
    NAME_SEPARATOR,
    Augment,
    Combination,
    Element,
    Family,
    default_augments,
    default_elements,
)

__all__ = [
    # Identities
    "Element",
    "Augment",
    "default_elements",
    "default_augments",
    # Combinations
    "Combination",
    "Family",
    "NAME_SEPARATOR",
    "enumerate_combinations",
    "expected_output_count",
]
