"""Enumeration of every output combination.

For each element the four output families are produced in a fixed order:
bare, augmented, then per aspect the enchanted sprite followed by its
augmented-enchanted variants.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

from rpsprites.core.catalog.models import Combination


def enumerate_combinations(
    elements: Sequence[str],
    augments: Sequence[str],
) -> Iterator[Combination]:
    """Yield every combination for the given identity sets.

    Iteration follows the order of ``elements`` and ``augments``. An element
    is never paired with itself as an aspect.

    Args:
        elements: Element identities (no duplicates)
        augments: Augment identities (no duplicates)

    Yields:
        Combination for each output sprite

    Raises:
        ValueError: If either sequence contains duplicates, or an identity
            appears as both element and augment
    """
    _require_unique("elements", elements)
    _require_unique("augments", augments)
    overlap = sorted(set(elements) & set(augments))
    if overlap:
        # fire-parry would name both an augmented and an enchanted sprite
        raise ValueError(f"Identities used as both element and augment: {', '.join(overlap)}")

    for element in elements:
        yield Combination(element)

        for augment in augments:
            yield Combination(element, augment=augment)

        for aspect in elements:
            if aspect == element:
                continue
            yield Combination(element, aspect=aspect)

            for augment in augments:
                yield Combination(element, aspect=aspect, augment=augment)


def expected_output_count(n_elements: int, n_augments: int) -> int:
    """Number of outputs produced for the given set sizes.

    Example:
        >>> expected_output_count(7, 3)
        196
    """
    if n_elements < 0 or n_augments < 0:
        raise ValueError("Set sizes must be non-negative")
    aspects = max(n_elements - 1, 0)
    bare = n_elements
    augmented = n_elements * n_augments
    enchanted = n_elements * aspects
    augmented_enchanted = n_elements * aspects * n_augments
    return bare + augmented + enchanted + augmented_enchanted


def _require_unique(label: str, values: Sequence[str]) -> None:
    dupes = sorted(v for v, n in Counter(values).items() if n > 1)
    if dupes:
        raise ValueError(f"Duplicate {label}: {', '.join(dupes)}")
