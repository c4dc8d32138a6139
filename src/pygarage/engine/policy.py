"""Deterministic placement policy.

This module contains *no* state: it only decides which slot indices a
request should use given a row of occupancy flags. First fit, lowest
index wins, so identical inputs always give identical placements.
"""

from __future__ import annotations

from collections.abc import Sequence

from pygarage._constants import CONTIGUOUS_PAIR, SINGLE_SLOT, check_unit_count


def first_free(occupied: Sequence[bool]) -> list[int]:
    """Index of the first free slot, as a one-element list, or ``[]``."""
    for index, taken in enumerate(occupied):
        if not taken:
            return [index]
    return []


def first_free_pair(occupied: Sequence[bool]) -> list[int]:
    """First adjacent pair ``[i, i + 1]`` with both slots free, or ``[]``.

    Free slots that are not next to each other never form a pair.
    """
    for index in range(len(occupied) - 1):
        if not occupied[index] and not occupied[index + 1]:
            return [index, index + 1]
    return []


def find_candidate(occupied: Sequence[bool], units_required: int) -> list[int]:
    """Propose slot indices for a request of *units_required* slots.

    Raises :class:`ValueError` for unit counts other than 1 or 2.
    """
    check_unit_count(units_required)
    if units_required == SINGLE_SLOT:
        return first_free(occupied)
    if units_required == CONTIGUOUS_PAIR:
        return first_free_pair(occupied)
    return []
