"""Internal constants shared across the library."""

DEFAULT_LEVELS = 1
DEFAULT_SLOTS_PER_LEVEL = 10

# ------------------------------------------------------------------
# Slot demand per machine size
# ------------------------------------------------------------------

SINGLE_SLOT = 1
CONTIGUOUS_PAIR = 2
SUPPORTED_UNIT_COUNTS: tuple[int, ...] = (SINGLE_SLOT, CONTIGUOUS_PAIR)

# Accepted spellings for the three machine sizes (lower case).
KIND_ALIASES: dict[str, str] = {
    "small": "bike",
    "medium": "car",
    "large": "truck",
}


def check_unit_count(units: int) -> int:
    """Return *units* if the engine can place that many slots.

    Raises :class:`ValueError` for anything other than 1 or 2.
    """
    if units not in SUPPORTED_UNIT_COUNTS:
        raise ValueError(f"units_required must be one of {SUPPORTED_UNIT_COUNTS}, got {units}")
    return units
