"""Official design catalogue."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ItemDesign"]


class ItemDesign(IntEnum):
    """Designs a customer can pick from.

    The integer value travels on the wire in share links, so members must
    only ever be appended.
    """

    CUSTOM = 0
    COASTAL = 1
    TIDAL = 2
    OCEANIC_HARMONY = 3
    TIMBERLINE = 4
    AMBER = 5
    SAPPHIRE = 6
    WINTER = 7
    FOREST = 8
    AUTUMN = 9
    ELEMENTAL = 10
    ABYSS = 11
    SPECTRUM = 12
    ALOE = 13
    MIRAGE = 14

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()

    def next(self) -> "ItemDesign":
        """Following design, wrapping to the first."""
        members = list(ItemDesign)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> "ItemDesign":
        """Preceding design, wrapping to the last."""
        members = list(ItemDesign)
        return members[(members.index(self) - 1) % len(members)]
