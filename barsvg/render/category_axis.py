"""Category axis: the field labels and where they sit inside their slot."""

from __future__ import annotations

from typing import Sequence

from ..config import Orientation


class CategoryAxis:
    """Field labels along the non-value axis."""

    def __init__(self, fields: Sequence[str], orientation: Orientation = Orientation.VERTICAL):
        self.fields = tuple(fields)
        self.orientation = orientation

    def labels(self) -> list[str]:
        return list(self.fields)

    def label_offset(self, slot_size: float) -> float:
        """Signed half-slot shift that centres a label in its slot.

        Pixel coordinates grow along X for vertical charts but fields advance
        against Y for horizontal ones, hence the sign flip.
        """
        if self.orientation is Orientation.VERTICAL:
            return slot_size / 2.0
        return slot_size / -2.0
