from __future__ import annotations

from dataclasses import dataclass

from ..geom import Segment
from .spacing import Spacing

# ============================================================================
# No-go zones
#
# Interaction lines and their labels claim the vertical space they occupy.
# Lifelines that lie strictly between the two lifelines an interaction
# connects must leave a gap in their dashed stroke for that space.
# ============================================================================


@dataclass(slots=True)
class NoGoZone:
    height: Segment
    lifeline_a: str
    lifeline_b: str


class NoGoZones:
    """Registry of the no-go zones claimed so far."""

    def __init__(self, spacing: Spacing) -> None:
        self.spacing = spacing
        self.zones: list[NoGoZone] = []

    def register_space_claim(
        self, lifeline_a: str, lifeline_b: str, y_start: float, y_end: float
    ) -> None:
        if y_start >= y_end:
            raise ValueError(
                f"no-go zone must have positive height: {y_start} -> {y_end}"
            )
        self.zones.append(NoGoZone(Segment(y_start, y_end), lifeline_a, lifeline_b))

    def affects(self, zone: NoGoZone, lifeline: str) -> bool:
        """True when lifeline sits strictly between the zone's lifelines."""
        a = self.spacing.index_of(zone.lifeline_a)
        b = self.spacing.index_of(zone.lifeline_b)
        lo, hi = min(a, b), max(a, b)
        return lo < self.spacing.index_of(lifeline) < hi

    def gaps_for(self, lifeline: str) -> list[Segment]:
        """Heights of the zones that lifeline must leave a gap for."""
        return [
            Segment(z.height.start, z.height.end)
            for z in self.zones
            if self.affects(z, lifeline)
        ]

    def __len__(self) -> int:
        return len(self.zones)

    def __iter__(self):
        return iter(self.zones)

    def __getitem__(self, i: int) -> NoGoZone:
        return self.zones[i]
