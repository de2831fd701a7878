from __future__ import annotations

from .boxes import BoxTracker
from .creator import Creator, create_diagram, DIAGRAM_WIDTH
from .finalizer import Finalizer
from .frame import FrameMaker
from .interactions import Maker, MakerDependencies, STAGES, stages_for, make_arrow
from .nogozone import NoGoZone, NoGoZones
from .spacing import Spacing

__all__ = [
    "BoxTracker",
    "Creator",
    "create_diagram",
    "DIAGRAM_WIDTH",
    "Finalizer",
    "FrameMaker",
    "Maker",
    "MakerDependencies",
    "STAGES",
    "stages_for",
    "make_arrow",
    "NoGoZone",
    "NoGoZones",
    "Spacing",
]
