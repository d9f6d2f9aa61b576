"""Narrative arc structures mapped onto scene positions."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ArcSegment:
    """A labelled span of 1-based scene positions (inclusive)."""

    start: int
    end: int
    label: str

    def covers(self, position: int) -> bool:
        return self.start <= position <= self.end


@dataclass(frozen=True)
class NarrativeArc:
    """A named narrative structure."""

    name: str
    segments: List[ArcSegment] = field(default_factory=list)


# Preset arcs, laid out for a seven-scene sequence
ARCS = {
    "None": NarrativeArc("None"),
    "Three-Act Structure": NarrativeArc(
        "Three-Act Structure",
        [
            ArcSegment(1, 2, "Act 1: Setup/Inciting Incident"),
            ArcSegment(3, 6, "Act 2: Confrontation/Rising Action"),
            ArcSegment(7, 7, "Act 3: Resolution/Climax"),
        ],
    ),
    "Freytag's Pyramid": NarrativeArc(
        "Freytag's Pyramid",
        [
            ArcSegment(1, 2, "Exposition"),
            ArcSegment(3, 4, "Rising Action"),
            ArcSegment(5, 5, "Climax"),
            ArcSegment(6, 6, "Falling Action"),
            ArcSegment(7, 7, "Dénouement"),
        ],
    ),
    "Hero's Journey": NarrativeArc(
        "Hero's Journey",
        [
            ArcSegment(1, 1, "The Ordinary World"),
            ArcSegment(2, 3, "The Call & Refusal"),
            ArcSegment(4, 5, "The Ordeal"),
            ArcSegment(6, 6, "The Reward & Road Back"),
            ArcSegment(7, 7, "The Resurrection/Return"),
        ],
    ),
}


def get_arc(name: str) -> NarrativeArc:
    """Get a narrative arc by name.

    Args:
        name: Arc name.

    Returns:
        NarrativeArc definition.

    Raises:
        ValueError: If the arc is not registered.
    """
    if name not in ARCS:
        raise ValueError(f"Unknown arc: {name}. Available: {list(ARCS.keys())}")
    return ARCS[name]


def register_arc(arc: NarrativeArc) -> None:
    """Register a custom narrative arc under its own name."""
    ARCS[arc.name] = arc


def segment_label(arc: Optional[NarrativeArc], position: int) -> Optional[str]:
    """Return the label of the first segment covering a 1-based position."""
    if arc is None:
        return None
    for segment in arc.segments:
        if segment.covers(position):
            return segment.label
    return None
