"""Derived analytics models."""

from typing import List, Optional
from pydantic import BaseModel, Field


class SequenceStats(BaseModel):
    """Summary statistics over the raw appeal values."""

    min: Optional[float] = Field(None, description="Lowest appeal")
    max: Optional[float] = Field(None, description="Highest appeal")
    range: Optional[float] = Field(None, description="max - min")
    average: Optional[float] = Field(None, description="Arithmetic mean appeal")

    class Config:
        """Pydantic config."""
        frozen = True


class DerivedMetrics(SequenceStats):
    """Analytics recomputed whenever the order or smoothing factor changes."""

    smoothed: List[float] = Field(
        default_factory=list, description="Smoothed appeal, index-aligned with the order"
    )
    pacing_score: float = Field(100.0, description="Pacing score in [0, 100]")


class ChartPoint(BaseModel):
    """One charted scene position."""

    position: int = Field(..., description="1-based position in the sequence", ge=1)
    label: str = Field(..., description="Axis label, e.g. '3. Underwater Diving'")
    scene_id: str = Field(..., description="Scene identifier")
    appeal: float = Field(..., description="Raw Emotional Appeal Index")
    smoothed: float = Field(..., description="Smoothed Emotional Appeal")
    category: Optional[str] = Field(None, description="Scene category")
    arc_segment: Optional[str] = Field(None, description="Narrative arc segment label")

    class Config:
        """Pydantic config."""
        frozen = True
