"""Storyboard data model."""

from typing import List, Optional
from pathlib import Path
from pydantic import BaseModel, Field, field_validator
import yaml

from .scene import Scene


class Storyboard(BaseModel):
    """A titled scene sequence as supplied by the presentation layer."""
    
    title: str = Field(..., description="Storyboard title")
    scenes: List[Scene] = Field(default_factory=list, description="Scenes in their initial order")
    smoothing_factor: int = Field(default=0, description="Initial smoothing factor", ge=0)
    arc: Optional[str] = Field(None, description="Narrative arc name")
    
    class Config:
        """Pydantic config."""
        frozen = False

    @field_validator("scenes")
    @classmethod
    def _unique_ids(cls, scenes: List[Scene]) -> List[Scene]:
        seen: set[str] = set()
        for scene in scenes:
            if scene.id in seen:
                raise ValueError(f"Duplicate scene id: {scene.id}")
            seen.add(scene.id)
        return scenes
    
    @classmethod
    def from_yaml(cls, path: Path) -> "Storyboard":
        """Load a storyboard from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**data)
