"""Scene data model."""

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator


class Scene(BaseModel):
    """A single narrative scene with its Emotional Appeal Index."""
    
    id: str = Field(..., description="Unique scene identifier", min_length=1)
    appeal: float = Field(..., description="Emotional Appeal Index (EAI)", ge=0)
    name: str = Field(default="", description="Display name")
    summary: Optional[str] = Field(None, description="Short synopsis")
    category: Optional[str] = Field(None, description="Emotional category label")
    image: Optional[str] = Field(None, description="Image reference for display")
    
    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Any:
        # YAML reads unquoted ids such as `id: 1` as integers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def short_name(self) -> str:
        """Return the name without its trailing parenthetical."""
        return self.name.split("(")[0].strip()
