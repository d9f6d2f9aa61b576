"""Configuration management."""

import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Scales the mean absolute change of appeal values roughly bounded by 0-12
# into a 0-100 band. Heuristic, not calibrated against narrative data.
DEFAULT_PACING_SCALE = 8.0
DEFAULT_MAX_SMOOTHING = 10
DEFAULT_ARC = "Three-Act Structure"


class Config(BaseModel):
    """Application configuration."""

    # Analytics
    pacing_scale: float = Field(
        default_factory=lambda: float(
            os.getenv("SCENEPACE_PACING_SCALE", DEFAULT_PACING_SCALE)
        ),
        description="Multiplier applied to the mean absolute change in the pacing score"
    )
    max_smoothing_factor: int = Field(
        default_factory=lambda: int(
            os.getenv("SCENEPACE_MAX_SMOOTHING", DEFAULT_MAX_SMOOTHING)
        ),
        description="Upper bound for the smoothing factor"
    )

    # Presentation defaults
    default_arc: str = Field(
        default_factory=lambda: os.getenv("SCENEPACE_DEFAULT_ARC", DEFAULT_ARC),
        description="Narrative arc used when a storyboard does not name one"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def validate_ranges(self) -> None:
        """Validate that numeric settings are usable.

        Raises:
            ValueError: If the pacing scale or smoothing bound is out of range.
        """
        problems: list[str] = []

        if self.pacing_scale <= 0:
            problems.append(f"SCENEPACE_PACING_SCALE must be positive, got {self.pacing_scale}")
        if self.max_smoothing_factor < 0:
            problems.append(
                f"SCENEPACE_MAX_SMOOTHING must be >= 0, got {self.max_smoothing_factor}"
            )

        if problems:
            raise ValueError("Invalid configuration: " + "; ".join(problems))


# Global config instance
config = Config()
