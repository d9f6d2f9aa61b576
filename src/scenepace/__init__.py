"""Scene sequence pacing analytics."""

__version__ = "0.1.0"
