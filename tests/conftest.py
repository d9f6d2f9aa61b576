"""Shared fixtures for scene pacing tests."""

from pathlib import Path

import pytest

from scenepace.config import Config
from scenepace.models import Scene

EXAMPLE_STORYBOARD = Path(__file__).resolve().parents[1] / "examples" / "storyboard.yaml"

ZNMD_APPEALS = [4, 6, 7, 10, 8, 12, 12]


@pytest.fixture
def abcd():
    """Four scenes A-D with distinct appeals."""
    return [
        Scene(id="A", appeal=1),
        Scene(id="B", appeal=2),
        Scene(id="C", appeal=3),
        Scene(id="D", appeal=4),
    ]


@pytest.fixture
def znmd_scenes():
    """The seven example scenes, named and categorised."""
    names = [
        "Mumbai Work Life (Setup)",
        "Road Trip Start (Anticipation)",
        "Underwater Diving (Peace)",
        "Skydiving (Fear & Release)",
        "Tomato Festival (Reunion)",
        "Running of the Bulls (Catharsis)",
        "The Wedding (Happy Ending)",
    ]
    return [
        Scene(id=str(i), name=name, appeal=appeal, category="Test")
        for i, (name, appeal) in enumerate(zip(names, ZNMD_APPEALS), start=1)
    ]


@pytest.fixture
def settings():
    """Config pinned to the default heuristic values."""
    return Config(pacing_scale=8.0, max_smoothing_factor=10, default_arc="Three-Act Structure")


