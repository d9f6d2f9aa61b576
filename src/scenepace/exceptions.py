"""Exceptions raised by the scene pacing core."""


class ScenePaceError(Exception):
    """Base class for scene pacing errors."""


class InvalidParameter(ScenePaceError, ValueError):
    """A parameter was rejected; the caller's state is unchanged."""


class UnknownSceneId(ScenePaceError, KeyError):
    """A scene id is not part of the current sequence."""

    def __init__(self, scene_id: str) -> None:
        super().__init__(scene_id)
        self.scene_id = scene_id

    def __str__(self) -> str:
        return f"Unknown scene id: {self.scene_id!r}"


class DuplicateSceneId(ScenePaceError, ValueError):
    """The same scene id appears more than once in a sequence."""
