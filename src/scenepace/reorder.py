"""Drag-and-drop reordering of scene sequences.

A drag gesture is modelled as an immutable DragState advanced by events:

    IDLE --BeginDrag--> DRAGGING --Hover--> DRAGGING --Drop/CancelDrag--> IDLE

Hover events only record a candidate insertion index; the sequence changes
on Drop, through move_scene.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Union

from .exceptions import InvalidParameter, UnknownSceneId
from .models import Scene

logger = logging.getLogger(__name__)


class DragPhase(str, Enum):
    """Phase of the drag gesture."""

    IDLE = "idle"
    DRAGGING = "dragging"


class DropPosition(str, Enum):
    """Which half of the hovered scene the pointer is over."""

    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class DragState:
    """Current drag gesture."""

    phase: DragPhase = DragPhase.IDLE
    dragged_id: Optional[str] = None
    insertion_index: Optional[int] = None

    @property
    def is_dragging(self) -> bool:
        return self.phase == DragPhase.DRAGGING


IDLE_STATE = DragState()


@dataclass(frozen=True)
class BeginDrag:
    """Pick up a scene."""

    scene_id: str


@dataclass(frozen=True)
class Hover:
    """Pointer over the scene at `index`, on the given half."""

    index: int
    position: DropPosition = DropPosition.BEFORE


@dataclass(frozen=True)
class Drop:
    """Release the dragged scene at the pending insertion index."""


@dataclass(frozen=True)
class CancelDrag:
    """Abort the gesture without moving anything."""


DragEvent = Union[BeginDrag, Hover, Drop, CancelDrag]


@dataclass
class DragOutcome:
    """Result of applying one event."""

    state: DragState
    order: List[Scene]
    moved: bool = False


def index_of(order: Sequence[Scene], scene_id: str) -> int:
    """Return the position of a scene in the order.

    Raises:
        UnknownSceneId: If no scene has that id.
    """
    for index, scene in enumerate(order):
        if scene.id == scene_id:
            return index
    raise UnknownSceneId(scene_id)


def insertion_index(index: int, position: DropPosition) -> int:
    """Translate a hovered index and half into an insertion index.

    Insertion index k means "insert before the scene currently at k";
    len(order) means "append".
    """
    if position == DropPosition.AFTER:
        return index + 1
    return index


def move_scene(
    order: List[Scene],
    dragged_id: str,
    target_index: int,
) -> List[Scene]:
    """Move a scene so it lands at an insertion index.

    Args:
        order: Current scene order.
        dragged_id: Id of the scene being moved.
        target_index: Insertion index in [0, len(order)], measured before
            the dragged scene is removed.

    Returns:
        A new list with the scene moved, or `order` itself when the id is
        unknown or the move would leave the scene where it is.

    Raises:
        InvalidParameter: If target_index is outside [0, len(order)].
    """
    if not 0 <= target_index <= len(order):
        raise InvalidParameter(
            f"Insertion index {target_index} outside [0, {len(order)}]"
        )

    try:
        dragged_index = index_of(order, dragged_id)
    except UnknownSceneId as e:
        logger.debug(f"Ignoring move: {e}")
        return order

    # Removing the dragged scene shifts every later position left by one.
    if dragged_index < target_index:
        target_index -= 1

    if target_index == dragged_index:
        return order

    new_order = list(order)
    scene = new_order.pop(dragged_index)
    new_order.insert(target_index, scene)
    logger.debug(f"Moved {dragged_id} from {dragged_index} to {target_index}")
    return new_order


def step_scene(order: List[Scene], index: int, offset: int) -> List[Scene]:
    """Swap the scene at `index` with its neighbour at `index + offset`.

    Used for the move up (-1) / move down (+1) controls. Returns `order`
    unchanged when either position is out of range.
    """
    other = index + offset
    if offset == 0 or not 0 <= index < len(order) or not 0 <= other < len(order):
        return order

    new_order = list(order)
    new_order[index], new_order[other] = new_order[other], new_order[index]
    return new_order


def advance(state: DragState, event: DragEvent, order: List[Scene]) -> DragOutcome:
    """Apply one gesture event.

    Args:
        state: Current drag state.
        event: Incoming gesture event.
        order: Current scene order.

    Returns:
        The next state and the (possibly unchanged) order.
    """
    if isinstance(event, BeginDrag):
        if not any(scene.id == event.scene_id for scene in order):
            logger.debug(f"Ignoring drag of unknown scene {event.scene_id!r}")
            return DragOutcome(state, order)
        # A new drag replaces any drag still in flight.
        return DragOutcome(DragState(DragPhase.DRAGGING, event.scene_id), order)

    if isinstance(event, Hover):
        if not state.is_dragging or not 0 <= event.index < len(order):
            return DragOutcome(state, order)
        candidate = insertion_index(event.index, event.position)
        if candidate == state.insertion_index:
            return DragOutcome(state, order)
        return DragOutcome(replace(state, insertion_index=candidate), order)

    if isinstance(event, Drop):
        if state.dragged_id is None or state.insertion_index is None:
            return DragOutcome(IDLE_STATE, order)
        new_order = move_scene(order, state.dragged_id, state.insertion_index)
        return DragOutcome(IDLE_STATE, new_order, moved=new_order is not order)

    if isinstance(event, CancelDrag):
        return DragOutcome(IDLE_STATE, order)

    raise TypeError(f"Unsupported drag event: {event!r}")
