"""Scene sequence store: canonical order, smoothing factor, derived metrics."""

import logging
from typing import Callable, Iterable, List, Optional

from . import reorder
from .analytics import check_factor, pacing_score, smooth, summarize
from .arcs import NarrativeArc, segment_label
from .config import Config, config as default_config
from .exceptions import DuplicateSceneId, InvalidParameter
from .models import ChartPoint, DerivedMetrics, Scene

logger = logging.getLogger(__name__)

MetricsListener = Callable[[DerivedMetrics], None]


class SequenceStore:
    """Owns the scene order and smoothing factor.

    Every change to either is applied in full before the derived metrics are
    recomputed, and listeners are notified with the fresh metrics. Reorders
    that resolve to no movement do not trigger a recompute.
    """

    def __init__(
        self,
        scenes: Iterable[Scene],
        smoothing_factor: int = 0,
        settings: Optional[Config] = None,
    ) -> None:
        """Initialize the store.

        Args:
            scenes: Initial scene order. Ids must be unique.
            smoothing_factor: Initial smoothing factor.
            settings: Config instance. Defaults to the global config.

        Raises:
            DuplicateSceneId: If two scenes share an id.
            InvalidParameter: If smoothing_factor is out of range.
            ValueError: If the settings fail Config.validate_ranges.
        """
        self._settings = settings or default_config
        self._settings.validate_ranges()
        order = list(scenes)

        seen: set[str] = set()
        for scene in order:
            if scene.id in seen:
                raise DuplicateSceneId(f"Duplicate scene id: {scene.id}")
            seen.add(scene.id)

        self._check_factor(smoothing_factor)
        self._order: List[Scene] = order
        self._smoothing_factor = smoothing_factor
        self._drag = reorder.IDLE_STATE
        self._listeners: List[MetricsListener] = []
        self._metrics = self._compute()

    @property
    def smoothing_factor(self) -> int:
        """Return the current smoothing factor."""
        return self._smoothing_factor

    @property
    def drag_state(self) -> reorder.DragState:
        """Return the in-flight drag gesture, if any."""
        return self._drag

    def get_order(self) -> List[Scene]:
        """Return a copy of the current scene order."""
        return list(self._order)

    def get_derived_metrics(self) -> DerivedMetrics:
        """Return the metrics for the current order and smoothing factor."""
        return self._metrics

    def subscribe(self, listener: MetricsListener) -> Callable[[], None]:
        """Call `listener` with fresh metrics after every recompute.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_smoothing_factor(self, factor: int) -> None:
        """Update the smoothing factor.

        Raises:
            InvalidParameter: If factor is not an integer in
                [0, max_smoothing_factor]. The store is left unchanged.
        """
        self._check_factor(factor)
        if factor == self._smoothing_factor:
            return
        logger.debug(f"Smoothing factor {self._smoothing_factor} -> {factor}")
        self._smoothing_factor = factor
        self._recompute()

    def begin_drag(self, scene_id: str) -> None:
        """Pick up a scene. Unknown ids are ignored."""
        self._dispatch(reorder.BeginDrag(scene_id))

    def update_drag_target(
        self,
        index: int,
        position: reorder.DropPosition = reorder.DropPosition.BEFORE,
    ) -> None:
        """Record the scene being hovered and which half of it."""
        try:
            position = reorder.DropPosition(position)
        except ValueError:
            raise InvalidParameter(
                f"Drop position must be one of {[p.value for p in reorder.DropPosition]}, got {position!r}"
            )
        self._dispatch(reorder.Hover(index, position))

    def drop(self) -> bool:
        """Finish the drag. Returns True if the order changed."""
        return self._dispatch(reorder.Drop())

    def cancel_drag(self) -> None:
        """Abandon the drag without changing the order."""
        self._dispatch(reorder.CancelDrag())

    def move_up(self, index: int) -> bool:
        """Swap the scene at `index` with the one before it."""
        return self._apply_order(reorder.step_scene(self._order, index, -1))

    def move_down(self, index: int) -> bool:
        """Swap the scene at `index` with the one after it."""
        return self._apply_order(reorder.step_scene(self._order, index, 1))

    def chart_points(self, arc: Optional[NarrativeArc] = None) -> List[ChartPoint]:
        """Return one chart row per scene in the current order."""
        smoothed = self._metrics.smoothed
        return [
            ChartPoint(
                position=position,
                label=f"{position}. {scene.short_name}",
                scene_id=scene.id,
                appeal=scene.appeal,
                smoothed=smoothed[position - 1],
                category=scene.category,
                arc_segment=segment_label(arc, position),
            )
            for position, scene in enumerate(self._order, start=1)
        ]

    def _check_factor(self, factor: int) -> None:
        check_factor(factor)
        limit = self._settings.max_smoothing_factor
        if factor > limit:
            raise InvalidParameter(f"Smoothing factor must be in [0, {limit}], got {factor}")

    def _dispatch(self, event: reorder.DragEvent) -> bool:
        outcome = reorder.advance(self._drag, event, self._order)
        self._drag = outcome.state
        return self._apply_order(outcome.order)

    def _apply_order(self, order: List[Scene]) -> bool:
        if order is self._order:
            return False
        self._order = order
        logger.debug(f"Order is now {[scene.id for scene in order]}")
        self._recompute()
        return True

    def _compute(self) -> DerivedMetrics:
        appeals = [scene.appeal for scene in self._order]
        smoothed = smooth(appeals, self._smoothing_factor)
        stats = summarize(appeals)
        return DerivedMetrics(
            **stats.model_dump(),
            smoothed=smoothed,
            pacing_score=pacing_score(smoothed, self._settings.pacing_scale),
        )

    def _recompute(self) -> None:
        self._metrics = self._compute()
        for listener in list(self._listeners):
            listener(self._metrics)
