"""Tests for SequenceStore."""

import pytest

from scenepace.arcs import get_arc
from scenepace.config import Config
from scenepace.exceptions import DuplicateSceneId, InvalidParameter
from scenepace.models import Scene
from scenepace.reorder import DragPhase, DropPosition
from scenepace.store import SequenceStore

from .conftest import ZNMD_APPEALS


def ids(order):
    return [scene.id for scene in order]


class TestConstruction:
    """Tests for building a store."""

    def test_duplicate_ids_rejected(self, settings):
        scenes = [Scene(id="a", appeal=1), Scene(id="a", appeal=2)]
        with pytest.raises(DuplicateSceneId):
            SequenceStore(scenes, settings=settings)

    def test_invalid_initial_factor_rejected(self, abcd, settings):
        with pytest.raises(InvalidParameter):
            SequenceStore(abcd, smoothing_factor=11, settings=settings)

    def test_initial_metrics(self, znmd_scenes, settings):
        store = SequenceStore(znmd_scenes, settings=settings)
        metrics = store.get_derived_metrics()
        assert metrics.smoothed == ZNMD_APPEALS
        assert metrics.pacing_score == pytest.approx(84.0)
        assert metrics.min == 4
        assert metrics.max == 12
        assert metrics.range == 8
        assert metrics.average == pytest.approx(59 / 7)

    def test_negative_pacing_scale_from_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("SCENEPACE_PACING_SCALE", "-8")
        monkeypatch.setenv("SCENEPACE_MAX_SMOOTHING", "10")
        scenes = [Scene(id="a", appeal=0), Scene(id="b", appeal=10)]
        with pytest.raises(ValueError, match="PACING_SCALE"):
            SequenceStore(scenes, settings=Config())

    def test_negative_smoothing_bound_rejected(self, abcd):
        settings = Config(pacing_scale=8.0, max_smoothing_factor=-1)
        with pytest.raises(ValueError, match="MAX_SMOOTHING"):
            SequenceStore(abcd, settings=settings)

    def test_empty_sequence(self, settings):
        store = SequenceStore([], settings=settings)
        metrics = store.get_derived_metrics()
        assert metrics.smoothed == []
        assert metrics.pacing_score == 100.0
        assert metrics.min is None

    def test_get_order_returns_copy(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.get_order().reverse()
        assert ids(store.get_order()) == ["A", "B", "C", "D"]


class TestSmoothingFactor:
    """Tests for set_smoothing_factor."""

    @pytest.mark.parametrize("factor", [-1, 11, 2.0, "3", None, True])
    def test_rejected_without_state_change(self, znmd_scenes, settings, factor):
        store = SequenceStore(znmd_scenes, smoothing_factor=2, settings=settings)
        before = store.get_derived_metrics()
        with pytest.raises(InvalidParameter):
            store.set_smoothing_factor(factor)
        assert store.smoothing_factor == 2
        assert store.get_derived_metrics() is before

    def test_negative_factor_message(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        with pytest.raises(InvalidParameter, match=">= 0"):
            store.set_smoothing_factor(-3)

    def test_recomputes_smoothed_curve(self, znmd_scenes, settings):
        store = SequenceStore(znmd_scenes, settings=settings)
        store.set_smoothing_factor(10)
        smoothed = store.get_derived_metrics().smoothed
        assert len(smoothed) == len(ZNMD_APPEALS)
        # Window 11 covers the whole sequence at every index
        assert smoothed == pytest.approx([59 / 7] * 7)
        assert store.get_derived_metrics().pacing_score == pytest.approx(100.0)

    def test_order_untouched(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.set_smoothing_factor(4)
        assert ids(store.get_order()) == ["A", "B", "C", "D"]

    def test_respects_configured_bound(self, abcd, settings):
        settings.max_smoothing_factor = 4
        store = SequenceStore(abcd, settings=settings)
        store.set_smoothing_factor(4)
        with pytest.raises(InvalidParameter):
            store.set_smoothing_factor(5)


class TestDragGesture:
    """Tests for the store's gesture protocol."""

    def test_drag_and_drop(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.begin_drag("A")
        assert store.drag_state.phase == DragPhase.DRAGGING
        store.update_drag_target(3, DropPosition.BEFORE)
        assert store.drop() is True
        assert ids(store.get_order()) == ["B", "C", "A", "D"]
        assert store.drag_state.phase == DragPhase.IDLE

    def test_string_position_accepted(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.begin_drag("A")
        store.update_drag_target(1, "after")
        assert store.drop() is True
        assert ids(store.get_order()) == ["B", "A", "C", "D"]

    def test_unknown_drop_position_rejected(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.begin_drag("A")
        store.update_drag_target(2)
        with pytest.raises(InvalidParameter):
            store.update_drag_target(1, "middle")
        assert store.drag_state.insertion_index == 2

    def test_metrics_follow_order(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        assert store.get_derived_metrics().pacing_score == pytest.approx(92.0)
        store.begin_drag("D")
        store.update_drag_target(1)
        store.drop()
        # [1, 4, 2, 3]: changes 3, 2, 1
        assert store.get_derived_metrics().smoothed == [1, 4, 2, 3]
        assert store.get_derived_metrics().pacing_score == pytest.approx(84.0)

    def test_unknown_id_drop_is_silent(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.begin_drag("Z")
        store.update_drag_target(0)
        assert store.drop() is False
        assert ids(store.get_order()) == ["A", "B", "C", "D"]

    def test_noop_drop_keeps_metrics(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        before = store.get_derived_metrics()
        store.begin_drag("B")
        store.update_drag_target(2)
        assert store.drop() is False
        assert store.get_derived_metrics() is before

    def test_cancel(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        store.begin_drag("A")
        store.update_drag_target(3)
        store.cancel_drag()
        assert store.drop() is False
        assert ids(store.get_order()) == ["A", "B", "C", "D"]

    def test_move_up_and_down(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        assert store.move_up(0) is False
        assert store.move_down(0) is True
        assert ids(store.get_order()) == ["B", "A", "C", "D"]
        assert store.move_up(3) is True
        assert ids(store.get_order()) == ["B", "A", "D", "C"]


class TestListeners:
    """Tests for metric subscriptions."""

    def test_notified_on_change_only(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        received = []
        store.subscribe(received.append)

        store.set_smoothing_factor(0)
        store.begin_drag("B")
        store.update_drag_target(1)
        store.drop()
        assert received == []

        store.set_smoothing_factor(2)
        store.move_down(0)
        assert len(received) == 2
        assert received[-1] is store.get_derived_metrics()

    def test_unsubscribe(self, abcd, settings):
        store = SequenceStore(abcd, settings=settings)
        received = []
        unsubscribe = store.subscribe(received.append)
        unsubscribe()
        store.set_smoothing_factor(2)
        assert received == []


class TestChartPoints:
    """Tests for chart_points."""

    def test_labels_and_arc(self, znmd_scenes, settings):
        store = SequenceStore(znmd_scenes, smoothing_factor=2, settings=settings)
        points = store.chart_points(get_arc("Three-Act Structure"))
        assert len(points) == 7
        assert points[0].label == "1. Mumbai Work Life"
        assert points[0].arc_segment == "Act 1: Setup/Inciting Incident"
        assert points[6].arc_segment == "Act 3: Resolution/Climax"
        assert points[0].smoothed == pytest.approx(5.0)
        assert points[0].appeal == 4

    def test_labels_follow_reorder(self, znmd_scenes, settings):
        store = SequenceStore(znmd_scenes, settings=settings)
        store.move_down(0)
        points = store.chart_points()
        assert points[0].label == "1. Road Trip Start"
        assert points[1].label == "2. Mumbai Work Life"
        assert points[1].arc_segment is None
