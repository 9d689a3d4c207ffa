"""Unit tests for the field session: seeding, clicks, drags and listeners."""

import pytest

from circlefield.config import FieldConfig
from circlefield.controller.field_controller import FieldController
from circlefield.model.color import Color
from circlefield.model.exceptions import PlacementExhausted
from circlefield.model.field import Circle
from circlefield.model.geometry_primitives import Point
from circlefield.model.merge import Merge, NoOp


class _RecordingListener:
    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def circle_added(self, circle: Circle) -> None:
        self.events.append(("added", circle))

    def circle_removed(self, circle: Circle) -> None:
        self.events.append(("removed", circle))

    def circle_moved(self, circle: Circle) -> None:
        self.events.append(("moved", circle))

    def field_reset(self) -> None:
        self.events.append(("reset", None))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]


def _controller(**overrides) -> FieldController:
    return FieldController(FieldConfig(seed=1234).with_overrides(**overrides))


def _place(ctrl: FieldController, x: float, y: float, color: Color = Color(0, 0, 0)) -> Circle:
    circle = ctrl.handle_click(Point(x, y))
    circle.color = color
    return circle


def test_seed_places_ten_separated_circles():
    ctrl = _controller()
    placed = ctrl.seed()

    assert len(placed) == 10
    assert len(ctrl.field) == 10
    for i, a in enumerate(placed):
        assert 50.0 <= a.center.x <= 550.0 and 50.0 <= a.center.y <= 550.0
        for b in placed[i + 1:]:
            assert a.distance_to(b) > 100.0


def test_reseed_replaces_previous_circles():
    ctrl = _controller()
    first = ctrl.seed()
    second = ctrl.seed(count=3)

    assert len(ctrl.field) == 3
    assert all(c not in ctrl.field for c in first)
    assert all(c in ctrl.field for c in second)


def test_same_seed_reproduces_field():
    a = [(c.center, c.color) for c in _controller().seed()]
    b = [(c.center, c.color) for c in _controller().seed()]
    assert a == b


def test_seed_on_saturated_field_raises():
    ctrl = _controller(width=150.0, height=150.0, max_attempts=100)
    with pytest.raises(PlacementExhausted):
        ctrl.seed(count=5)
    assert len(ctrl.field) == 1


def test_click_on_empty_space_adds_at_exact_point():
    ctrl = _controller()
    ctrl.seed()
    existing = list(ctrl.field)[0]

    # directly on top of an existing center: clicks skip the separation rule
    added = ctrl.handle_click(existing.center)

    assert added.center == existing.center
    assert len(ctrl.field) == 11


def test_click_on_circle_removes_it():
    ctrl = _controller()
    target = _place(ctrl, 100.0, 100.0)

    assert ctrl.handle_click(target.center, target) is target
    assert target not in ctrl.field
    assert ctrl.handle_click(target.center, target) is None


def test_drag_onto_neighbour_merges():
    ctrl = _controller()
    listener = _RecordingListener()
    moved = _place(ctrl, 100.0, 100.0, Color(255, 0, 0))
    target = _place(ctrl, 200.0, 100.0, Color(0, 0, 0))
    bystander = _place(ctrl, 400.0, 400.0)
    ctrl.add_listener(listener)

    ctrl.begin_drag(moved, Point(100.0, 100.0))
    assert ctrl.drag_to(Point(190.0, 100.0))
    result = ctrl.end_drag()

    assert isinstance(result, Merge)
    assert result.removed == (moved, target)
    assert len(ctrl.field) == 3 - 2 + 1
    merged = [c for c in ctrl.field if c is not bystander][0]
    assert merged.center == Point(195.0, 100.0)
    assert merged.color == Color(127, 0, 0)
    assert listener.kinds() == ["moved", "removed", "removed", "added"]
    assert listener.events[-1][1] is merged


def test_drag_into_empty_space_is_noop():
    ctrl = _controller()
    moved = _place(ctrl, 100.0, 100.0)
    _place(ctrl, 300.0, 300.0)

    ctrl.begin_drag(moved, Point(0.0, 0.0))
    ctrl.drag_to(Point(50.0, 0.0))

    assert ctrl.end_drag() == NoOp()
    assert moved in ctrl.field
    assert moved.center == Point(150.0, 100.0)


def test_jitter_does_not_invoke_merge():
    calls = []
    ctrl = _controller()
    original = ctrl.merge_engine.on_drag_finish
    ctrl.merge_engine.on_drag_finish = lambda *a, **kw: calls.append(a) or original(*a, **kw)

    moved = _place(ctrl, 100.0, 100.0)
    _place(ctrl, 102.0, 100.0)
    ctrl.begin_drag(moved, Point(0.0, 0.0))
    ctrl.drag_to(Point(3.0, -3.0))

    assert ctrl.end_drag() is None
    assert calls == []
    assert moved.center == Point(100.0, 100.0)
    assert len(ctrl.field) == 2


def test_merged_circle_is_not_reevaluated_in_same_drop():
    ctrl = _controller()
    moved = _place(ctrl, 100.0, 100.0)
    _place(ctrl, 130.0, 100.0)
    # close to where the merged circle lands, but farther than 25 from the drop point
    far_neighbour = _place(ctrl, 145.0, 100.0)

    ctrl.begin_drag(moved, Point(0.0, 0.0))
    ctrl.drag_to(Point(12.0, 0.0))
    result = ctrl.end_drag()

    assert len(result.removed) == 2
    assert far_neighbour in ctrl.field
    assert len(ctrl.field) == 2


def test_clear_resets_field_and_notifies():
    ctrl = _controller()
    listener = _RecordingListener()
    ctrl.add_listener(listener)
    ctrl.seed(count=2)
    ctrl.clear()

    assert len(ctrl.field) == 0
    assert listener.kinds() == ["reset", "added", "added", "reset"]


def test_removed_listener_gets_no_events():
    ctrl = _controller()
    listener = _RecordingListener()
    ctrl.add_listener(listener)
    ctrl.remove_listener(listener)
    ctrl.handle_click(Point(10.0, 10.0))
    assert listener.events == []


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        FieldConfig(margin=400.0).validate()
    with pytest.raises(ValueError):
        FieldConfig().with_overrides(seed_count=-1)
    assert FieldConfig().with_overrides(seed=None).seed is None
