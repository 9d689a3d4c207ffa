"""Unit tests for the Field collection."""

import pytest

from circlefield.model.color import Color
from circlefield.model.field import Circle, Field
from circlefield.model.geometry_primitives import Point, Rect


def _field() -> Field:
    return Field(bounds=Rect(0.0, 0.0, 600.0, 600.0))


def test_membership_is_by_identity():
    field = _field()
    a = field.add(Circle(center=Point(1.0, 1.0), color=Color(5, 5, 5)))
    twin = Circle(center=Point(1.0, 1.0), color=Color(5, 5, 5))

    assert a in field
    assert twin not in field
    assert a != twin
    assert twin.id is None


def test_ids_are_handed_out_per_field():
    first, second = _field(), _field()
    a = first.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))
    b = first.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))
    c = second.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))

    assert (a.id, b.id) == (1, 2)
    # a second session starts its own numbering
    assert c.id == 1

    first.clear()
    assert first.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0))).id == 3


def test_remove_by_identity_keeps_order_of_the_rest():
    field = _field()
    a, b, c = (field.add(Circle(center=Point(float(i), 0.0), color=Color(0, 0, 0))) for i in range(3))

    field.remove(c, a)

    assert list(field) == [b]


def test_remove_non_member_is_atomic():
    field = _field()
    a = field.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))
    stranger = Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0))

    with pytest.raises(ValueError):
        field.remove(a, stranger)
    with pytest.raises(ValueError):
        field.remove(a, a)
    assert a in field


def test_adding_twice_is_rejected():
    field = _field()
    a = field.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))
    with pytest.raises(ValueError):
        field.add(a)


def test_iteration_is_a_snapshot():
    field = _field()
    field.extend(Circle(center=Point(float(i), 0.0), color=Color(0, 0, 0)) for i in range(4))

    for circle in field:
        field.remove(circle)

    assert len(field) == 0


def test_others_excludes_only_the_given_circle():
    field = _field()
    a = field.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))
    b = field.add(Circle(center=Point(0.0, 0.0), color=Color(0, 0, 0)))
    assert field.others(a) == [b]
