import pytest

from pixelseek.geometry import Point, Rect, SignedPoint, Size


def test_point_defaults_to_origin():
    assert Point() == Point(0, 0)


def test_point_rejects_negative_coordinates():
    with pytest.raises(ValueError):
        Point(-1, 0)
    with pytest.raises(ValueError):
        Point(0, -5)


def test_size_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Size(-2, 3)


def test_signed_point_accepts_negative_values():
    p = SignedPoint(-10, 20)
    assert (p.x, p.y) == (-10, 20)


def test_signed_point_rejects_out_of_range():
    with pytest.raises(ValueError):
        SignedPoint(2**31, 0)
    with pytest.raises(ValueError):
        SignedPoint(0, -(2**31) - 1)


def test_rect_make_sets_fields():
    r = Rect.make(1, 2, 3, 4)
    assert r.origin == Point(1, 2)
    assert r.size == Size(3, 4)


def test_rect_make_rejects_negative():
    with pytest.raises(ValueError):
        Rect.make(0, 0, -1, 4)


def test_points_are_hashable_and_comparable():
    assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2


def test_contains_rect_itself():
    r = Rect.make(5, 5, 10, 10)
    assert r.contains_rect(r)


def test_contains_inner_rect():
    outer = Rect.make(0, 0, 10, 10)
    assert outer.contains_rect(Rect.make(2, 3, 4, 5))


def test_does_not_contain_overflowing_rect():
    outer = Rect.make(0, 0, 10, 10)
    assert not outer.contains_rect(Rect.make(8, 0, 3, 1))
    assert not outer.contains_rect(Rect.make(0, 8, 1, 3))


def test_does_not_contain_rect_left_of_origin():
    outer = Rect.make(5, 5, 10, 10)
    assert not outer.contains_rect(Rect.make(4, 5, 2, 2))


def test_rect_is_immutable():
    r = Rect.make(0, 0, 1, 1)
    with pytest.raises(AttributeError):
        r.origin = Point(1, 1)  # type: ignore[misc]