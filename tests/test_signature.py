import pytest

from core.models.common import Point, Signature


def test_append_keeps_drawing_order():
    sig = Signature.from_points([(1, 1), (2, 2)])
    sig.append((3, 3))
    assert sig.to_list() == ((1, 1), (2, 2), (3, 3))
    assert all(isinstance(p, Point) for p in sig.to_list())


def test_new_signature_is_empty():
    sig = Signature()
    assert sig.is_empty()
    assert len(sig) == 0
    assert sig.to_list() == ()


def test_to_list_is_read_only_snapshot():
    sig = Signature.from_points([(0, 0)])
    view = sig.to_list()
    assert isinstance(view, tuple)
    sig.append(Point(5, 6))
    assert view == ((0, 0),)
    assert len(sig) == 2


def test_duplicates_are_kept():
    sig = Signature()
    for _ in range(3):
        sig.append((7, 7))
    assert sig.to_list() == ((7, 7),) * 3


def test_replace_swaps_whole_sequence():
    sig = Signature.from_points([(1, 2), (3, 4)])
    sig.replace([(9, 9)])
    assert sig.to_list() == (Point(9, 9),)
    sig.replace([])
    assert sig.is_empty()


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5


@pytest.mark.parametrize("bad", [(1.5, 2), ("1", 2), (True, 0)])
def test_append_rejects_non_integer_coordinates(bad):
    sig = Signature()
    with pytest.raises(TypeError):
        sig.append(bad)
    assert sig.is_empty()
