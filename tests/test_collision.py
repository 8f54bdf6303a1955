import pytest

from afterburn.collision import collide, inside_rect, rect_collide


def test_point_on_edge_is_inside():
    assert inside_rect(10, 10, 0, 0, 10, 10) is True
    assert inside_rect(0, 0, 0, 0, 10, 10) is True


def test_point_outside():
    assert inside_rect(11, 5, 0, 0, 10, 10) is False
    assert inside_rect(5, -1, 0, 0, 10, 10) is False


def test_small_inside_big_is_one_sided():
    small = (5, 5, 2, 2)
    big = (0, 0, 20, 20)
    assert rect_collide(*small, *big) is True
    assert rect_collide(*big, *small) is False
    assert collide(*small, *big) is True


def test_disjoint_rectangles_do_not_collide():
    assert collide(0, 0, 5, 5, 100, 100, 5, 5) is False


def test_cross_shape_has_no_corner_overlap():
    # A plus-shaped overlap has no corner inside the other rectangle.
    assert collide(10, 0, 5, 30, 0, 10, 30, 5) is False


@pytest.mark.parametrize(
    "a, b",
    [
        ((0, 0, 10, 10), (5, 5, 10, 10)),
        ((0, 0, 10, 10), (50, 50, 1, 1)),
        ((3, 3, 1, 1), (0, 0, 10, 10)),
        ((0, 0, 10, 10), (10, 10, 5, 5)),
    ],
)
def test_collide_is_symmetric(a, b):
    assert collide(*a, *b) == collide(*b, *a)


def test_touching_corners_collide():
    assert collide(0, 0, 10, 10, 10, 10, 5, 5) is True