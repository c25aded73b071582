from transformview.view.rect import Rect


def test_default_is_zero_rect_at_origin() -> None:
    r = Rect()
    assert (r.x, r.y, r.width, r.height) == (0, 0, 0, 0)
    assert r.center == (0, 0)


def test_center() -> None:
    assert Rect(10, 20, 100, 50).center == (60.0, 45.0)


def test_degenerate_sizes_are_allowed() -> None:
    assert Rect(5, 5, 0, 0).center == (5.0, 5.0)
    assert Rect(0, 0, -10, 4).center == (-5.0, 2.0)
