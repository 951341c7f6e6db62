from game.arena.utils import box_overlap, circle_collide, clamp, hsl_color, normalize


def test_clamp():
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    assert clamp(5, 0, 10) == 5


def test_normalize_zero_vector():
    assert normalize(0, 0) == (0.0, 0.0)
    assert normalize(3, 4) == (0.6, 0.8)


def test_overlaps_are_strict():
    assert not circle_collide(0, 0, 1, 2, 0, 1)
    assert circle_collide(0, 0, 1, 1.9, 0, 1)
    assert not box_overlap(0, 0, 1, 1, -5, 5, 5)
    assert box_overlap(0, 0, 1, 0.9, -5, 5, 5)


def test_hsl_color():
    assert hsl_color(0) == (255, 0, 0)
    assert hsl_color(180) == (0, 255, 255)
    assert hsl_color(300) == (255, 0, 255)
