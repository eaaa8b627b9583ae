from ball_blast.utils import clamp, circle_rect_collide


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_circle_inside_rect_overlaps():
    assert circle_rect_collide(50, 50, 8, 0, 0, 100, 100)
    # Even a circle bigger than the rect, centered inside it
    assert circle_rect_collide(50, 50, 500, 40, 40, 20, 20)


def test_circle_far_away_does_not_overlap():
    assert not circle_rect_collide(300, 300, 8, 0, 0, 100, 100)


def test_bounding_box_disjoint_never_overlaps():
    r = 8
    for cx, cy in [(-9, 50), (109, 50), (50, -9), (50, 109), (-9, -9), (110, 110)]:
        assert not circle_rect_collide(cx, cy, r, 0, 0, 100, 100)


def test_edge_contact_is_not_overlap():
    # Distance exactly equal to the radius
    assert not circle_rect_collide(108, 50, 8, 0, 0, 100, 100)
    assert circle_rect_collide(107.9, 50, 8, 0, 0, 100, 100)


def test_corner_uses_true_distance():
    # Bounding boxes intersect but the corner is 5*sqrt(2) ~ 7.07 away
    assert circle_rect_collide(-5, -5, 8, 0, 0, 100, 100)
    assert not circle_rect_collide(-5, -5, 7, 0, 0, 100, 100)
