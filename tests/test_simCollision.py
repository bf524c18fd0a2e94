import math

import numpy as np
import pytest

from hexsim.simBall import Ball
from hexsim.simCollision import resolve_edge, resolve_polygon, resolve_vertex
from hexsim.simPolygon import RotatingPolygon

RESTITUTION = 0.9
MARGIN = 0.1
APOTHEM = 100 * math.sin(math.pi / 3)


def make_hexagon(omega=0.0):
    # edge 1 is the bottom wall, y = +APOTHEM (y grows downward)
    return RotatingPolygon((0, 0), 100, 6, angle=0.0, angular_speed=omega)


def edge(poly, i):
    return list(poly.edges())[i]


def test_edge_hit_reflects_with_restitution():
    poly = make_hexagon()
    i, a, b = edge(poly, 1)
    ball = Ball((0, APOTHEM - 5), (0, 50), 10)

    c = resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN)

    assert c is not None and c.kind == 'edge' and c.resolved
    assert c.normal == pytest.approx([0.0, -1.0])
    assert c.depth == pytest.approx(5.0)
    assert ball.vel == pytest.approx([0.0, -45.0])
    # pushed out by penetration + margin
    assert ball.pos[1] == pytest.approx(APOTHEM - 10 - MARGIN)


def test_no_contact_when_clear_of_wall():
    poly = make_hexagon()
    i, a, b = edge(poly, 1)
    ball = Ball((0, APOTHEM - 12), (0, 50), 10)
    assert resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN) is None
    assert ball.vel.tolist() == [0.0, 50.0]


def test_separating_contact_is_left_alone():
    poly = make_hexagon()
    i, a, b = edge(poly, 1)
    ball = Ball((0, APOTHEM - 5), (3, -20), 10)
    pos = ball.pos.copy()

    c = resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN)

    assert c is not None and not c.resolved
    assert ball.vel.tolist() == [3.0, -20.0]
    assert ball.pos.tolist() == pos.tolist()


def test_stationary_wall_never_adds_energy():
    poly = make_hexagon()
    i, a, b = edge(poly, 1)
    for vel in [(30, 50), (-80, 5), (0, 300)]:
        ball = Ball((10, APOTHEM - 4), vel, 10)
        before = ball.kinetic_energy()
        c = resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN)
        assert c.resolved
        assert ball.kinetic_energy() <= before


def test_stationary_vertex_never_adds_energy():
    poly = make_hexagon()
    vertex = poly.world_vertices()[0]   # (100, 0)
    offset = np.array([-6.0, 3.6])      # 7 px from the corner
    normal = offset / np.linalg.norm(offset)
    tangent = np.array([normal[1], -normal[0]])
    # every velocity closes on the corner and also slides along it
    for vel in [(40, -30), (60, 60), (100, 150)]:
        ball = Ball(vertex + offset, vel, 10)
        before = ball.kinetic_energy()
        slide = float(np.dot(ball.vel, tangent))

        c = resolve_vertex(ball, poly, 0, vertex, RESTITUTION, MARGIN)

        assert c.resolved
        assert c.normal == pytest.approx(normal)
        assert ball.kinetic_energy() <= before
        assert float(np.dot(ball.vel, tangent)) == pytest.approx(slide)


def test_elastic_stationary_wall_keeps_speed():
    poly = make_hexagon()
    i, a, b = edge(poly, 1)
    ball = Ball((10, APOTHEM - 4), (30, 50), 10)
    resolve_edge(ball, poly, i, a, b, 1.0, MARGIN)
    assert ball.vel == pytest.approx([30.0, -50.0])


def test_moving_wall_kicks_resting_ball():
    # ω = -1: the bottom wall at x=40 moves up into the ball at 40 px/s
    poly = make_hexagon(omega=-1.0)
    i, a, b = edge(poly, 1)
    ball = Ball((40, APOTHEM - 5), (0, 0), 10)

    c = resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN)

    assert c.resolved
    assert c.wall_velocity == pytest.approx([APOTHEM, -40.0])
    assert ball.vel == pytest.approx([0.0, -(1 + RESTITUTION) * 40.0])


def test_receding_wall_does_not_grab_ball():
    poly = make_hexagon(omega=1.0)
    i, a, b = edge(poly, 1)
    ball = Ball((40, APOTHEM - 5), (0, 0), 10)

    c = resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN)

    assert not c.resolved
    assert ball.vel.tolist() == [0.0, 0.0]


def test_center_on_edge_line_uses_edge_perpendicular():
    poly = make_hexagon()
    i, a, b = edge(poly, 0)
    ball = Ball(a, (50, 0), 10)

    c = resolve_edge(ball, poly, i, a, b, RESTITUTION, MARGIN)

    e = b - a
    perp = np.array([-e[1], e[0]]) / np.linalg.norm(e)
    assert c.point.tolist() == a.tolist()
    assert c.depth == 10.0
    assert c.normal == pytest.approx(perp)
    assert c.resolved
    assert ball.pos == pytest.approx(a + perp * (10 + MARGIN))
    assert np.all(np.isfinite(ball.vel))


def test_vertex_fallback_normal_at_zero_distance():
    poly = make_hexagon()
    vertex = poly.world_vertices()[0]
    ball = Ball(vertex, (0, 5), 10)

    c = resolve_vertex(ball, poly, 0, vertex, RESTITUTION, MARGIN)

    assert c.kind == 'vertex'
    assert c.normal.tolist() == [0.0, -1.0]
    assert c.resolved
    assert ball.vel == pytest.approx([0.0, -4.5])
    assert ball.pos == pytest.approx(vertex + np.array([0.0, -10 - MARGIN]))


def test_vertex_contact_uses_vertex_wall_velocity():
    poly = make_hexagon(omega=2.0)
    vertex = poly.world_vertices()[0]   # (100, 0)
    ball = Ball(vertex + np.array([-5.0, 0.0]), (0, 0), 10)

    c = resolve_vertex(ball, poly, 0, vertex, RESTITUTION, MARGIN)

    assert c.wall_velocity == pytest.approx([0.0, 200.0])
    # tangential wall motion only, nothing to reflect
    assert not c.resolved


def test_polygon_pass_is_empty_in_the_middle():
    poly = make_hexagon(omega=1.0)
    ball = Ball((0, 0), (10, 10), 10)
    assert resolve_polygon(ball, poly, RESTITUTION, MARGIN) == []
    assert ball.vel.tolist() == [10.0, 10.0]


def test_polygon_pass_order_and_merge_flag():
    poly = make_hexagon()
    vertex = poly.world_vertices()[0]

    ball = Ball(vertex, (0, 0), 10)
    contacts = resolve_polygon(ball, poly, RESTITUTION, MARGIN)
    assert [(c.kind, c.index) for c in contacts] == [
        ('edge', 0), ('vertex', 0), ('edge', 5), ('vertex', 0)]
    assert all(c.normal.tolist() == [0.0, -1.0]
               for c in contacts if c.kind == 'vertex')

    ball = Ball(vertex, (0, 0), 10)
    merged = resolve_polygon(ball, poly, RESTITUTION, MARGIN, merge_contacts=True)
    assert [(c.kind, c.index) for c in merged] == [('edge', 0), ('edge', 5)]


def test_polygon_pass_sees_earlier_corrections():
    # moving into the corner at vertex 0: the first hit turns the ball,
    # later checks are made against the corrected state
    poly = make_hexagon()
    ball = Ball((92, 0), (50, 0), 10)
    contacts = resolve_polygon(ball, poly, RESTITUTION, MARGIN)

    assert contacts[0].kind == 'edge' and contacts[0].index == 0
    assert contacts[0].resolved
    assert ball.vel[0] < 0
    assert ball.kinetic_energy() <= 0.5 * 50 ** 2
