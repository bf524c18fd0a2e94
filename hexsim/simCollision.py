from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from hexsim.simBall import Ball
from hexsim.simMath import add, clamp, dot, length, normalize, scale, sub, vec2
from hexsim.simPolygon import RotatingPolygon

VERTEX_FALLBACK_NORMAL = (0.0, -1.0)

# ── Contact record ───────────────────────────────────────────────────────────
@dataclass
class Contact:
    """One penetration found during a collision pass."""
    kind: str               # 'edge' or 'vertex'
    index: int              # edge index, or vertex index
    point: np.ndarray       # closest point on the wall feature
    normal: np.ndarray      # points from the wall toward the ball center
    depth: float            # radius - distance
    wall_velocity: np.ndarray
    resolved: bool = False

# ── Contact response ─────────────────────────────────────────────────────────
def _respond(ball: Ball, contact: Contact, dist: float,
             restitution: float, margin: float) -> bool:
    """
    Reflect the ball velocity in the rest frame of the moving wall.
    Separating (or resting) relative motion is left alone.
    """
    rel = sub(ball.vel, contact.wall_velocity)
    vn = dot(rel, contact.normal)
    if vn >= 0:
        return False

    reflected = sub(rel, scale(contact.normal, (1 + restitution) * vn))
    ball.vel = add(reflected, contact.wall_velocity)

    penetration = ball.radius - dist
    ball.pos = add(ball.pos, scale(contact.normal, penetration + margin))
    return True

def resolve_edge(ball: Ball, polygon: RotatingPolygon, index: int,
                 a: np.ndarray, b: np.ndarray,
                 restitution: float, margin: float) -> Optional[Contact]:
    """Segment contact between the ball and edge a→b of the polygon."""
    edge = sub(b, a)
    edge_len_sq = dot(edge, edge)
    t = clamp(dot(sub(ball.pos, a), edge) / edge_len_sq, 0.0, 1.0)
    p = add(a, scale(edge, t))

    diff = sub(ball.pos, p)
    dist = length(diff)
    if dist >= ball.radius:
        return None

    if dist == 0:
        # center on the wall line: CCW winding makes this perpendicular inward
        normal = normalize(vec2(-edge[1], edge[0]))
    else:
        normal = normalize(diff)

    contact = Contact('edge', index, p, normal, ball.radius - dist,
                      polygon.velocity_at(p))
    contact.resolved = _respond(ball, contact, dist, restitution, margin)
    return contact

def resolve_vertex(ball: Ball, polygon: RotatingPolygon, index: int,
                   point: np.ndarray,
                   restitution: float, margin: float) -> Optional[Contact]:
    """Point contact between the ball and a single polygon vertex."""
    diff = sub(ball.pos, point)
    dist = length(diff)
    if dist >= ball.radius:
        return None

    if dist == 0:
        normal = vec2(*VERTEX_FALLBACK_NORMAL)
    else:
        normal = normalize(diff)

    contact = Contact('vertex', index, np.array(point, dtype=float), normal,
                      ball.radius - dist, polygon.velocity_at(point))
    contact.resolved = _respond(ball, contact, dist, restitution, margin)
    return contact

# ── Polygon pass ─────────────────────────────────────────────────────────────
def resolve_polygon(ball: Ball, polygon: RotatingPolygon,
                    restitution: float, margin: float,
                    merge_contacts: bool = False) -> List[Contact]:
    """
    Sequential pass over every edge, then both of its endpoints.

    Each check sees the ball as left by the previous one, so a corner can
    be resolved more than once in a frame. merge_contacts drops the
    endpoint checks; the clamped edge check already covers the corners.
    """
    contacts: List[Contact] = []
    n = polygon.sides
    for i, a, b in polygon.edges():
        c = resolve_edge(ball, polygon, i, a, b, restitution, margin)
        if c is not None:
            contacts.append(c)
        if merge_contacts:
            continue
        for j, point in ((i, a), ((i + 1) % n, b)):
            c = resolve_vertex(ball, polygon, j, point, restitution, margin)
            if c is not None:
                contacts.append(c)
    return contacts
