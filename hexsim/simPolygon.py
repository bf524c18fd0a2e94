import math

import numpy as np

from hexsim.simMath import cross2_sv, sub

# ── Rotating Polygon ─────────────────────────────────────────────────────────
class RotatingPolygon:
    """
    Regular n-gon spinning rigidly about its own center at constant speed.

    Vertices are derived from the current angle on every call, CCW from
    `angle`; edge i runs from vertex i to vertex (i+1) % n.
    """
    def __init__(self,
                 center,
                 radius: float,
                 sides: int = 6,
                 angle: float = 0.0,
                 angular_speed: float = math.pi / 4):
        self.center = np.array(center, dtype=float)
        self.radius = float(radius)
        self.sides = int(sides)
        self.angle = float(angle)                  # radians, unbounded
        self.angular_speed = float(angular_speed)  # rad/s

    def advance(self, dt: float):
        self.angle += self.angular_speed * dt

    def world_vertices(self) -> np.ndarray:
        n = self.sides
        a = self.angle + 2.0 * math.pi * np.arange(n) / n
        verts = np.empty((n, 2))
        verts[:, 0] = self.center[0] + self.radius * np.cos(a)
        verts[:, 1] = self.center[1] + self.radius * np.sin(a)
        return verts

    def edges(self):
        verts = self.world_vertices()
        n = len(verts)
        for i in range(n):
            yield i, verts[i], verts[(i + 1) % n]

    def velocity_at(self, point_world: np.ndarray) -> np.ndarray:
        """Linear velocity of the rigid polygon at a world point (ω × r)."""
        r = sub(point_world, self.center)
        return cross2_sv(self.angular_speed, r)
