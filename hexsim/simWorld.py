from dataclasses import dataclass
from typing import List

import numpy as np

from hexsim.simBall import Ball
from hexsim.simCollision import Contact, resolve_polygon
from hexsim.simConfig import PhysicsParams, SimConfig
from hexsim.simPolygon import RotatingPolygon

# ── Render snapshot ───────────────────────────────────────────────────────────
@dataclass
class RenderState:
    polygon_vertices: np.ndarray   # (N,2), CCW
    ball_position:    np.ndarray
    ball_radius:      float
    angle:            float
    time:             float

# ── World ─────────────────────────────────────────────────────────────────────
class World:
    """One ball inside one spinning polygon. Owns all simulation state."""

    def __init__(self, ball: Ball, polygon: RotatingPolygon,
                 params: PhysicsParams = None):
        self.ball = ball
        self.polygon = polygon
        self.params = params if params is not None else PhysicsParams()
        self.time = 0.0
        self.frame = 0
        self.contacts: List[Contact] = []

        self._initial_ball = ball.copy()
        self._initial_angle = polygon.angle

    @classmethod
    def from_config(cls, cfg: SimConfig) -> "World":
        h, b = cfg.hexagon, cfg.ball
        polygon = RotatingPolygon(h.center, h.radius, h.sides,
                                  angle=h.angle, angular_speed=h.angular_speed)
        ball = Ball(b.position, b.velocity, b.radius)
        return cls(ball, polygon, cfg.physics)

    def reset(self):
        self.ball = self._initial_ball.copy()
        self.polygon.angle = self._initial_angle
        self.time = 0.0
        self.frame = 0
        self.contacts = []

    def step(self, dt: float) -> List[Contact]:
        p = self.params
        substeps = max(1, int(p.substeps))
        sub_dt = dt / substeps
        contacts: List[Contact] = []
        for _ in range(substeps):
            self.polygon.advance(sub_dt)
            self.ball.integrate(sub_dt, p.gravity, p.damping, p.clamp_damping)
            contacts += resolve_polygon(self.ball, self.polygon,
                                        p.restitution, p.margin,
                                        merge_contacts=p.merge_contacts)
        self.time += dt
        self.frame += 1
        self.contacts = contacts
        return contacts

    def render_state(self) -> RenderState:
        return RenderState(
            polygon_vertices=self.polygon.world_vertices(),
            ball_position=self.ball.pos.copy(),
            ball_radius=self.ball.radius,
            angle=self.polygon.angle,
            time=self.time,
        )
