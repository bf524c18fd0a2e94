import numpy as np

# ── Ball ─────────────────────────────────────────────────────────────────────
class Ball:
    def __init__(self, pos, vel=(0.0, 0.0), radius: float = 10.0):
        self.pos = np.array(pos, dtype=float)
        self.vel = np.array(vel, dtype=float)
        self.radius = float(radius)

    def integrate(self, dt: float, gravity: float, damping: float,
                  clamp_damping: bool = False):
        """
        Semi-implicit Euler: velocity first (gravity on +y, screen-down),
        then position, then linear damping of the new velocity.
        """
        self.vel[1] += gravity * dt
        self.pos += self.vel * dt

        factor = 1.0 - damping * dt
        if clamp_damping:
            # d*dt >= 1 would otherwise flip the velocity
            factor = min(max(factor, 0.0), 1.0)
        self.vel *= factor

    def kinetic_energy(self) -> float:
        """Per unit mass."""
        return 0.5 * float(np.dot(self.vel, self.vel))

    def copy(self) -> "Ball":
        return Ball(self.pos.copy(), self.vel.copy(), self.radius)
