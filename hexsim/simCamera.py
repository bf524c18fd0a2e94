import math

# ── Camera ────────────────────────────────────────────────────────────────────
class Camera:
    """
    World→screen for y-down pixel worlds. `focus` is the world point drawn
    at the middle of the window; `zoom` scales around it.
    """
    def __init__(self, screen_w, screen_h, zoom=1.0, focus=(0, 0)):
        self.W = int(screen_w)
        self.H = int(screen_h)
        self.zoom = float(zoom)
        self.fx = float(focus[0])
        self.fy = float(focus[1])

    def w2s(self, p) -> tuple:
        """world → screen: guaranteed plain Python (int, int)"""
        try:
            px = float(p[0])
            py = float(p[1])
        except (TypeError, ValueError, IndexError):
            return (self.W // 2, self.H // 2)
        sx = (px - self.fx) * self.zoom + self.W / 2.0
        sy = (py - self.fy) * self.zoom + self.H / 2.0
        if not (math.isfinite(sx) and math.isfinite(sy)):
            return (self.W // 2, self.H // 2)
        return (int(round(sx)), int(round(sy)))

    def scale(self, v: float) -> int:
        return max(1, int(round(float(v) * self.zoom)))
