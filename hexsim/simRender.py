import pygame

from hexsim.simCamera import Camera
from hexsim.simWorld import RenderState

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BACKGROUND = (0, 0, 0)

def _ipt(p) -> tuple:
    """Guarantee plain Python (int, int) clamped to screen-safe range."""
    def toint(v):
        f = float(v)
        f = max(-32768.0, min(32767.0, f))
        return int(round(f))
    return (toint(p[0]), toint(p[1]))

def draw_polygon(surf, cam: Camera, state: RenderState, color=WHITE):
    pts = [_ipt(cam.w2s(v)) for v in state.polygon_vertices]
    if len(pts) >= 3:
        pygame.draw.polygon(surf, color, pts, 1)

def draw_ball(surf, cam: Camera, state: RenderState, color=RED):
    cx, cy = _ipt(cam.w2s(state.ball_position))
    pygame.draw.circle(surf, color, (cx, cy), cam.scale(state.ball_radius))

def draw_hud(surf, font, lines, color=WHITE):
    for row, text in enumerate(lines):
        img = font.render(text, True, color)
        surf.blit(img, (10, 10 + row*18))

def draw_frame(surf, cam: Camera, state: RenderState, font=None, lines=()):
    surf.fill(BACKGROUND)
    draw_polygon(surf, cam, state)
    draw_ball(surf, cam, state)
    if font is not None:
        draw_hud(surf, font, lines)
