import argparse
import os
import sys
import time

import pygame

from hexsim.simCamera import Camera
from hexsim.simConfig import SimConfig, read_config, write_config
from hexsim.simEvents import contact_event, log_events, record_event
from hexsim.simRender import draw_frame
from hexsim.simWorld import World

# ── Main ──────────────────────────────────────────────────────────────────────

"""
Bouncing Ball in a Rotating Hexagon
===================================
Ball: gravity + linear damping, semi-implicit Euler
Walls: regular polygon spinning at constant angular speed
Collisions: relative-velocity reflection against edges and corners

Controls:
  ESC  - quit
  R    - reset
  SPACE- pause/unpause
"""

def load_config(path):
    if path is None:
        return SimConfig()
    if not os.path.exists(path):
        print(f"ERROR: Config not found: {path}")
        sys.exit(1)
    try:
        return read_config(path)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

def make_camera(cfg: SimConfig) -> Camera:
    w = cfg.window
    return Camera(w.width, w.height, zoom=w.zoom, focus=cfg.hexagon.center)

def hud_lines(world: World, paused: bool):
    b = world.ball
    return [
        "Ball bouncing inside a spinning hexagon",
        f"t = {world.time:.2f}s   {'PAUSED' if paused else 'RUNNING'}",
        f"ball pos: ({b.pos[0]:7.1f}, {b.pos[1]:7.1f})  vel: ({b.vel[0]:+7.1f}, {b.vel[1]:+7.1f})",
        "ESC → quit    R → reset    SPACE → pause",
    ]

def print_state(world: World):
    s = world.render_state()
    print(f"frame {world.frame}  t = {s.time:.4f}s  angle = {s.angle:.4f} rad")
    print(f"  ball pos = ({s.ball_position[0]:.4f}, {s.ball_position[1]:.4f})"
          f"  vel = ({world.ball.vel[0]:.4f}, {world.ball.vel[1]:.4f})"
          f"  radius = {s.ball_radius:g}")

def step_and_log(world: World, dt: float, t0, verbose: bool):
    contacts = world.step(dt)
    if verbose and contacts:
        log_events([contact_event(c, world.frame, t0) for c in contacts], t0)

def run_headless(world: World, cfg: SimConfig, frames: int, verbose: bool):
    dt = 1.0 / cfg.window.fps
    t0 = time.perf_counter()
    log_events([record_event("start", t0, frames=frames, dt=round(dt, 6))], t0)
    for _ in range(frames):
        step_and_log(world, dt, t0, verbose)
    print_state(world)
    log_events([record_event("stop", t0, frames=world.frame)], t0)

def run_window(world: World, cfg: SimConfig, frames, verbose: bool):
    w = cfg.window
    pygame.init()
    screen = pygame.display.set_mode((w.width, w.height))
    pygame.display.set_caption(w.title)
    clock = pygame.time.Clock()
    font  = pygame.font.SysFont("monospace", 14)
    cam = make_camera(cfg)

    t0 = time.perf_counter()
    log_events([record_event("start", t0, fps=w.fps)], t0)
    paused = False
    running = True
    clock.tick(w.fps)

    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            if ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                if ev.key == pygame.K_SPACE:
                    paused = not paused
                if ev.key == pygame.K_r:
                    world.reset()
                    log_events([record_event("reset", t0)], t0)

        dt = min(clock.tick(w.fps) / 1000.0, w.max_dt)
        if not paused and running:
            step_and_log(world, dt, t0, verbose)

        draw_frame(screen, cam, world.render_state(), font, hud_lines(world, paused))
        pygame.display.flip()

        if frames is not None and world.frame >= frames:
            running = False

    pygame.quit()
    log_events([record_event("stop", t0, frames=world.frame)], t0)

def build_parser():
    parser = argparse.ArgumentParser(description="Bouncing ball in a rotating hexagon")
    parser.add_argument("--config", default=None,
                        help="YAML settings file (defaults are built in)")
    parser.add_argument("--dump-config", default=None, metavar="PATH",
                        help="Write the effective settings to PATH and exit")
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window and print the final state")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames (default: 600 headless)")
    parser.add_argument("--verbose", action="store_true",
                        help="Print every contact event")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)

    if args.dump_config:
        write_config(cfg, args.dump_config)
        print(f"Wrote settings to {args.dump_config}")
        return

    world = World.from_config(cfg)
    if args.headless:
        frames = args.frames if args.frames is not None else 600
        run_headless(world, cfg, frames, args.verbose)
    else:
        run_window(world, cfg, args.frames, args.verbose)

if __name__ == "__main__":
    main()
