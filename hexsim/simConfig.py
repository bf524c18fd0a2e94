from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

# ── Settings ──────────────────────────────────────────────────────────────────
@dataclass
class PhysicsParams:
    gravity:        float = 400.0   # px/s^2, +y is down
    damping:        float = 0.1     # fraction of velocity lost per second
    restitution:    float = 0.9     # 1 = elastic
    margin:         float = 0.1     # px pushed past the wall after a hit
    substeps:       int   = 1
    clamp_damping:  bool  = False
    merge_contacts: bool  = False

@dataclass
class HexagonSettings:
    center:        Tuple[float, float] = (400.0, 300.0)
    radius:        float = 200.0
    sides:         int   = 6
    angle:         float = 0.0
    angular_speed: float = math.pi / 4

@dataclass
class BallSettings:
    position: Tuple[float, float] = (400.0, 200.0)
    velocity: Tuple[float, float] = (100.0, 0.0)
    radius:   float = 10.0

@dataclass
class WindowSettings:
    width:  int   = 800
    height: int   = 600
    fps:    int   = 60
    max_dt: float = 1 / 20.0
    zoom:   float = 1.0     # screen px per world px, about the hexagon center
    title:  str   = "Bouncing Ball in a Rotating Hexagon"

@dataclass
class SimConfig:
    physics: PhysicsParams   = field(default_factory=PhysicsParams)
    hexagon: HexagonSettings = field(default_factory=HexagonSettings)
    ball:    BallSettings    = field(default_factory=BallSettings)
    window:  WindowSettings  = field(default_factory=WindowSettings)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        # yaml.safe_dump has no representer for tuples
        for section in d.values():
            for key, value in section.items():
                if isinstance(value, tuple):
                    section[key] = list(value)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SimConfig":
        if d is None:
            return cls()
        if not isinstance(d, dict):
            raise ValueError(f"config must be a mapping, got {type(d).__name__}")

        cfg = cls()
        sections = {f.name for f in fields(cls)}
        for name, values in d.items():
            if name not in sections:
                raise ValueError(f"unknown config section: {name}")
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ValueError(f"config section '{name}' must be a mapping")
            _apply(getattr(cfg, name), name, values)
        return cfg

def _apply(section, name: str, values: Dict[str, Any]):
    known = {f.name: f for f in fields(section)}
    for key, value in values.items():
        if key not in known:
            raise ValueError(f"unknown config key: {name}.{key}")
        setattr(section, key, _coerce(getattr(section, key), f"{name}.{key}", value))

def _coerce(current, where: str, value):
    if isinstance(current, tuple):
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError(f"config key {where} must be a 2-element list")
        return tuple(_float(where, v) for v in value)
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise ValueError(f"config key {where} must be true or false")
        return value
    if isinstance(current, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"config key {where} must be an integer")
        return value
    if isinstance(current, float):
        return _float(where, value)
    if not isinstance(value, str):
        raise ValueError(f"config key {where} must be a string")
    return value

def _float(where: str, value):
    # yaml booleans are ints to python; "1.5" strings are not numbers here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"config key {where} must be a number")
    return float(value)

# ── Read / write yaml ─────────────────────────────────────────────────────────
def read_config(path) -> SimConfig:
    with open(path, "r") as f:
        try:
            d = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"bad yaml in {path}: {e}") from e
    return SimConfig.from_dict(d)

def write_config(cfg: SimConfig, path):
    with open(Path(path), "w") as f:
        yaml.safe_dump(
            cfg.to_dict(),
            f,
            sort_keys=False,
            default_flow_style=False
        )
