import math

import numpy as np

# ── Vector helpers ──────────────────────────────────────────────────────────
# Vectors are float arrays of shape (2,). Every helper returns a new array.

def vec2(x: float, y: float) -> np.ndarray:
    return np.array([x, y], dtype=float)

def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)

def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) - np.asarray(b, dtype=float)

def scale(v: np.ndarray, s: float) -> np.ndarray:
    return np.asarray(v, dtype=float) * s

def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(a[0]*b[0] + a[1]*b[1])

def length(v: np.ndarray) -> float:
    return math.hypot(float(v[0]), float(v[1]))

def normalize(v: np.ndarray) -> np.ndarray:
    """Unit vector along v, or the zero vector when v has no length."""
    l = length(v)
    if l == 0:
        return np.zeros(2)
    return np.array([v[0] / l, v[1] / l], dtype=float)

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x

# ── Rotation helpers ────────────────────────────────────────────────────────
def cross2_sv(s: float, v: np.ndarray) -> np.ndarray:
    """scalar × vector cross (ω × r for a rotation about the origin)"""
    return np.array([-s*v[1], s*v[0]], dtype=float)
