"""
3D vector helpers with fixed-precision rounding.

Every function returns values rounded to PRECISION decimals so that results are
reproducible and safe to compare with ==.
"""

import math

from ..schemas import Vector3
from ..standards import PRECISION, VERTICAL_AXIS


def round_value(value: float, precision: int = PRECISION) -> float:
    """
    Scale by 10^precision, round half up, scale back. Idempotent.
    inf, nan and values too large to scale come back unchanged.
    """
    multiplier = 10 ** precision
    scaled = value * multiplier
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / multiplier


def create_vector(x: float, y: float, z: float) -> Vector3:
    """Build a Vector3 with each component pre-rounded."""
    return Vector3(x=round_value(x), y=round_value(y), z=round_value(z))


def vector_between(start: Vector3, end: Vector3) -> Vector3:
    """Vector pointing from start to end."""
    return create_vector(end.x - start.x, end.y - start.y, end.z - start.z)


def add(a: Vector3, b: Vector3) -> Vector3:
    return create_vector(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return create_vector(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vector3, scalar: float) -> Vector3:
    return create_vector(v.x * scalar, v.y * scalar, v.z * scalar)


def dot(a: Vector3, b: Vector3) -> float:
    return round_value(a.x * b.x + a.y * b.y + a.z * b.z)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return create_vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def midpoint(a: Vector3, b: Vector3) -> Vector3:
    return create_vector((a.x + b.x) / 2, (a.y + b.y) / 2, (a.z + b.z) / 2)


def magnitude(v: Vector3) -> float:
    """Euclidean length."""
    return round_value(math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z))


def normalize(v: Vector3) -> Vector3:
    """
    Unit vector in the direction of v.
    A zero vector normalizes to the zero vector instead of raising.
    """
    mag = magnitude(v)
    if mag == 0:
        return create_vector(0, 0, 0)
    return create_vector(v.x / mag, v.y / mag, v.z / mag)


def distance(a: Vector3, b: Vector3) -> float:
    """Distance between two points."""
    return magnitude(vector_between(a, b))


def angle_between(a: Vector3, b: Vector3) -> float:
    """
    Angle between two vectors in degrees.
    Returns 0 when either vector has zero length.
    """
    dot_product = dot(a, b)
    mag_a = magnitude(a)
    mag_b = magnitude(b)
    if mag_a == 0 or mag_b == 0:
        return 0.0
    cos_angle = dot_product / (mag_a * mag_b)
    # Rounding can push the cosine just outside [-1, 1]
    clamped = max(-1.0, min(1.0, cos_angle))
    return round_value(math.degrees(math.acos(clamped)))


def surface_normal(point: Vector3) -> Vector3:
    """
    Bone surface normal at a point.
    Simplified: always the vertical unit vector. No mesh data is consulted.
    """
    return create_vector(*VERTICAL_AXIS)
