from ..schemas import Vector3
from ..standards import BONE_SLOPE_FACTOR, VERTICAL_AXIS
from .vector_math import angle_between, create_vector, round_value


def calculate_angulation(box_axis: Vector3, bone_slope: float, factor: float = BONE_SLOPE_FACTOR) -> float:
    """
    Implant angle in degrees: tilt of the box axis from vertical plus a
    weighted share of the bone surface slope. Not clamped.
    """
    box_angle = angle_between(box_axis, create_vector(*VERTICAL_AXIS))
    return round_value(box_angle + bone_slope * factor)
