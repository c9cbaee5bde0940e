"""
Safety checks on a computed plan.

UnsafeGeometryError is raised by the pipeline when a site cannot take an
implant under the golden rules. compute_safety_margins reports how much
clearance the recommended implant actually leaves.
"""

from ..schemas import BoundingBox, ImplantSpec, SafetyMargins
from .bounding_box import is_inverted
from .vector_math import round_value


class UnsafeGeometryError(ValueError):
    """Landmarks leave no room for a safe implant."""


def check_vertical_clearance(box: BoundingBox) -> None:
    """Raise when the nerve and crest margins overlap."""
    if is_inverted(box):
        raise UnsafeGeometryError(
            f"No vertical clearance: box bottom {box.min.y} mm (nerve + margin) "
            f"is above box top {box.max.y} mm (crest - margin)"
        )


def compute_safety_margins(
    box: BoundingBox,
    spec: ImplantSpec,
    crest_level: float,
    nerve_level: float,
) -> SafetyMargins:
    """
    Clearance from the implant body to nerve, crest and buccal wall (mm).

    The implant is treated as a vertical cylinder of spec.length centered on
    spec.position. Negative values mean the implant crosses the landmark.
    """
    half_length = spec.length / 2
    apex_y = spec.position.y - half_length
    platform_y = spec.position.y + half_length
    buccal_edge_z = spec.position.z + spec.diameter / 2

    return SafetyMargins(
        to_nerve=round_value(apex_y - nerve_level),
        to_crest=round_value(crest_level - platform_y),
        to_buccal=round_value(box.max.z - buccal_edge_z),
    )
