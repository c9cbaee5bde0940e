"""
Full placement pipeline: raw landmark scalars -> bounding box -> implant spec.

Fixed order:
1. Bounding box with crest/nerve margins (reject if inverted)
2. Length from box height (reject undersize when configured)
3. Diameter from box width
4. Angle from box axis + bone slope
5. Position = box center + lingual offset
6. Direction = vertical
"""

import logging

from ..config import settings
from ..schemas import BoundingBox, BoneData, CalculationResult, ImplantSpec
from ..standards import (
    CREST_MARGIN,
    SAFETY_MARGIN_NERVE,
    BONE_SLOPE_FACTOR,
    DEFAULT_LINGUAL_VECTOR,
    VERTICAL_AXIS,
)
from .angulation import calculate_angulation
from .bounding_box import calculate_bounding_box
from .offset import apply_offset
from .safety import UnsafeGeometryError, check_vertical_clearance, compute_safety_margins
from .sizing import determine_diameter, determine_length, length_fits, safe_length
from .vector_math import create_vector, normalize, round_value, surface_normal

logger = logging.getLogger(__name__)


def calculate_implant_spec(box: BoundingBox, bone: BoneData) -> ImplantSpec:
    """Size, angle and position an implant inside an existing bounding box."""
    length = determine_length(box.max.y, box.min.y)
    diameter = determine_diameter(box.dimensions.x)

    # Simplified: the box long axis follows the bone normal, which is vertical
    box_axis = surface_normal(box.center)
    angle = calculate_angulation(box_axis, bone.slope, BONE_SLOPE_FACTOR)

    position = apply_offset(box.center, bone.lingual_vector)

    # Not tilted by `angle` yet; the direction stays vertical
    direction = normalize(create_vector(*VERTICAL_AXIS))

    return ImplantSpec(
        length=length,
        diameter=diameter,
        angle=angle,
        position=position,
        direction=direction,
    )


def calculate_from_raw_input(
    crest_level: float,
    nerve_level: float,
    mesial_x: float,
    distal_x: float,
    buccal_z: float,
    lingual_z: float,
    bone_slope: float = 0.0,
) -> CalculationResult:
    """
    Run the whole pipeline on seven landmark scalars.

    Raises UnsafeGeometryError when the margins leave no vertical clearance, or
    when no standard length fits and ALLOW_UNDERSIZED_LENGTH is off.
    """
    box = calculate_bounding_box(
        crest_level, nerve_level,
        mesial_x, distal_x,
        buccal_z, lingual_z,
        CREST_MARGIN, SAFETY_MARGIN_NERVE,
    )

    try:
        check_vertical_clearance(box)
    except UnsafeGeometryError as e:
        logger.warning("Rejected site (crest=%s, nerve=%s): %s", crest_level, nerve_level, e)
        raise

    if not settings.ALLOW_UNDERSIZED_LENGTH and not length_fits(box.max.y, box.min.y):
        max_length = round_value(safe_length(box.max.y, box.min.y))
        logger.warning("Rejected site: safe length %s mm below smallest standard implant", max_length)
        raise UnsafeGeometryError(
            f"Safe length {max_length} mm is shorter than the smallest standard implant"
        )

    bone = BoneData(
        crest_level=crest_level,
        slope=bone_slope,
        lingual_vector=create_vector(*DEFAULT_LINGUAL_VECTOR),
    )
    spec = calculate_implant_spec(box, bone)
    margins = compute_safety_margins(box, spec, crest_level, nerve_level)

    return CalculationResult(bounding_box=box, implant_spec=spec, safety_margins=margins)
