"""
Safe-zone bounding box from landmark planes.

Top:    crest_level - crest_margin
Bottom: nerve_level + nerve_margin
X/Z:    mesial/distal and buccal/lingual boundaries, in either order.
"""

from ..schemas import BoundingBox
from .vector_math import create_vector, midpoint


def calculate_bounding_box(
    crest_level: float,
    nerve_level: float,
    mesial_x: float,
    distal_x: float,
    buccal_z: float,
    lingual_z: float,
    crest_margin: float,
    nerve_margin: float,
) -> BoundingBox:
    """
    Build the axis-aligned box the implant must stay inside.

    Never raises. If the margins eat all vertical clearance, dimensions.y comes
    out negative; callers check is_inverted().
    """
    box_top = crest_level - crest_margin
    box_bottom = nerve_level + nerve_margin

    box_min = create_vector(
        min(mesial_x, distal_x),
        box_bottom,
        min(buccal_z, lingual_z),
    )
    box_max = create_vector(
        max(mesial_x, distal_x),
        box_top,
        max(buccal_z, lingual_z),
    )

    center = midpoint(box_min, box_max)
    dimensions = create_vector(
        box_max.x - box_min.x,
        box_max.y - box_min.y,
        box_max.z - box_min.z,
    )

    return BoundingBox(min=box_min, max=box_max, center=center, dimensions=dimensions)


def is_inverted(box: BoundingBox) -> bool:
    """True when the box bottom sits above its top (no vertical clearance)."""
    return box.min.y > box.max.y
