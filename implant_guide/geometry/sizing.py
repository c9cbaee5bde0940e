"""
Standard implant size selection.

Length:   largest standard length that fits (available space - 1mm buffer).
Diameter: standard diameter closest to 65% of the mesio-distal gap.
"""

import logging

from ..standards import (
    STANDARD_DIAMETERS,
    LENGTH_SAFETY_BUFFER,
    DIAMETER_RATIO_DEFAULT,
    DIAMETER_RATIO_MIN,
    DIAMETER_RATIO_MAX,
    smallest_length,
    lengths_up_to,
)
from .vector_math import round_value

logger = logging.getLogger(__name__)


def safe_length(box_top_y: float, box_bottom_y: float) -> float:
    """Usable implant length: box height minus the extra safety buffer."""
    available_space = box_top_y - box_bottom_y
    return available_space - LENGTH_SAFETY_BUFFER


def length_fits(box_top_y: float, box_bottom_y: float) -> bool:
    """Whether at least one standard length fits without the fallback."""
    return bool(lengths_up_to(safe_length(box_top_y, box_bottom_y)))


def determine_length(box_top_y: float, box_bottom_y: float) -> float:
    """
    Largest standard length <= safe length.

    box_bottom_y already includes the nerve margin. If nothing fits, the shortest
    standard implant is returned anyway; the pipeline decides whether that is
    acceptable.
    """
    max_length = safe_length(box_top_y, box_bottom_y)
    valid = lengths_up_to(max_length)
    if not valid:
        logger.warning(
            "No standard length fits %.3f mm safe length, falling back to %.1f mm",
            max_length, smallest_length(),
        )
        return smallest_length()
    return valid[-1]


def determine_diameter(mesiodistal_distance: float, ratio: float = DIAMETER_RATIO_DEFAULT) -> float:
    """
    Standard diameter closest to mesiodistal_distance * ratio.
    Ties go to the smaller diameter (first in the ascending table).
    """
    ideal = mesiodistal_distance * ratio

    closest = STANDARD_DIAMETERS[0]
    min_diff = abs(ideal - closest)
    for diameter in STANDARD_DIAMETERS:
        diff = abs(ideal - diameter)
        if diff < min_diff:
            min_diff = diff
            closest = diameter
    return closest


def diameter_window(mesiodistal_distance: float) -> tuple:
    """Acceptable ideal-diameter range (60-70% of the gap)."""
    return (
        round_value(mesiodistal_distance * DIAMETER_RATIO_MIN),
        round_value(mesiodistal_distance * DIAMETER_RATIO_MAX),
    )
