"""
Landmark source: tooth library and derived bone/nerve landmarks per site.

Sites are FDI tooth numbers (11-18, 21-28, 31-38, 41-48). Dimensions are
average adult values (mm). Lower-jaw sites (31-48) carry a nerve canal.

Unknown sites raise SiteNotFoundError; the pipeline never catches it.
"""

import logging
from typing import Optional

from .config import settings
from .geometry.pipeline import calculate_from_raw_input
from .schemas import (
    CalculationResult,
    NerveData,
    RawLandmarkInput,
    SiteLandmarks,
    ToothData,
    Vector3,
)

logger = logging.getLogger(__name__)


class SiteNotFoundError(LookupError):
    """No landmark data for the requested site."""


# id: (name, mesiodistal, buccolingual, crown height, root length, (x, y, z))
_TOOTH_TABLE = {
    # Upper right
    11: ("Upper Right Central Incisor", 8.5, 7.0, 10.5, 13.0, (4, 0, 5)),
    12: ("Upper Right Lateral Incisor", 6.5, 6.0, 9.0, 13.0, (12, 0, 4)),
    13: ("Upper Right Canine", 7.5, 8.0, 10.0, 17.0, (20, 0, 3)),
    14: ("Upper Right First Premolar", 7.0, 9.0, 8.5, 14.0, (28, 0, 2)),
    15: ("Upper Right Second Premolar", 7.0, 9.0, 8.5, 14.0, (35, 0, 1)),
    16: ("Upper Right First Molar", 10.0, 11.0, 7.5, 12.0, (43, 0, 0)),
    17: ("Upper Right Second Molar", 9.0, 11.0, 7.0, 11.0, (52, 0, -1)),
    18: ("Upper Right Third Molar", 8.5, 10.0, 6.5, 10.0, (60, 0, -2)),
    # Upper left
    21: ("Upper Left Central Incisor", 8.5, 7.0, 10.5, 13.0, (-4, 0, 5)),
    22: ("Upper Left Lateral Incisor", 6.5, 6.0, 9.0, 13.0, (-12, 0, 4)),
    23: ("Upper Left Canine", 7.5, 8.0, 10.0, 17.0, (-20, 0, 3)),
    24: ("Upper Left First Premolar", 7.0, 9.0, 8.5, 14.0, (-28, 0, 2)),
    25: ("Upper Left Second Premolar", 7.0, 9.0, 8.5, 14.0, (-35, 0, 1)),
    26: ("Upper Left First Molar", 10.0, 11.0, 7.5, 12.0, (-43, 0, 0)),
    27: ("Upper Left Second Molar", 9.0, 11.0, 7.0, 11.0, (-52, 0, -1)),
    28: ("Upper Left Third Molar", 8.5, 10.0, 6.5, 10.0, (-60, 0, -2)),
    # Lower left
    31: ("Lower Left Central Incisor", 5.5, 6.0, 9.0, 12.5, (-2, -25, 5)),
    32: ("Lower Left Lateral Incisor", 6.0, 6.5, 9.5, 14.0, (-8, -25, 4)),
    33: ("Lower Left Canine", 7.0, 7.5, 11.0, 16.0, (-15, -25, 3)),
    34: ("Lower Left First Premolar", 7.0, 7.5, 8.5, 14.0, (-22, -25, 2)),
    35: ("Lower Left Second Premolar", 7.0, 8.0, 8.0, 14.5, (-29, -25, 1)),
    36: ("Lower Left First Molar", 11.0, 10.5, 7.5, 14.0, (-38, -25, 0)),
    37: ("Lower Left Second Molar", 10.5, 10.0, 7.0, 13.0, (-48, -25, -1)),
    38: ("Lower Left Third Molar", 10.0, 9.5, 6.5, 11.0, (-57, -25, -2)),
    # Lower right
    41: ("Lower Right Central Incisor", 5.5, 6.0, 9.0, 12.5, (2, -25, 5)),
    42: ("Lower Right Lateral Incisor", 6.0, 6.5, 9.5, 14.0, (8, -25, 4)),
    43: ("Lower Right Canine", 7.0, 7.5, 11.0, 16.0, (15, -25, 3)),
    44: ("Lower Right First Premolar", 7.0, 7.5, 8.5, 14.0, (22, -25, 2)),
    45: ("Lower Right Second Premolar", 7.0, 8.0, 8.0, 14.5, (29, -25, 1)),
    46: ("Lower Right First Molar", 11.0, 10.5, 7.5, 14.0, (38, -25, 0)),
    47: ("Lower Right Second Molar", 10.5, 10.0, 7.0, 13.0, (48, -25, -1)),
    48: ("Lower Right Third Molar", 10.0, 9.5, 6.5, 11.0, (57, -25, -2)),
}

TOOTH_LIBRARY: dict[int, ToothData] = {
    tooth_id: ToothData(
        id=tooth_id,
        name=name,
        mesiodistal_width=md,
        buccolingual_width=bl,
        crown_height=crown,
        root_length=root,
        position=Vector3(x=pos[0], y=pos[1], z=pos[2]),
    )
    for tooth_id, (name, md, bl, crown, root, pos) in _TOOTH_TABLE.items()
}

NERVE_DEPTH = 15.0          # Nerve canal depth below a lower tooth (mm)
UPPER_NERVE_DEPTH = 30.0    # Placeholder depth for upper sites (no canal)
CREST_OFFSET = 2.0          # Crest sits this far occlusal (lower) / apical (upper)
NERVE_PLANE_BUFFER = 3.5    # 1.5mm nerve margin + 2mm visual buffer

# Landmarks used for a site with no library entry
DEFAULT_BONE = {
    "crest_level": 0.0,
    "nerve_level": -15.0,
    "buccal_z": 5.0,
    "lingual_z": -5.0,
}


def is_lower_jaw(tooth_id: int) -> bool:
    return 31 <= tooth_id <= 48


def list_teeth() -> list[ToothData]:
    return [TOOTH_LIBRARY[tooth_id] for tooth_id in sorted(TOOTH_LIBRARY)]


def get_tooth(tooth_id: int) -> ToothData:
    """Look up a tooth or raise SiteNotFoundError."""
    tooth = TOOTH_LIBRARY.get(tooth_id)
    if tooth is None:
        raise SiteNotFoundError(f"Tooth {tooth_id} not found in library")
    return tooth


def get_nerve_data(tooth_id: int) -> Optional[NerveData]:
    """
    Mandibular canal path under a lower tooth, or None.
    Upper teeth and unknown ids have no nerve concern.
    """
    if not is_lower_jaw(tooth_id):
        return None
    tooth = TOOTH_LIBRARY.get(tooth_id)
    if tooth is None:
        return None

    pos = tooth.position
    nerve_y = pos.y - NERVE_DEPTH
    z = pos.z - 2
    # Canal dips toward the ends, highest under the tooth
    points = [
        Vector3(x=pos.x + dx, y=nerve_y + rise, z=z)
        for dx, rise in ((-20, 0), (-10, 1), (0, 2), (10, 1), (20, 0))
    ]
    return NerveData(points=points, safety_plane_y=nerve_y + NERVE_PLANE_BUFFER)


def get_bone_data(tooth_id: int, slope: Optional[float] = None) -> dict:
    """
    Crest, nerve, buccal and lingual landmarks for a site.
    Unknown ids get DEFAULT_BONE instead of raising.
    """
    if slope is None:
        slope = settings.DEFAULT_BONE_SLOPE

    tooth = TOOTH_LIBRARY.get(tooth_id)
    if tooth is None:
        logger.info("No library entry for tooth %s, using default bone landmarks", tooth_id)
        return {**DEFAULT_BONE, "slope": slope}

    lower = is_lower_jaw(tooth_id)
    base_y = tooth.position.y
    half_bl = tooth.buccolingual_width / 2

    return {
        "crest_level": base_y + (CREST_OFFSET if lower else -CREST_OFFSET),
        "nerve_level": base_y - (NERVE_DEPTH if lower else UPPER_NERVE_DEPTH),
        "buccal_z": tooth.position.z + half_bl,
        "lingual_z": tooth.position.z - half_bl,
        "slope": slope,
    }


def get_site_landmarks(tooth_id: int, slope: Optional[float] = None) -> SiteLandmarks:
    """All seven pipeline inputs for a site. Raises SiteNotFoundError."""
    tooth = get_tooth(tooth_id)
    bone = get_bone_data(tooth_id, slope)
    half_md = tooth.mesiodistal_width / 2

    landmarks = RawLandmarkInput(
        crest_level=bone["crest_level"],
        nerve_level=bone["nerve_level"],
        mesial_x=tooth.position.x - half_md,
        distal_x=tooth.position.x + half_md,
        buccal_z=bone["buccal_z"],
        lingual_z=bone["lingual_z"],
        bone_slope=bone["slope"],
    )
    return SiteLandmarks(tooth=tooth, landmarks=landmarks, nerve=get_nerve_data(tooth_id))


def calculate_from_landmarks(landmarks: RawLandmarkInput) -> CalculationResult:
    return calculate_from_raw_input(
        landmarks.crest_level,
        landmarks.nerve_level,
        landmarks.mesial_x,
        landmarks.distal_x,
        landmarks.buccal_z,
        landmarks.lingual_z,
        landmarks.bone_slope,
    )


def plan_site(tooth_id: int, bone_slope: Optional[float] = None) -> tuple[SiteLandmarks, CalculationResult]:
    """Landmarks for a site fed straight into the pipeline."""
    site = get_site_landmarks(tooth_id, bone_slope)
    return site, calculate_from_landmarks(site.landmarks)
