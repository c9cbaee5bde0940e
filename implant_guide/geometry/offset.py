from typing import Optional

from ..schemas import Vector3
from ..standards import DEFAULT_LINGUAL_VECTOR, LINGUAL_OFFSET
from .vector_math import add, create_vector, normalize, scale


def apply_offset(
    center_point: Vector3,
    lingual_vector: Optional[Vector3] = None,
    offset_mm: float = LINGUAL_OFFSET,
) -> Vector3:
    """
    Golden rule: shift the implant center toward the lingual side so the thin
    buccal plate is spared. A zero lingual vector leaves the point unchanged.
    """
    if lingual_vector is None:
        lingual_vector = create_vector(*DEFAULT_LINGUAL_VECTOR)
    offset_vector = scale(normalize(lingual_vector), offset_mm)
    return add(center_point, offset_vector)
