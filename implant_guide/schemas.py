from pydantic import BaseModel
from typing import Optional, List, Tuple


class Vector3(BaseModel):
    x: float
    y: float
    z: float

    class Config:
        frozen = True

    def as_tuple(self) -> tuple:
        return (self.x, self.y, self.z)


class BoundingBox(BaseModel):
    min: Vector3
    max: Vector3
    center: Vector3
    dimensions: Vector3

    class Config:
        frozen = True


class ImplantSpec(BaseModel):
    length: float
    diameter: float
    angle: float
    position: Vector3
    direction: Vector3

    class Config:
        frozen = True


class BoneData(BaseModel):
    crest_level: float
    slope: float = 0.0
    lingual_vector: Vector3 = Vector3(x=0.0, y=0.0, z=-1.0)

    class Config:
        frozen = True


class SafetyMargins(BaseModel):
    to_nerve: float
    to_crest: float
    to_buccal: float

    class Config:
        frozen = True


class CalculationResult(BaseModel):
    bounding_box: BoundingBox
    implant_spec: ImplantSpec
    safety_margins: SafetyMargins

    class Config:
        frozen = True


# --- Landmark source ---

class ToothData(BaseModel):
    id: int
    name: str
    mesiodistal_width: float
    buccolingual_width: float
    crown_height: float
    root_length: float
    position: Vector3

    class Config:
        frozen = True


class NerveData(BaseModel):
    points: List[Vector3]
    safety_plane_y: float

    class Config:
        frozen = True


class RawLandmarkInput(BaseModel):
    crest_level: float
    nerve_level: float
    mesial_x: float
    distal_x: float
    buccal_z: float
    lingual_z: float
    bone_slope: float = 0.0

    class Config:
        frozen = True
        allow_inf_nan = False


class SiteLandmarks(BaseModel):
    tooth: ToothData
    landmarks: RawLandmarkInput
    nerve: Optional[NerveData] = None

    class Config:
        frozen = True


class SitePlan(BaseModel):
    tooth_id: int
    landmarks: RawLandmarkInput
    result: CalculationResult
    safety_plane_y: Optional[float] = None
    diameter_window: Tuple[float, float]


class StandardSizes(BaseModel):
    lengths: List[float]
    diameters: List[float]
    nerve_margin: float
    crest_margin: float
    lingual_offset: float
    length_safety_buffer: float
    diameter_ratio_min: float
    diameter_ratio_max: float
    diameter_ratio_default: float
    bone_slope_factor: float
    precision: int
