"""
Planning API: run the placement pipeline.

POST /api/plan/calculate         Raw landmark scalars -> bounding box + implant spec
GET  /api/plan/sites/{tooth_id}  Library landmarks for a tooth -> plan
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..geometry.safety import UnsafeGeometryError
from ..geometry.sizing import diameter_window
from ..landmarks import SiteNotFoundError, calculate_from_landmarks, plan_site

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plan", tags=["planning"])


@router.post("/calculate", response_model=schemas.CalculationResult)
def calculate_plan(landmarks: schemas.RawLandmarkInput):
    try:
        result = calculate_from_landmarks(landmarks)
    except UnsafeGeometryError as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info(
        "Plan calculated: %.1f mm x %.1f mm at %.3f deg",
        result.implant_spec.length, result.implant_spec.diameter, result.implant_spec.angle,
    )
    return result


@router.get("/sites/{tooth_id}", response_model=schemas.SitePlan)
def plan_for_site(tooth_id: int, bone_slope: Optional[float] = None):
    """
    Plan an implant for a tooth site using library landmarks.

    404 if the tooth is unknown, 422 if the site has no safe clearance.
    """
    try:
        site, result = plan_site(tooth_id, bone_slope)
    except SiteNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnsafeGeometryError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("Site %s planned: %s mm implant", tooth_id, result.implant_spec.length)
    return schemas.SitePlan(
        tooth_id=tooth_id,
        landmarks=site.landmarks,
        result=result,
        safety_plane_y=site.nerve.safety_plane_y if site.nerve else None,
        diameter_window=diameter_window(result.bounding_box.dimensions.x),
    )
