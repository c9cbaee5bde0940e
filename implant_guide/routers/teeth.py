from fastapi import APIRouter, HTTPException
from typing import List, Optional

from .. import schemas
from ..landmarks import SiteNotFoundError, get_site_landmarks, get_tooth, list_teeth

router = APIRouter(prefix="/teeth", tags=["teeth"])


@router.get("/", response_model=List[schemas.ToothData])
def list_tooth_library():
    return list_teeth()


@router.get("/{tooth_id}", response_model=schemas.ToothData)
def get_tooth_data(tooth_id: int):
    try:
        return get_tooth(tooth_id)
    except SiteNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{tooth_id}/landmarks", response_model=schemas.SiteLandmarks)
def get_landmarks(tooth_id: int, bone_slope: Optional[float] = None):
    try:
        return get_site_landmarks(tooth_id, bone_slope)
    except SiteNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
