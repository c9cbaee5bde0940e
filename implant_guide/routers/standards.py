from fastapi import APIRouter

from .. import schemas
from ..standards import standard_sizes

router = APIRouter(prefix="/standards", tags=["standards"])


@router.get("/", response_model=schemas.StandardSizes)
def get_standards():
    """Standard implant sizes and golden-rule margins."""
    return standard_sizes()
