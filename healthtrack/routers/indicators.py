from fastapi import APIRouter, Depends

from healthtrack.routers.deps import get_indicator_catalog, get_language
from healthtrack.services.indicator_catalog import IndicatorCatalog

router = APIRouter(prefix="/api/indicators", tags=["indicators"])


@router.get("")
def list_catalog(language: str = Depends(get_language), catalog: IndicatorCatalog = Depends(get_indicator_catalog)):
    categories = catalog.list_by_category(language)
    return {
        "statusCode": 200,
        "message": "Success",
        "data": {"categories": [c.model_dump(mode="json", by_alias=True, exclude_unset=True) for c in categories]},
    }
