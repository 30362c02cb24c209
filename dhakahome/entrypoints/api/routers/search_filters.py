# dhakahome/entrypoints/api/routers/search_filters.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_listings, get_settings
from ....config import Settings
from ....schemas import NeighborhoodStatOut, StringListOut
from ....service_layer.listings import ListingService

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search/cities", response_model=StringListOut)
async def cities(listings: ListingService = Depends(get_listings)) -> StringListOut:
    return StringListOut(data=await listings.cities())


@router.get("/search/neighborhoods", response_model=StringListOut)
async def neighborhoods(
    city: str = Query(default=""),
    listings: ListingService = Depends(get_listings),
) -> StringListOut:
    try:
        names = await listings.neighborhoods(city)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StringListOut(data=names)


@router.get("/neighborhoods/top", response_model=list[NeighborhoodStatOut])
async def top_neighborhoods(
    limit: int = Query(default=10, ge=1, le=50),
    city: str | None = Query(default=None),
    listings: ListingService = Depends(get_listings),
    settings: Settings = Depends(get_settings),
) -> list[NeighborhoodStatOut]:
    stats = await listings.top_neighborhoods(limit, city or settings.TOP_AREAS_CITY)
    return [NeighborhoodStatOut.model_validate(s) for s in stats]
