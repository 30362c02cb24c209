# dhakahome/entrypoints/api/routers/listings.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from ..deps import get_listings
from ....schemas import PropertyDetailOut, PropertyListOut
from ....service_layer.listings import ListingService

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("", response_model=PropertyListOut)
async def search_properties(request: Request, listings: ListingService = Depends(get_listings)) -> PropertyListOut:
    # Raw query params: the normalizer owns aliases, repeats and bad values.
    result = await listings.search(request.query_params)
    return PropertyListOut.model_validate(result)


@router.get("/{property_id}", response_model=PropertyDetailOut)
async def property_detail(property_id: str, listings: ListingService = Depends(get_listings)) -> PropertyDetailOut:
    prop = await listings.get_property(property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")

    similar = await listings.similar_properties(prop)
    documents = await listings.required_documents(prop.type)
    return PropertyDetailOut.model_validate({"property": prop, "similar": similar, "documents": documents})
