# dhakahome/entrypoints/api/routers/leads.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..deps import get_listings, get_settings
from ....config import Settings
from ....domain.errors import LeadSubmissionError
from ....domain.leads import validate_lead
from ....schemas import LeadAccepted
from ....service_layer.listings import ListingService

log = logging.getLogger(__name__)

router = APIRouter(tags=["leads"])


async def _read_body(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return {k: v for k, v in form.items() if isinstance(v, str)}


@router.post("/lead", response_model=LeadAccepted)
async def submit_lead(
    request: Request,
    listings: ListingService = Depends(get_listings),
    settings: Settings = Depends(get_settings),
) -> Any:
    raw = await _read_body(request)
    lead, errors = validate_lead(raw, default_contact_email=settings.ENQUIRY_EMAIL)
    if lead is None:
        return JSONResponse(status_code=400, content={"status": "invalid", "errors": errors})

    try:
        await listings.submit_lead(lead)
    except LeadSubmissionError as e:
        log.error("lead: submission failed for property=%s: %s", lead.property_id or "-", e)
        return JSONResponse(
            status_code=502,
            content={"status": "error", "detail": "We could not send your enquiry right now. Please try again."},
        )

    log.info("lead: submitted for property=%s", lead.property_id or "-")
    return LeadAccepted()
