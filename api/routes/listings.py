# api/routes/listings.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.models import ParseListingRequest
from api.services.listings import outcome_to_response
from pipelines.ingest_listing import ingest
from scraper.utils.http import build_fetcher


router = APIRouter(tags=["listings"])


def get_fetcher():
    return build_fetcher()


@router.post("/parse-listing")
async def parse_listing(payload: ParseListingRequest, fetcher=Depends(get_fetcher)):
    if not payload.url or not payload.url.strip():
        return JSONResponse(status_code=400, content={"error": "URL is required"})

    outcome = await ingest(payload.url, fetcher=fetcher)
    status, body = outcome_to_response(outcome)
    return JSONResponse(status_code=status, content=body)
