# api/routes/valuation.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models import MetricsRequest
from api.services import valuation as valuation_service


router = APIRouter(tags=["valuation"])


@router.post("/calculate-metrics")
def calculate_metrics(payload: MetricsRequest):
    try:
        result = valuation_service.compute_metrics(
            listing=payload.listing,
            assumptions=payload.assumptions,
            sale_comps_price_per_m2=payload.sale_comps_price_per_m2,
            rent_comps_per_m2=payload.rent_comps_per_m2,
        )
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return result.model_dump()
