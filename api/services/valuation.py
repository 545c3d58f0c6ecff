# services/valuation.py
from typing import Optional, Sequence

from api.models import Assumptions, ListingOut, Metrics, MetricsResponse
from config import ACTIVE_CONFIG

VALUATION = ACTIVE_CONFIG.VALUATION


def _avg(values: Sequence[float]) -> Optional[float]:
    values = [v for v in values if v is not None]
    if not values:
        return None
    return sum(values) / len(values)


def classify_verdict(net_yield: float) -> str:
    if net_yield >= VALUATION["GOOD_NET_YIELD"]:
        return "good"
    if net_yield >= VALUATION["FAIR_NET_YIELD"]:
        return "fair"
    return "overpriced"


def compute_metrics(
    listing: ListingOut,
    assumptions: Optional[Assumptions] = None,
    sale_comps_price_per_m2: Sequence[float] = (),
    rent_comps_per_m2: Sequence[float] = (),
) -> MetricsResponse:
    """
    Rendite-Kennzahlen für ein normalisiertes Inserat.

    Vergleichswerte (Comps) kommen vom Aufrufer; ohne Comps wird R$/m² aus
    dem Inserat selbst und die Miete über die 0,6 %-Faustregel geschätzt.
    """
    if listing.price <= 0:
        raise ValueError("Listing has no price")
    if listing.area_m2 <= 0:
        raise ValueError("Listing has no area_m2")

    assumptions = assumptions or Assumptions()

    avg_price_per_m2 = _avg(sale_comps_price_per_m2)
    if avg_price_per_m2 is None:
        avg_price_per_m2 = listing.price / listing.area_m2

    avg_rent_per_m2 = _avg(rent_comps_per_m2)
    if avg_rent_per_m2 is None:
        avg_rent_per_m2 = avg_price_per_m2 * VALUATION["FALLBACK_RENT_RATIO"]

    estimated_market_value = avg_price_per_m2 * listing.area_m2
    estimated_rent_monthly = avg_rent_per_m2 * listing.area_m2

    annual_rent = estimated_rent_monthly * 12
    gross_yield = annual_rent / listing.price * 100

    itbi = listing.price * assumptions.itbi_pct / 100
    total_investment = listing.price + itbi + assumptions.taxes_fixed

    annual_costs = (
        assumptions.iptu * 12
        + assumptions.condominio * 12
        + annual_rent * assumptions.vacancy_pct / 100
        + annual_rent * assumptions.maint_pct / 100
    )

    net_annual_income = annual_rent - annual_costs
    net_yield = net_annual_income / total_investment * 100
    cap_rate = net_annual_income / listing.price * 100
    payback_years = 100 / net_yield if net_yield > 0 else None

    return MetricsResponse(
        metrics=Metrics(
            gross_yield=gross_yield,
            net_yield=net_yield,
            cap_rate=cap_rate,
            payback_years=payback_years,
            annual_rent=annual_rent,
            annual_costs=annual_costs,
            net_annual_income=net_annual_income,
        ),
        verdict=classify_verdict(net_yield),
        estimated_market_value=estimated_market_value,
        estimated_rent_monthly=estimated_rent_monthly,
    )
