from typing import List, Optional

from pydantic import BaseModel, Field

from config import ACTIVE_CONFIG

_DEFAULTS = ACTIVE_CONFIG.VALUATION["ASSUMPTIONS"]


class ParseListingRequest(BaseModel):
    url: Optional[str] = None


class AddressOut(BaseModel):
    bairro: str
    cidade: str
    estado: str


class ListingOut(BaseModel):
    title: str
    price: float = Field(ge=0)
    area_m2: float = Field(ge=0)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    address: AddressOut


class Assumptions(BaseModel):
    """Vom User editierbare Annahmen (monatliche R$-Werte bzw. Prozent)."""

    iptu: float = Field(default=_DEFAULTS["iptu"], ge=0)
    condominio: float = Field(default=_DEFAULTS["condominio"], ge=0)
    itbi_pct: float = Field(default=_DEFAULTS["itbi_pct"], ge=0)
    taxes_fixed: float = Field(default=_DEFAULTS["taxes_fixed"], ge=0)
    vacancy_pct: float = Field(default=_DEFAULTS["vacancy_pct"], ge=0)
    maint_pct: float = Field(default=_DEFAULTS["maint_pct"], ge=0)


class MetricsRequest(BaseModel):
    listing: ListingOut
    assumptions: Optional[Assumptions] = None
    sale_comps_price_per_m2: List[float] = Field(default_factory=list)
    rent_comps_per_m2: List[float] = Field(default_factory=list)


class Metrics(BaseModel):
    gross_yield: float
    net_yield: float
    cap_rate: float
    payback_years: Optional[float] = None
    annual_rent: float
    annual_costs: float
    net_annual_income: float


class MetricsResponse(BaseModel):
    success: bool = True
    metrics: Metrics
    verdict: str
    estimated_market_value: float
    estimated_rent_monthly: float
