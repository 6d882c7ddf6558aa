from pydantic import BaseModel, ConfigDict

from enums.price_tier import PriceTier


class PriceIntelligenceDTO(BaseModel):
    """Market prices scraped for a product. Values may arrive as strings or be missing."""
    average_market_price: float | str | None = None
    lowest_market_price: float | str | None = None
    highest_market_price: float | str | None = None


class GroupBuyCampaignDTO(BaseModel):
    discount_price: float | str | None = None
    status: str | None = None


class RawProductDTO(BaseModel):
    """
    Catalog row as fetched by the caller (product + joined market / group-buy data).

    Numeric fields are deliberately loose: catalog rows come from admin imports
    and may carry strings or nulls. Coercion happens in PricingService.
    """
    id: str
    name: str
    brand: str | None = None
    price: float | str | None = None
    cost_price: float | str | None = None
    stock_quantity: float | str | None = None
    scent_profile: str | None = None
    gender: str | None = None
    size: str | None = None
    active_group_buy_id: str | None = None
    price_intelligence: PriceIntelligenceDTO | None = None
    group_buy_campaigns: GroupBuyCampaignDTO | None = None


class EnrichedProductDTO(BaseModel):
    """Derived pricing view of a RawProductDTO. Recomputed on every call, never mutated."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str | None = None
    base_price: float
    best_price: float
    reference_price: float
    savings_amount: float
    savings_percent: int
    margin_amount: float | None = None
    margin_percent: int | None = None
    stock: float
    scent_profile: str | None = None
    gender: str | None = None
    price_tier: PriceTier


class ComboDTO(BaseModel):
    """Ranked bundle suggestion of one or two products."""
    product_ids: list[str]
    total_price: float
    total_reference_price: float
    total_savings: float
    score: float


class DealSummaryDTO(BaseModel):
    """A combo together with the enriched products it refers to (in combo order)."""
    items: list[EnrichedProductDTO]
    combo: ComboDTO
