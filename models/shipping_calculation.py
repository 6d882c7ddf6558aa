from pydantic import BaseModel


class VendorScheduleDTO(BaseModel):
    """Delivery schedule selected for one vendor by its MOQ rules."""
    vendor_id: str
    vendor_name: str
    quantity: int
    schedule: str
    estimated_days: str | None = None


class VendorBreakdownDTO(BaseModel):
    """Per-vendor shipping cost line (location-based pricing only)."""
    vendor_id: str
    vendor_name: str
    vendor_region_id: str | None = None
    vendor_region_name: str | None = None
    total_weight: float
    item_count: int
    shipping_cost: float
    schedule: str
    estimated_days: str | None = None


class ShippingCalculationResultDTO(BaseModel):
    """Complete result of a cart shipping calculation."""
    total_weight: float = 0.0
    weight_based_cost: float = 0.0
    vendor_schedules: list[VendorScheduleDTO] = []
    consolidated_schedule: str
    has_vendor_rules: bool = False
    vendor_breakdown: list[VendorBreakdownDTO] = []
    has_location_based_pricing: bool = False
