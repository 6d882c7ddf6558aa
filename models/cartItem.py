from pydantic import BaseModel, Field


class CartProductDTO(BaseModel):
    """Product fields a cart line needs for weight and vendor grouping."""
    id: str
    name: str
    weight: float | None = None  # kg, authoritative when > 0
    size: str | None = None      # e.g. "100ml", "3.4 oz"
    vendor_id: str | None = None


class CartItemDTO(BaseModel):
    """One line in a cart/checkout. Transient, never persisted by the core."""
    product_id: str
    quantity: int = Field(gt=0)
    product: CartProductDTO | None = None
