from pydantic import BaseModel


class NormalizedOrderItemDTO(BaseModel):
    """
    Canonical order line consumed by checkout/order-creation flows.

    Built from heterogeneous cart payloads by utils.order_items.normalize_order_item:
    quantity is always an integer >= 1, price a finite number (0 when missing).
    """
    product_id: str
    name: str
    quantity: int
    price: float
    image_url: str | None = None
    vendor_id: str | None = None
    vendor_name: str | None = None
