"""
Order schemas.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

ORDER_STATUS_PATTERN = r'^(pending|confirmed|processing|shipped|delivered|cancelled)$'
PAYMENT_STATUS_PATTERN = r'^(pending|paid|failed|refunded)$'


class ShippingAddress(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=30)
    address: str = Field(..., min_length=1, max_length=300)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)


class OrderItemRequest(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)
    image_url: Optional[str] = Field(None, max_length=500)


class OrderCreateRequest(BaseModel):
    supplier_id: int
    shipping_address: ShippingAddress
    items: List[OrderItemRequest] = Field(..., min_length=1)
    notes: Optional[str] = Field(None, max_length=2000)


class OrderStatusUpdateRequest(BaseModel):
    status: str = Field(..., pattern=ORDER_STATUS_PATTERN)
    payment_status: Optional[str] = Field(None, pattern=PAYMENT_STATUS_PATTERN)


class OrderListQuery(BaseModel):
    status: Optional[str] = Field(None, pattern=ORDER_STATUS_PATTERN)
    limit: Optional[int] = Field(None, gt=0, le=500)
    supplier_id: Optional[int] = None
