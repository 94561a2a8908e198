from typing import Optional
from pydantic import BaseModel, Field


class SupplierSearchQuery(BaseModel):
    """Query string of GET /api/public/suppliers/search."""
    q: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)
    radius_km: Optional[float] = Field(None, gt=0)
    min_rating: Optional[float] = Field(None, ge=0, le=5)
    verified: Optional[bool] = None
    sort_by: str = Field('relevance', pattern=r'^(relevance|distance|rating|reviews)$')
    limit: Optional[int] = Field(None, gt=0, le=100)
    offset: int = Field(0, ge=0)
