from typing import Optional
from pydantic import BaseModel, Field


class ReviewCreateRequest(BaseModel):
    supplier_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(None, max_length=2000)


class ReviewUpdateRequest(BaseModel):
    status: Optional[str] = Field(None, pattern=r'^(published|hidden|deleted)$')
    response: Optional[str] = Field(None, max_length=2000)
