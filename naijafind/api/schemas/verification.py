from typing import Optional
from pydantic import BaseModel, Field


class DocumentUploadRequest(BaseModel):
    document_type: str = Field(
        ..., pattern=r'^(business_registration|tax_certificate|id_card|proof_of_address)$'
    )
    document_url: str = Field(..., min_length=1, max_length=500)
    document_name: Optional[str] = Field(None, max_length=255)


class DocumentReviewRequest(BaseModel):
    status: str = Field(..., pattern=r'^(approved|rejected)$')
    rejection_reason: Optional[str] = Field(None, max_length=1000)
