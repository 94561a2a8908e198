"""
User and supplier profile schemas.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpBuyerRequest(BaseModel):
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)


class EnsureUserRequest(SignUpBuyerRequest):
    user_type: Optional[str] = Field(None, pattern=r'^(user|supplier)$')
    email: Optional[EmailStr] = None


class SupplierFields(BaseModel):
    """Profile fields shared by sign-up and profile update."""
    business_name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=30)
    description: Optional[str] = Field(None, max_length=5000)
    category: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=300)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    website: Optional[str] = Field(None, max_length=255)
    image: Optional[str] = Field(None, max_length=500)
    image_gallery: Optional[List[str]] = None


class SignUpSupplierRequest(SupplierFields):
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class SupplierProfileUpdateRequest(SupplierFields):
    business_hours: Optional[Dict[str, str]] = None
    social_links: Optional[Dict[str, str]] = None
    logo_url: Optional[str] = Field(None, max_length=500)
    cover_image_url: Optional[str] = Field(None, max_length=500)


class CreateAdminRequest(BaseModel):
    """Bootstrap /admin/create body; accepts camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    first_name: Optional[str] = Field(None, alias='firstName', max_length=100)
    last_name: Optional[str] = Field(None, alias='lastName', max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
