"""
Public form schemas: contact, supplier message, newsletter.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class ContactFormRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=5, max_length=200)
    message: str = Field(..., min_length=20, max_length=500)
    type: str = Field('general', pattern=r'^(general|supplier|technical|partnership|feedback)$')
    website: Optional[str] = None  # Honeypot, real users leave it empty


class SupplierMessageRequest(BaseModel):
    sender_name: str = Field(..., min_length=2, max_length=100)
    sender_email: EmailStr
    sender_phone: Optional[str] = Field(None, max_length=30, pattern=r'^[\d\s\-\+\(\)]+$')
    subject: str = Field(..., min_length=5, max_length=200)
    message: str = Field(..., min_length=20, max_length=500)


class NewsletterSubscribeRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = Field(None, max_length=100)
    sector: Optional[str] = Field(None, max_length=100)


class NewsletterUnsubscribeRequest(BaseModel):
    email: EmailStr


class NewsletterSendRequest(BaseModel):
    subject: str = Field(..., min_length=1, max_length=200)
    html: str = Field(..., min_length=1)
