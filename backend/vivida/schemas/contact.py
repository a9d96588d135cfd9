"""Schemas for the public contact form."""
from datetime import datetime
from pydantic import Field
from vivida.schemas.common import CamelModel


class ContactSubmissionCreate(CamelModel):
    """Request schema for /api/contact."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactSubmitResponse(CamelModel):
    message: str
    id: str


class ContactSubmissionResponse(ContactSubmissionCreate):
    id: str
    is_read: bool
    created_at: datetime
    updated_at: datetime
