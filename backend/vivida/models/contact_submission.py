"""Contact form submission model."""
from sqlalchemy import Column, String, Text, Boolean, DateTime
import uuid
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class ContactSubmission(Base):
    """Message left through the public contact form."""
    __tablename__ = "contact_submissions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
