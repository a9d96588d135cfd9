"""Contact info singleton."""
from sqlalchemy import Column, Integer, String, DateTime
from vivida.constants import SINGLETON_ID
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class ContactInfo(Base):
    """Company contact details shown on the public site. Always one row."""
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    email = Column(String, nullable=False, default="hello@vivida.tech")
    phone = Column(String, nullable=False, default="+1 (234) 567-8900")
    office_location = Column(String, nullable=False, default="San Francisco, California")
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
