"""Service offering model."""
from sqlalchemy import Column, Integer, String, Text, DateTime
import uuid
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class Service(Base):
    """Service card on the home page."""
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    icon_svg_path = Column(String, nullable=False)  # icon identifier, e.g. "fas fa-code"
    order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
