"""Journey milestone (blog post) model."""
from sqlalchemy import Column, Integer, String, Text, DateTime
import uuid
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class JourneyMilestone(Base):
    """Timeline entry; `content` holds the HTML body of its blog post."""
    __tablename__ = "journey_milestones"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    year = Column(String, nullable=False)  # free-form label, e.g. "Q2 2025"
    title = Column(String, nullable=False)
    caption = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    icon_svg_path = Column(String, nullable=False)
    order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
