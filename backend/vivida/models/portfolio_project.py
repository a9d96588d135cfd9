"""Portfolio project model."""
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
import uuid
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class PortfolioProject(Base):
    """Case study shown on the work page."""
    __tablename__ = "portfolio_projects"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String, nullable=False)
    tags = Column(JSON, nullable=False, default=list)  # ordered list of strings
    project_url = Column(String, nullable=True)
    github_url = Column(String, nullable=True)
    order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
