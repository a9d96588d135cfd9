"""User model for admin console accounts."""
from sqlalchemy import Column, String, DateTime
import uuid
from vivida.database import Base
from vivida.utils.timestamps import utc_now


class User(Base):
    """Account that can sign in to the admin console."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column("password", String, nullable=True)  # None for federated-only accounts
    firebase_uid = Column(String, unique=True, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
