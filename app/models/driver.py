import uuid

from sqlalchemy import (
    Column, String, Boolean, DateTime, ForeignKey, Uuid, func, UniqueConstraint
)
from sqlalchemy.orm import relationship
from app.database.session import Base


class Driver(Base):
    __tablename__ = "drivers"
    __table_args__ = (
        UniqueConstraint("user_id", name="uq_driver_user"),
        {"extend_existing": True},
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)

    # License info
    driver_license_number = Column(String(100))
    license_expiry = Column(DateTime)

    # System fields
    active = Column(Boolean, default=True, nullable=False)
    created_by = Column(String(150))
    deleted_at = Column(DateTime)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("app.models.user.User")
