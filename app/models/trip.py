import uuid
from enum import Enum as PyEnum

from sqlalchemy import (
    Column, String, Float, DateTime, Text, ForeignKey, Uuid, func
)
from app.database.session import Base


class TripStatusEnum(str, PyEnum):
    DRAFT = "Draft"
    SCHEDULED = "Scheduled"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Trip(Base):
    __tablename__ = "trips"
    __table_args__ = {"extend_existing": True}

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    description = Column(Text, nullable=False)
    driver_id = Column(Uuid, ForeignKey("drivers.id"), nullable=False, index=True)
    car_id = Column(Uuid, ForeignKey("cars.id"), nullable=False, index=True)

    start_location = Column(String(255), nullable=False)
    end_location = Column(String(255), nullable=False)
    start_time = Column(DateTime, nullable=False)
    # Empty while the trip is still ongoing
    end_time = Column(DateTime)
    distance_km = Column(Float, nullable=False)
    fuel_consumed_liters = Column(Float, nullable=False)
    # Plain string: status-only updates store whatever the caller sends
    status = Column(String(20), nullable=False)

    # Audit fields
    created_by = Column(String(150))
    updated_by = Column(String(150))
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
