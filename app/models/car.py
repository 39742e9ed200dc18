import uuid
from enum import Enum as PyEnum

from sqlalchemy import (
    Column, Integer, String, Float, DateTime, ForeignKey, Uuid, func, UniqueConstraint
)
from sqlalchemy.orm import relationship
from app.database.session import Base


class FuelTypeEnum(str, PyEnum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"


class CarStatusEnum(str, PyEnum):
    AVAILABLE = "Available"
    IN_USE = "In Use"
    MAINTENANCE = "Maintenance"
    DECOMMISSIONED = "Decommissioned"


class Car(Base):
    __tablename__ = "cars"
    __table_args__ = (
        UniqueConstraint("registration_number", name="uq_car_registration_number"),
        {"extend_existing": True},
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    registration_number = Column(String(50), nullable=False)
    name = Column(String(150), nullable=False)
    year = Column(Integer, nullable=False)
    brand = Column(String(100), nullable=False, index=True)
    fuel_type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False)
    price = Column(Float, nullable=False)

    # Several cars may share one engine row; there is no back-reference
    engine_id = Column(Uuid, ForeignKey("engines.id"), nullable=False)

    # Audit fields
    created_by = Column(String(150))
    updated_by = Column(String(150))
    deleted_at = Column(DateTime)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    engine = relationship("app.models.engine.Engine")
