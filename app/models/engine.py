import uuid

from sqlalchemy import Column, Integer, DateTime, Uuid, func
from app.database.session import Base


class Engine(Base):
    __tablename__ = "engines"
    __table_args__ = {"extend_existing": True}

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    displacement = Column(Integer, nullable=False)
    no_of_cylinders = Column(Integer, nullable=False)
    car_range = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
