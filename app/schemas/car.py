from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union
from datetime import datetime
from uuid import UUID

from app.schemas.engine import EngineResponse


class EngineRef(BaseModel):
    """Engine reference embedded in a car request; displacement, cylinders and range are optional."""
    engine_id: Optional[UUID] = None
    displacement: Optional[int] = None
    no_of_cylinders: Optional[int] = None
    car_range: Optional[int] = None


class CarRequest(BaseModel):
    registration_number: str = ""
    name: str = ""
    # Accepted as text ("2020") or number, checked by validate_car_request
    year: Union[str, int] = ""
    brand: str = ""
    fuel_type: str = ""
    engine: EngineRef = Field(default_factory=EngineRef)
    status: str = ""
    price: float = 0


class CarResponse(BaseModel):
    id: UUID
    registration_number: str
    name: str
    year: int
    brand: str
    fuel_type: str
    status: str
    price: float
    engine_id: UUID
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CarWithEngineResponse(CarResponse):
    engine: Optional[EngineResponse] = None
