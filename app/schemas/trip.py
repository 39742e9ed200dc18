from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID


class TripRequest(BaseModel):
    description: str = ""
    driver_id: Optional[UUID] = None
    car_id: Optional[UUID] = None
    start_location: str = ""
    end_location: str = ""
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    distance_km: float = 0
    fuel_consumed_liters: float = 0
    status: str = ""


class TripResponse(BaseModel):
    id: UUID
    description: str
    driver_id: UUID
    car_id: UUID
    start_location: str
    end_location: str
    start_time: datetime
    end_time: Optional[datetime] = None
    distance_km: float
    fuel_consumed_liters: float
    status: str
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
