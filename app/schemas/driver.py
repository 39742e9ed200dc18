from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID

from app.schemas.user import UserResponse


class DriverRequest(BaseModel):
    user_id: Optional[UUID] = None
    driver_license_number: str = ""
    license_expiry: Optional[datetime] = None


class DriverUpdateRequest(BaseModel):
    driver_license_number: str = ""
    license_expiry: Optional[datetime] = None


class DriverResponse(BaseModel):
    id: UUID
    user_id: UUID
    driver_license_number: Optional[str] = None
    license_expiry: Optional[datetime] = None
    active: bool
    created_by: Optional[str] = None
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DriverWithUserResponse(DriverResponse):
    user: Optional[UserResponse] = None
