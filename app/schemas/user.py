from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID


class UserRequest(BaseModel):
    username: str = ""
    password: str = ""
    confirm_password: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    role: str = ""


class UserUpdateRequest(BaseModel):
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    role: str = ""


class UpdatePasswordRequest(BaseModel):
    previous_password: str = ""
    password: str = ""
    confirm_password: str = ""


class UserResponse(BaseModel):
    """Public view of a user; the password hash is deliberately absent."""
    id: UUID
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[str] = None
    active: bool
    created_by: Optional[str] = None
    deleted_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
