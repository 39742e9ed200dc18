from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime


class LoginRequest(BaseModel):
    """Schema for username/password login"""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Plaintext password")


class TokenResponse(BaseModel):
    """Schema for token response"""
    token: str
    token_type: str = "bearer"
    expires_at: datetime

    model_config = ConfigDict(from_attributes=True)
