import uuid

from sqlalchemy import (
    Column, String, Boolean, DateTime, Uuid, func, UniqueConstraint
)
from app.database.session import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_user_username"),
        {"extend_existing": True},
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(150), nullable=False)
    # bcrypt hash, never returned by the API
    password = Column(String(255), nullable=False)
    first_name = Column(String(150))
    last_name = Column(String(150))
    email = Column(String(150))
    phone_number = Column(String(20))
    role = Column(String(50))

    # System fields
    active = Column(Boolean, default=True, nullable=False)
    created_by = Column(String(150))
    deleted_at = Column(DateTime)
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
