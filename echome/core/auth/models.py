# echome/core/auth/models.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Identity(BaseModel):
    """Caller identity resolved from a bearer credential."""
    uid: str
    email: Optional[str] = None


class UserSchema(BaseModel):
    """Pydantic schema for a stored-credential account."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class UserCreateSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)  # Received plain, stored hashed


class UserLoginSchema(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
