from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    interests: Optional[List[str]] = None


class SignupResponse(BaseModel):
    id: int
    email: str
    name: Optional[str] = None


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: Optional[str] = Field(None, validation_alias="full_name")
    email: str
    phone: Optional[str] = None
    role: Optional[str] = None
    interests: Optional[List[str]] = None
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    interests: Optional[List[str]] = None


class Token(BaseModel):
    access_token: str
    token_type: str
