from pydantic import BaseModel
from typing import Optional


class Profile(BaseModel):
    id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = "user"
    created_at: Optional[str] = None


class ProfileCreate(BaseModel):
    id: Optional[str] = None  # defaults to the signed-in user's id
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
