# safecall/schemas/user.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class SignupRequest(BaseModel):
    phone: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    phone: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None


class UserOut(BaseModel):
    id: str
    phone_number: str
    name: Optional[str]
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AuthOut(BaseModel):
    token: str
    user: UserOut
