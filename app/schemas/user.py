"""
User preference and auth schemas
"""

from pydantic import BaseModel, EmailStr, Field


class UserPreferences(BaseModel):
    nickname: str = "Escaper"
    notifications_enabled: bool = True
    is_admin: bool = False


class NicknameUpdate(BaseModel):
    nickname: str = Field(..., max_length=50)


class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    nickname: str = Field(..., min_length=1, max_length=50)


class UserLogin(BaseModel):
    email: EmailStr
    password: str
