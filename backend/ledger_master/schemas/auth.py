"""
Login Pydantic models
"""
from pydantic import BaseModel, Field
from typing import Optional


class LoginRequest(BaseModel):
    """Login request; presence is checked by the endpoint to answer 400, not 422"""
    username: Optional[str] = Field(None, description="User name")
    password: Optional[str] = Field(None, description="Password")


class LoginUser(BaseModel):
    """Authenticated user, without the password"""
    UserId: int
    IsAllComp: Optional[str] = None
    RightsCompId: Optional[int] = None
    companyId: Optional[int] = None


class LoginResponse(BaseModel):
    message: str
    user: LoginUser
