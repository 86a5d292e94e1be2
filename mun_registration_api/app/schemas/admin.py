"""
Pydantic models for the admin login endpoint.
"""

from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    username: str = Field(..., example="admin")
    password: str = Field(..., example="secret")


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    access_token: str
    token_type: str = "bearer"
