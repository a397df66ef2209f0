from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Registration payload; presence and format are checked by utils.validate
class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(None, alias="confirmPassword")


# Schema for user authentication credentials
class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# Non-sensitive projection of a user row
class UserResponse(ORMBase):
    id: int
    first_name: str
    last_name: str
    email: str


# Returned by both /register and /login
class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


# Decoded JWT payload, the authenticated identity of a request
class TokenData(BaseModel):
    id: int
    email: str
