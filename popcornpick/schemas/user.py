from pydantic import BaseModel, ConfigDict
from typing import Optional

class SignupRequest(BaseModel):
    # Presence and format are checked by AccountService so failures share one error shape
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class UserPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str

class UserResponse(UserPublic):
    id: int

class AuthResponse(BaseModel):
    token: str
    user: UserPublic
