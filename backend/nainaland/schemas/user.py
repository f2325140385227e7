"""
Nainaland Backend — User and Login Schemas
============================================

What:  Admin accounts and the login contract.
Security:
    User.password_hash is excluded from serialization, so a User can never
    leak its hash through a response model. Routes return UserPublic anyway.
"""

from pydantic import BaseModel, Field

from nainaland.schemas.common import RecordModel


class User(RecordModel):
    id: int
    username: str
    password_hash: str = Field(exclude=True, repr=False)


class UserPublic(BaseModel):
    id: int
    username: str


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str = Field(description="Bearer token for the Authorization header")
    user: UserPublic
