"""Pydantic schemas for sign-up, login and player updates."""
from pydantic import BaseModel, Field, field_validator

from questkeeper.core.security import BCRYPT_MAX_BYTES


class UsernameSchema(BaseModel):
    """Sign-up and login normalize the username the same way."""

    username: str = Field(min_length=1, max_length=64)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username must not be blank")
        return v


class SignUpSchema(UsernameSchema):
    password: str = Field(min_length=1)
    adventurer_name: str = Field(alias="adventurerName", min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError("Password too long")
        return v

    class Config:
        populate_by_name = True


class LoginSchema(UsernameSchema):
    password: str


class UserOutSchema(BaseModel):
    id: int
    username: str
    adventurer_name: str = Field(serialization_alias="adventurerName")

    class Config:
        from_attributes = True


class AuthOutSchema(BaseModel):
    user: UserOutSchema
    token: str


class UpdatePlayerSchema(BaseModel):
    new_adventurer_name: str = Field(alias="newAdventurerName", min_length=1, max_length=128)

    class Config:
        populate_by_name = True


class IdentityOutSchema(BaseModel):
    user_id: int = Field(serialization_alias="userId")
    username: str


class MessageSchema(BaseModel):
    message: str
