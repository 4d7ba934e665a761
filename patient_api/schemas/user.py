from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CreateUser(BaseModel):
    name: str = Field(max_length=128)
    email: EmailStr
    phone: str | None = None


class ReturnCreatedUser(BaseModel):
    message: str
    new_user: dict[str, Any] = Field(alias="newUser")
    is_member: bool = Field(alias="isMember")
    model_config = ConfigDict(populate_by_name=True)
