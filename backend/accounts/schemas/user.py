"""
Request/response shapes for the user API.

Input fields are all optional at parse time so that missing values reach
the validator and are reported together with every other violation.
Wire names are camelCase (createdAt, confirmPassword).
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRegistration(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None


class UserPassword(CamelModel):
    password: Optional[str] = None
    confirm_password: Optional[str] = None


class UserResponse(CamelModel):
    """Externally visible user - never includes the password hash"""
    id: int
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer('created_at')
    def serialize_created_at(self, value: datetime, _info):
        return value.isoformat() if value else None


class UserPage(CamelModel):
    content: list[UserResponse]
    total_elements: int
    total_pages: int
    size: int
    number: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
