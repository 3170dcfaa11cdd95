"""
Pydantic schemas for users API request/response validation.

These schemas enforce input validation and define the API contract.
JSON names are camelCase (``firstName``, ``birthDate``); Python
attributes stay snake_case.
No business logic belongs here.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from restful_users.domain.users.entities import (
    ADDRESS_MAX_LEN,
    NAME_MAX_LEN,
    PHONE_MAX_LEN,
)


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases and accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRequest(CamelModel):
    """Request schema for creating or fully replacing a user.

    Attributes:
        id: Accepted for client convenience and always ignored.
        email: Contact e-mail (required, unique).
        first_name: Given name (required).
        last_name: Family name (required).
        birth_date: ISO date of birth (required).
        address: Optional postal address.
        phone_number: Optional phone number.
    """

    id: Optional[int] = Field(default=None, description="Ignored; assigned by storage")
    email: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    birth_date: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    address: Optional[str] = Field(default=None, max_length=ADDRESS_MAX_LEN)
    phone_number: Optional[str] = Field(default=None, max_length=PHONE_MAX_LEN)


class UserResponse(CamelModel):
    """A stored user."""

    id: int
    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: Optional[str] = None
    phone_number: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str = Field(..., description="\"ok\" or \"unavailable\"")


class ErrorResponse(BaseModel):
    """Error body returned by the business-rule error handlers."""

    error: str
    status: str
    message: Optional[str] = None
