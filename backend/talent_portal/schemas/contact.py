"""Schemas for the "request this associate" contact form."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ._strict_base import StrictModel


class ContactRequest(BaseModel):
    """
    Contact form payload.

    Required fields are validated by ContactService rather than pydantic so a
    missing field surfaces as a 400 with the list of missing names. Both
    snake_case and camelCase keys are accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    profile_id: Optional[str] = Field(None, alias="profileId")
    profile_name: Optional[str] = Field(None, alias="profileName", max_length=200)
    location: Optional[str] = Field(None, max_length=100)
    office_email: Optional[str] = Field(None, alias="officeEmail", max_length=255)
    name: Optional[str] = Field(None, max_length=200)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    comment: Optional[str] = Field(None, max_length=5000)


class ContactResponse(StrictModel):
    success: bool
    message: str
