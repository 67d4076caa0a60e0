"""Request and response schemas for clients ("users") and their contacts."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientCreate(BaseModel):
    """Client creation request."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class ContactCreate(BaseModel):
    """Contact creation request. Empty strings mean "not provided"."""

    type: str = Field(..., max_length=50)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)


class ClientSummary(BaseModel):
    """Client fields embedded in contact responses."""

    id: UUID
    name: str
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class ContactResponse(BaseModel):
    """Contact as listed under its client."""

    id: UUID
    type: str
    email: str | None
    phone: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ContactCreatedResponse(ContactResponse):
    """Created contact with the owning client's summary."""

    client: ClientSummary


class ClientResponse(ClientSummary):
    """Client with its contacts, in creation order."""

    contacts: list[ContactResponse] = []


class MessageResponse(BaseModel):
    """Error body returned for rejected requests."""

    message: str
