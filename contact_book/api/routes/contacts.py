"""Contacts API endpoints, nested under their owning user (client)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.api.schemas.users import (
    ContactCreate,
    ContactCreatedResponse,
    ContactResponse,
    MessageResponse,
)
from contact_book.domain.services.contact_service import ContactService
from contact_book.persistence.database import get_db

router = APIRouter(prefix="/user/{client_id}")


@router.post(
    "/contact",
    response_model=ContactCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    },
)
async def create_contact(
    client_id: str,
    contact_data: ContactCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ContactCreatedResponse:
    """Create a contact for a client."""
    contact = await ContactService(db).create_contact(
        client_id,
        type=contact_data.type,
        email=contact_data.email,
        phone=contact_data.phone,
    )
    return ContactCreatedResponse.model_validate(contact)


@router.get(
    "/contacts",
    response_model=list[ContactResponse],
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def list_contacts(
    client_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ContactResponse]:
    """List a client's contacts in creation order."""
    contacts = await ContactService(db).list_contacts(client_id)
    return [ContactResponse.model_validate(contact) for contact in contacts]


@router.delete(
    "/contact/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    },
)
async def delete_contact(
    client_id: str,
    contact_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """Delete one of a client's contacts."""
    await ContactService(db).delete_contact(client_id, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
