"""User (client) routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.api.schemas.users import ClientCreate, ClientResponse, ClientSummary, MessageResponse
from contact_book.domain.services.client_service import ClientService
from contact_book.persistence.database import get_db

router = APIRouter()


@router.post("/users", response_model=ClientSummary, status_code=status.HTTP_201_CREATED)
async def create_user(
    client_data: ClientCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ClientSummary:
    """Create a new client."""
    client = await ClientService(db).create_client(client_data.name)
    return ClientSummary.model_validate(client)


@router.get("/users", response_model=list[ClientResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ClientResponse]:
    """List every client with its contacts."""
    clients = await ClientService(db).list_clients()
    return [ClientResponse.model_validate(client) for client in clients]


@router.get(
    "/user/{client_id}",
    response_model=ClientResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse}},
)
async def get_user(
    client_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ClientResponse:
    """Get a client with its contacts."""
    client = await ClientService(db).get_client(client_id)
    return ClientResponse.model_validate(client)
