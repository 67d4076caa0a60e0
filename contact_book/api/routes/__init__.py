"""API routes."""

from fastapi import APIRouter

from contact_book.api.routes import contacts, users

api_router = APIRouter()

api_router.include_router(users.router, tags=["users"])
api_router.include_router(contacts.router, tags=["contacts"])
