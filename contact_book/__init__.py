"""Contact Book: a REST backend for clients and their contacts.

Run with:
    uvicorn contact_book.main:app --reload
"""
