"""
Top‑level API router.

When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import contacts

router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
