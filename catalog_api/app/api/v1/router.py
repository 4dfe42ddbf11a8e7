"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  When
new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import classes, sectors

router = APIRouter()

router.include_router(sectors.router, prefix="/sectors", tags=["sectors"])
router.include_router(classes.router, prefix="/classes", tags=["classes"])
