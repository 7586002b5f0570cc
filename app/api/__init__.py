"""
API routes for the wealth projection engine.
"""

from fastapi import APIRouter

from app.api import calculations, share

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(share.router, prefix="/share", tags=["share"])
