# /api/routes.py
# This module defines the main API router for the GitHub Pages Explorer, which includes all the
# individual endpoint routers.
from fastapi import APIRouter
from .pages import router as pages_router

router = APIRouter()
router.include_router(pages_router)
