"""API routes."""

from fastapi import APIRouter

from remarkbook.api.routes import remarks, users

router = APIRouter(prefix="/api")

router.include_router(users.router)
router.include_router(remarks.router)
