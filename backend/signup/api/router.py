"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from signup.api.health import router as health_router
from signup.api.signup import pages_router, router as signup_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Signup validation (JSON)
api_router.include_router(signup_router, tags=["Signup"])

# HTML pages are exported separately — mounted at app root (no /api/v1 prefix)
page_router = pages_router
