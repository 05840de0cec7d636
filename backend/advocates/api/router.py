"""API router - includes all endpoints."""

from fastapi import APIRouter

from advocates.api.endpoints import advocates, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="", tags=["Health"])
api_router.include_router(advocates.router, prefix="", tags=["Advocates"])
