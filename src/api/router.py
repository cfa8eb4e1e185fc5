from fastapi import APIRouter

from src.api.endpoints import documents, health

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(documents.router, tags=["documents"])
