from fastapi import APIRouter

from habitlog.api.routes import router as habits_router

router = APIRouter()
router.include_router(habits_router)

__all__ = ["router"]
