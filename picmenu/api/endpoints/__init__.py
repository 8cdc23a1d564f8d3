from fastapi import APIRouter
from .menu import router as menu_router
from .uploads import router as uploads_router

router = APIRouter()
router.include_router(menu_router)
router.include_router(uploads_router)
