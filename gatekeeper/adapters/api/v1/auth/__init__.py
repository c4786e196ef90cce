from fastapi import APIRouter

from .routes.login import router as login_router

router = APIRouter(prefix="/auth")
router.include_router(login_router)
