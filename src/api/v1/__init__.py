"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.navigation import router as navigation_router
from api.v1.routes.profile import router as profile_router
from api.v1.routes.session import router as session_router
from api.v1.routes.users import router as users_router
from api.v1.routes.users import specialties_router

router = APIRouter()
router.include_router(navigation_router)
router.include_router(session_router)
router.include_router(users_router)
router.include_router(specialties_router)
router.include_router(profile_router)
