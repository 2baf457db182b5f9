"""HTTP routes."""

from fastapi import APIRouter

from onboarding.api import applications, auth, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(applications.router, prefix="/applications", tags=["applications"])
router.include_router(
    applications.admin_router,
    prefix="/admin/applications",
    tags=["admin"],
)
