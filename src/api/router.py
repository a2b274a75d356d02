"""API router aggregation."""

from fastapi import APIRouter

from src.api.admin import router as admin_router
from src.api.announcements import router as announcements_router
from src.api.auth import router as auth_router
from src.api.complaints import router as complaints_router
from src.api.dashboard import router as dashboard_router
from src.api.decisions import router as decisions_router
from src.api.health import router as health_router
from src.api.i18n import router as i18n_router
from src.api.landing import router as landing_router
from src.api.meetings import router as meetings_router
from src.api.profile import router as profile_router

api_router = APIRouter()
api_router.include_router(landing_router)
api_router.include_router(health_router)
api_router.include_router(i18n_router)
api_router.include_router(auth_router)
api_router.include_router(dashboard_router)
api_router.include_router(meetings_router)
api_router.include_router(decisions_router)
api_router.include_router(complaints_router)
api_router.include_router(announcements_router)
api_router.include_router(profile_router)
# Admin panel: users, roles and audit log
api_router.include_router(admin_router)
