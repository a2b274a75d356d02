"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from src.api.router import api_router
from src.auth.service import AuthService
from src.config import settings
from src.db.schema import init_schema
from src.db.turso import TursoClient
from src.errors import AuthenticationError, PortalError
from src.events.bus import EventBus
from src.events.store import AuditLogStore
from src.i18n.localize import parse_language, translate
from src.models.base import Language
from src.repositories.account_repo import AuthUserRepository, SessionRepository
from src.repositories.announcement_repo import AnnouncementRepository
from src.repositories.complaint_repo import ComplaintRepository
from src.repositories.meeting_repo import DecisionRepository, MeetingRepository
from src.repositories.profile_repo import ProfileRepository, RoleRepository
from src.services.admin_service import AdminService
from src.services.announcement_service import AnnouncementService
from src.services.complaint_service import ComplaintService
from src.services.dashboard_service import DashboardService
from src.services.decision_service import DecisionService
from src.services.meeting_service import MeetingService
from src.services.profile_service import ProfileService
from src.storage.minutes_storage import MINUTES_BUCKET, MinutesStorage

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)
log = structlog.get_logger()


def build_services(
    app: FastAPI,
    db: TursoClient,
    storage: MinutesStorage | None = None,
    require_email_verification: bool | None = None,
) -> None:
    """Wire repositories, the audit trail and services into app state."""
    audit_store = AuditLogStore(db)
    event_bus = EventBus(store=audit_store)
    storage = storage or MinutesStorage()

    users = AuthUserRepository(db)
    sessions = SessionRepository(db)
    profiles = ProfileRepository(db)
    roles = RoleRepository(db)
    decisions = DecisionRepository(db)
    meetings = MeetingRepository(db, decisions=decisions)
    complaints = ComplaintRepository(db)
    announcements = AnnouncementRepository(db)

    app.state.db = db
    app.state.audit_store = audit_store
    app.state.event_bus = event_bus
    app.state.minutes_storage = storage

    app.state.auth_service = AuthService(
        users,
        sessions,
        profiles,
        roles,
        event_bus,
        require_email_verification=require_email_verification,
    )
    app.state.meeting_service = MeetingService(meetings, decisions, storage, event_bus)
    app.state.decision_service = DecisionService(decisions, meetings, event_bus)
    app.state.complaint_service = ComplaintService(complaints, event_bus)
    app.state.announcement_service = AnnouncementService(announcements, event_bus)
    app.state.profile_service = ProfileService(profiles, sessions, event_bus)
    app.state.admin_service = AdminService(profiles, roles, audit_store, event_bus)
    app.state.dashboard_service = DashboardService(
        profiles,
        meetings,
        decisions,
        complaints,
        app.state.announcement_service,
        app.state.complaint_service,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Initialize database connection and schema
    - Create the minutes storage directory
    - Wire the event bus, audit store and services

    Shutdown:
    - Close database connection
    """
    logger.info(f"Starting {settings.app_name}...")

    db = TursoClient()
    await db.connect()
    await init_schema(db)
    logger.info(f"Database connected: {db.url}")

    storage = MinutesStorage()
    storage.bucket_dir.mkdir(parents=True, exist_ok=True)

    build_services(app, db, storage=storage)
    logger.info("Services initialized")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await db.close()


def _request_language(request: Request) -> Language:
    language = getattr(request.state, "language", None)
    if language is not None:
        return language
    return parse_language(
        request.query_params.get("lang"),
        default=parse_language(settings.default_language),
    )


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    """Turn domain errors into JSON responses with a localized detail."""
    language = _request_language(request)
    detail = translate(exc.message_key, language) if exc.message_key else str(exc)
    log.warning(
        "request_failed",
        path=request.url.path,
        status_code=exc.status_code,
        error=type(exc).__name__,
        reason=str(exc),
    )
    headers = (
        {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail, "error": type(exc).__name__},
        headers=headers,
    )


app = FastAPI(
    title=settings.app_name,
    description="Council management portal: meetings, decisions, complaints",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_exception_handler(PortalError, portal_error_handler)
app.include_router(api_router)
app.mount(
    f"{settings.storage_public_base_url.rstrip('/')}/{MINUTES_BUCKET}",
    StaticFiles(directory=Path(settings.storage_dir) / MINUTES_BUCKET, check_dir=False),
    name=MINUTES_BUCKET,
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
