# main.py
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
# This avoids confusing situations where scripts see .env but uvicorn doesn't.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env", override=False)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.config import build_sqlalchemy_db_url, is_memory_backend
from app.database import Base, engine
from app.errors import register_error_handlers
from app.models import ContactMessage, Experience, PortfolioContent, Project, Skill, User  # noqa: F401
from app.api.routes.health import router as health_router
from app.routers import admin, auth, contact, content, experiences, github, projects, skills
from app.services.seed_service import seed_store
from app.services.upload_service import UPLOAD_URL_PREFIX
from app.storage import MemoryStore


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # In-memory deployments start from the default portfolio content.
        if is_memory_backend(settings):
            store = MemoryStore()
            seed_store(store)
            app.state.memory_store = store
            logger.info("storage backend=memory (seeded defaults)")
        else:
            logger.info("storage backend=sql")
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(application)

    @application.middleware("http")
    async def log_api_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith(settings.api_prefix):
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s %s in %.0fms", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix=settings.api_prefix)
    application.include_router(content.router, prefix=settings.api_prefix)
    application.include_router(skills.router, prefix=settings.api_prefix)
    application.include_router(experiences.router, prefix=settings.api_prefix)
    application.include_router(projects.router, prefix=settings.api_prefix)
    application.include_router(github.router, prefix=settings.api_prefix)
    application.include_router(contact.router, prefix=settings.api_prefix)
    application.include_router(admin.router, prefix=settings.api_prefix)

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=upload_dir), name="uploads")

    # Built frontend bundle, if any. Mounted last so it never shadows the API.
    if settings.static_dir and Path(settings.static_dir).is_dir():
        application.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    # Avoid accidental schema changes in shared databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
