# /main.py
# This is the main entry point for the GitHub Pages Explorer. It sets up the FastAPI app, including configuration,
# routes, services, and error handling.
from __future__ import annotations

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .settings import settings
from .utils.errors import AppError
from .utils.logging import get_logger, setup_logging
from .api.routes import router
from .services.github_client import GitHubClient
from .services.pages_service import PagesService

setup_logging(settings.log_level)
logger = get_logger(__name__)


# Optional Django UI mount -- the interactive Pages grid lives at /ui. Can be disabled with ENABLE_DJANGO_UI=false.
def mount_django(app: FastAPI) -> None:
    if not settings.enable_django_ui:
        logger.info("Django UI disabled (ENABLE_DJANGO_UI is False)")
        return
    try:
        from .django_ui.asgi import get_django_asgi_app
        django_app = get_django_asgi_app()
        app.mount("/ui", django_app)  # GO to localhost:8000/ui to browse Pages repositories
        logger.info("Django UI mounted at /ui")
    except Exception:
        logger.exception("Django UI failed to mount")


@asynccontextmanager  # Creates the shared GitHub client on startup and closes it on shutdown.
async def lifespan(app: FastAPI):
    github = GitHubClient()
    svc = PagesService(github=github)

    # expose service on app.state for the API dependency
    app.state.svc = svc

    # inject service into Django UI
    if settings.enable_django_ui:
        from .django_ui import views as django_views
        django_views._svc = svc

    logger.info("%s %s started", settings.app_name, __version__)
    yield

    await github.aclose()


app = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
app.include_router(router)
mount_django(app)


@app.exception_handler(AppError)
async def app_error_handler(_: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"status": "error", "message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError):
    # Force the required error shape
    return JSONResponse(status_code=400, content={"status": "error", "message": "Invalid request"})


@app.exception_handler(Exception)
async def unhandled_error_handler(_: Request, exc: Exception):
    logger.exception("Unhandled error", exc_info=exc)
    return JSONResponse(status_code=500, content={"status": "error", "message": "Internal server error"})
