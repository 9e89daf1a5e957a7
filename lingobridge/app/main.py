import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .config import load_settings
from .llm import GroqChatClient
from .routers import translate
from .translator import TranslationService

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    app.state.translation_service = TranslationService(GroqChatClient.from_settings(settings))
    logger.info("Translating with model %s via %s", settings.model, settings.api_base_url)
    yield


def health() -> dict[str, str]:
    return {"status": "ok"}


def create_app(static_dir: Path = STATIC_DIR) -> FastAPI:
    """Build the API plus the single-page UI served from ``static_dir``."""
    application = FastAPI(
        title="LingoBridge API",
        version="0.1.0",
        description="Language-pair translation backed by a hosted chat-completion model",
        lifespan=lifespan,
    )

    versioned = APIRouter(prefix="/api/v1")
    versioned.add_api_route("/health", health, methods=["GET"], tags=["health"])
    versioned.include_router(translate.router)

    application.add_api_route("/health", health, methods=["GET"], include_in_schema=False)
    application.add_api_route(
        "/",
        lambda: FileResponse(static_dir / "index.html"),
        methods=["GET"],
        include_in_schema=False,
    )
    application.include_router(versioned)
    application.mount("/static", StaticFiles(directory=static_dir), name="static")
    return application


app = create_app()
