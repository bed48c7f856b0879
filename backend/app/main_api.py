import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.routes.ats import router as ats_router
from .core.config import Settings, get_settings
from .schemas.ats import HealthResponse

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    if not settings.has_api_key:
        logger.warning("GEMINI_API_KEY not set. Set it in .env; AI endpoints will return 500.")

    app = FastAPI(
        title="ATS Resume Optimizer API",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(ats_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        return {"status": "ok"}

    # Mounted last so the API routes above take precedence over same-named files.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()
