import logging

import uvicorn

from .core.config import get_settings
from .core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("=" * 50)
    logger.info(f"Launching ATS Resume Optimizer on http://{settings.host}:{settings.port}")
    logger.info("=" * 50)
    uvicorn.run(
        "backend.app.main_api:app",
        host=settings.host,
        port=settings.port,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
