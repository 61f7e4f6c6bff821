import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.settings import Settings, get_settings
from app.logging import configure_logging
from app.error_handlers import attach_error_handlers
from api.router import api_router
from domain.ports import AnalysisRequester, TextExtractor
from infra.llm.client import GeminiClient
from infra.pdf.parser import PdfTextExtractor

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    extractor: Optional[TextExtractor] = None,
    requester: Optional[AnalysisRequester] = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.extractor = extractor or PdfTextExtractor()
    app.state.requester = requester or GeminiClient(settings)

    if not settings.GEMINI_API_KEY and requester is None:
        logger.warning("GEMINI_API_KEY is not set; /analyze will fail until it is configured")

    attach_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


configure_logging(get_settings())
app = create_app()


def run():
    settings = get_settings()
    logger.info("Server running on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
