import os

from fastapi import FastAPI
from dotenv import load_dotenv

# .env must be loaded before settings are read
load_dotenv()

from fixture_app import __version__
from fixture_app.api.router import api_router
from fixture_app.core.config import get_settings
from fixture_app.core.logging import DEFAULT_LOG_LEVEL, configure_logging

# configured from the raw env so settings warnings use the package handler
configure_logging(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))

settings = get_settings()


def create_application() -> FastAPI:
    # docs are disabled so only the two fixture routes exist
    application = FastAPI(
        title=settings.app_title,
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(api_router)
    return application


app = create_application()


if __name__ == "__main__":
    from fixture_app.server import serve

    serve(settings)
