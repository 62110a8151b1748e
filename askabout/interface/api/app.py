"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from askabout.config import Settings
from askabout.interface.api.routes import health, ratings, votes
from askabout.util.di.container import create_container, setup_di
from askabout.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Build the app with the production container.

    Logfire is configured by ``scripts/start_app.py`` before this runs.
    Tests call ``setup_di`` again with a container of in-memory repositories.
    """
    settings = Settings()

    app = FastAPI(
        title="AskAbout API",
        description="Likes, dislikes and per-topic ratings of questions and comments",
        version="0.1.0",
    )
    instrument_fastapi(app)

    # The frontend sends the auth_token cookie cross-origin
    origins = {settings.frontend_url, "http://localhost:3000"}
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(origins),
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", "Origin"],
        max_age=600,
    )

    setup_di(app, create_container())

    for router in (health.router, votes.router, ratings.router):
        app.include_router(router)

    return app


app = create_app()
