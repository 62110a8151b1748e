"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from askabout.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the PostgreSQL-backed implementations.

    ``FastapiProvider`` makes the current ``Request`` injectable.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; DishkaRoute handlers resolve from it."""
    setup_dishka(container, app)
