"""Logfire setup.

Domain services open a span per operation and emit events inside it:

    with logfire.span("vote_service.like", subject_id=str(subject_id)):
        ...
        logfire.info("Vote applied", delta=delta, rating_amount=amount)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from askabout.config import Settings

SERVICE_NAME = "askabout-backend"


def _should_send(settings: Settings) -> bool:
    # An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise send iff a token is set
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start, before the app is imported."""
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, recording method and path."""

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path if hasattr(request, "url") else None,
        }

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run by the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
