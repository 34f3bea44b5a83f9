"""Logfire setup and instrumentation.

Application code logs and traces through logfire directly:

    logfire.info("Vote cast", voter_id=str(voter_id), outcome=result.outcome)

    with logfire.span("best_answer_service.mark_best", question_id=str(qid)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.config import ObservabilitySettings, Settings

SERVICE_NAME = "qna-backend"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    turns sending on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once at process start, before the app is built."""
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
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
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its method, route and duration."""
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
