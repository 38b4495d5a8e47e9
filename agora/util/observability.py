"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Vote created", answer_id=str(answer_id), voter_id=str(voter_id))

    with logfire.span("vote_service.cast", answer_id=answer_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from agora.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Development keeps everything on the console unless a token is set;
    production sends to Logfire when a token is present.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.should_send()

    logfire.configure(
        service_name=observability.service_name,
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
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


def _request_attributes(request, attributes):
    """Tag request spans with the voter's wallet when the route has one."""
    result = {**attributes}
    wallet_address = request.query_params.get("walletAddress")
    if wallet_address:
        result["wallet_address"] = wallet_address
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request except health probes.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=engine.dialect.name != "sqlite",
    )
