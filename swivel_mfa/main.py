from contextlib import asynccontextmanager
from fastapi import FastAPI

from swivel_mfa.infrastructure.swivel.probe import HttpReachabilityProbe
from swivel_mfa.logging import setup_logging
from swivel_mfa.presentation.api import api
from swivel_mfa.settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    probe = HttpReachabilityProbe(timeout=settings.swivel_ping_timeout_seconds)
    app.state.probe = probe  # expose to dependencies

    try:
        yield
    finally:
        # shutdown
        await probe.aclose()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title="Swivel MFA API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(api)
    return app


app = create_app()
