"""BFHL API - FastAPI application.

Endpoints
---------
========  ===========  ==========================================
Method    Path         Purpose
========  ===========  ==========================================
GET       ``/``        Route listing
GET       ``/health``  Liveness probe with the operator email
POST      ``/bfhl``    Run one fibonacci/prime/lcm/hcf/AI request
========  ===========  ==========================================
"""

from typing import Annotated

import httpx
import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from .config import Settings, get_settings
from .log import configure_logging
from .dispatch.router import router as bfhl_router
from .dispatch.schemas import BFHLResponse, HealthResponse
from .dispatch.exceptions import InvalidRequestError, InternalDispatchError

settings = get_settings()
logger = structlog.get_logger("bfhl")

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    # Initialize global HTTP client for connection pooling
    # timeouts=None removes global default timeout, allowing per-request timeouts
    app.state.http_client = httpx.AsyncClient(timeout=None)
    logger.info("startup", app=settings.APP_NAME, port=settings.PORT)

    yield

    # Shutdown: Close HTTP client
    await app.state.http_client.aclose()

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

# Global exception handlers
@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    return JSONResponse(
        status_code=400,
        content=BFHLResponse.failure(exc.message).to_content()
    )

@app.exception_handler(InternalDispatchError)
async def internal_dispatch_handler(request: Request, exc: InternalDispatchError):
    return JSONResponse(
        status_code=500,
        content=BFHLResponse.failure(exc.message).to_content()
    )

@app.get("/")
async def root():
    return {"message": "API is running", "health": "/health", "bfhl": "/bfhl"}

@app.get("/health", response_model=HealthResponse)
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    return HealthResponse(official_email=settings.OFFICIAL_EMAIL)

# Include routers
app.include_router(bfhl_router)


def main() -> None:
    """Launch the uvicorn ASGI server on the configured host and port.

    Registered as the ``bfhl`` console script in ``pyproject.toml``.
    """
    import uvicorn

    uvicorn.run(
        "bfhl.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )


if __name__ == "__main__":
    main()
