"""Global dependencies for the application."""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from bfhl.config import Settings, get_settings
from bfhl.genai import TextGenerator
from bfhl.dispatch.service import Dispatcher


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency to get the global shared HTTP client.
    
    This client is initialized in main.py lifespan and shared across requests
    to enable connection pooling (keep-alive).
    
    Args:
        request: The FastAPI request object.
        
    Returns:
        The global httpx.AsyncClient instance.
    """
    return request.app.state.http_client


async def get_text_generator(
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TextGenerator:
    """Dependency building a Gemini client on the shared HTTP client."""
    return TextGenerator(
        client=client,
        api_key=settings.GEMINI_API_KEY,
        model=settings.GEMINI_MODEL,
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.AI_TIMEOUT_SECONDS,
    )


async def get_dispatcher(
    settings: Annotated[Settings, Depends(get_settings)],
    generator: Annotated[TextGenerator, Depends(get_text_generator)],
) -> Dispatcher:
    """Dependency wiring settings and the text generator into a Dispatcher."""
    return Dispatcher(settings=settings, generator=generator)
