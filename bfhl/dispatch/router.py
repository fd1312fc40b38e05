"""FastAPI router for the /bfhl endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from bfhl.dependencies import get_dispatcher

from .schemas import BFHLResponse
from .service import Dispatcher


router = APIRouter(tags=["bfhl"])


async def read_envelope(request: Request) -> Any:
    """Decode the JSON request body, or None if it isn't valid JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("/bfhl", response_model=BFHLResponse, response_model_exclude_none=True)
async def bfhl_endpoint(
    request: Request,
    dispatcher: Annotated[Dispatcher, Depends(get_dispatcher)],
) -> BFHLResponse:
    """Run the single operation named by the request body's only key.
    
    The body is read directly instead of through a Pydantic model so that
    malformed envelopes get the service's own 400 response rather than
    FastAPI's 422.
    
    Args:
        request: Incoming request carrying the JSON envelope.
        dispatcher: Dispatcher bound to settings and the text generator.
        
    Returns:
        BFHLResponse with the operation result.
    """
    payload = await read_envelope(request)
    return await dispatcher.dispatch(payload)
