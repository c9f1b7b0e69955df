"""FastAPI HTTP endpoints for Adaptogen.

This module exposes the parser registry over REST. It requires FastAPI to
be installed (via the 'http' extra). Mount ``router`` on an application;
override the ``get_registry`` dependency to serve a custom registry.
"""

from typing import Any, Dict

try:
    from fastapi import APIRouter, Depends, HTTPException, Request
except ImportError:
    raise ImportError(
        "FastAPI is required for HTTP endpoints. "
        "Please install with: pip install adaptogen[http]"
    )

from ..parsers.errors import InvalidJsonError, ParseError, UnsupportedModelError
from ..registry import ParserRegistry, get_default_registry


router = APIRouter()


def get_registry() -> ParserRegistry:
    """Registry used by the endpoints."""
    return get_default_registry()


def _error_detail(error: ParseError) -> Dict[str, Any]:
    detail = {"kind": error.kind, "message": str(error)}
    if error.model is not None:
        detail["model"] = error.model
    return detail


@router.post("/parse")
async def parse_response(request: Request, registry: ParserRegistry = Depends(get_registry)):
    """Normalize the raw provider response sent as the request body."""
    body = await request.body()
    try:
        raw_response = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=422, detail=_error_detail(InvalidJsonError(e)))

    try:
        frame = registry.parse(raw_response)
    except UnsupportedModelError as e:
        raise HTTPException(status_code=404, detail=_error_detail(e))
    except ParseError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e))

    return frame.model_dump(mode="json")


@router.get("/models")
async def registered_models(registry: ParserRegistry = Depends(get_registry)):
    """Return registered model identifiers and their parser names."""
    return {"models": registry.list_models()}
