import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fitservice.app.core.cors import cors_headers

logger = logging.getLogger(__name__)

async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTPException as {"error": ...} with CORS headers attached."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}", extra={"status": exc.status_code})
    headers = dict(exc.headers or {})
    headers.update(cors_headers(request))
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=headers)

async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} -> 500", exc_info=exc, extra={"status": 500})
    return JSONResponse(status_code=500, content={"error": "Internal error"}, headers=cors_headers(request))
