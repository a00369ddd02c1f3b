# backend/emailql/utils/headers.py
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("emailql.http")

NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


async def add_cache_headers(request: Request, call_next):
    """Mark every response, including failures, as non-cacheable."""
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
        response = JSONResponse({"detail": "Internal Server Error"}, status_code=500)
    response.headers.update(NO_STORE_HEADERS)
    return response
