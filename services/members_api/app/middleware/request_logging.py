import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request: REQUEST on success, REQUEST_ERROR on failure"""

    async def dispatch(self, request: Request, call_next):
        uri = request.url.path
        if request.url.query:
            uri += f"?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("REQUEST_ERROR", extra={"uri": uri, "status": 500, "err": str(e)})
            raise

        # set by the application's error handlers
        error = getattr(request.state, "error", None)
        if error is not None or response.status_code >= 500:
            logger.error(
                "REQUEST_ERROR",
                extra={"uri": uri, "status": response.status_code, "err": error or ""},
            )
        else:
            logger.info("REQUEST", extra={"uri": uri, "status": response.status_code})
        return response
