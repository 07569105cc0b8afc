from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()

CORRELATION_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id, path and method to every log line of a request."""

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
            logger.info("request_completed", status_code=response.status_code)
            return response
