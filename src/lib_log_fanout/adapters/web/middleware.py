"""Request/response logging middleware for starlette applications.

Purpose
-------
Emit exactly one record per handled request, with the severity derived from
the response status code.

Contents
--------
* :func:`severity_for_status` - fixed status-to-severity mapping.
* :func:`format_request_line` - ``[status] METHOD uri`` message text.
* :class:`RequestLoggingMiddleware` - ``BaseHTTPMiddleware`` submitting to a
  :class:`Dispatcher`.
"""

from __future__ import annotations

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from lib_log_fanout.application.use_cases.dispatch import Dispatcher
from lib_log_fanout.domain.levels import LogLevel


def severity_for_status(status: int) -> LogLevel:
    """Map an HTTP status code to the severity of its request record.

    Examples
    --------
    >>> [severity_for_status(code).name for code in (200, 302, 404, 499, 500, 503)]
    ['INFO', 'INFO', 'WARNING', 'WARNING', 'ERROR', 'ERROR']
    """

    if status >= 500:
        return LogLevel.ERROR
    if status >= 400:
        return LogLevel.WARNING
    return LogLevel.INFO


def format_request_line(status: int, method: str, uri: str) -> str:
    """Return the single-line request summary.

    Examples
    --------
    >>> format_request_line(404, "GET", "http://localhost/missing")
    '[404] GET http://localhost/missing'
    """

    return f"[{status}] {method} {uri}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request through ``dispatcher`` once the response is known."""

    def __init__(self, app: ASGIApp, *, dispatcher: Dispatcher) -> None:
        super().__init__(app)
        self._dispatcher = dispatcher

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            response = await call_next(request)
        except Exception:
            await self._record(500, request)
            raise
        await self._record(response.status_code, request)
        return response

    async def _record(self, status: int, request: Request) -> None:
        line = format_request_line(status, request.method, str(request.url))
        # channels may block (SMS hand-off); keep them off the event loop
        await run_in_threadpool(self._dispatcher.log, severity_for_status(status), line)


__all__ = ["RequestLoggingMiddleware", "format_request_line", "severity_for_status"]
