"""HTTP integration: request/response logging middleware."""

from __future__ import annotations

from .middleware import RequestLoggingMiddleware, format_request_line, severity_for_status

__all__ = ["RequestLoggingMiddleware", "format_request_line", "severity_for_status"]
