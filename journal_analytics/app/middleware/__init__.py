from .body_limit import BodySizeLimitMiddleware
from .logging import RequestLoggingMiddleware

__all__ = ["BodySizeLimitMiddleware", "RequestLoggingMiddleware"]
