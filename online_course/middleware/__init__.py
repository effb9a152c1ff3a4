# ==============================================================================
# MIDDLEWARE PACKAGE INITIALIZATION
# ==============================================================================

from online_course.middleware.request_logger import RequestLoggerMiddleware

__all__ = [
    "RequestLoggerMiddleware",
]
