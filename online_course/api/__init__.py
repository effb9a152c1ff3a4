# ==============================================================================
# API PACKAGE INITIALIZATION
# ==============================================================================

from online_course.api.router import api_router

__all__ = [
    "api_router",
]
