# ==============================================================================
# ONLINE COURSE PACKAGE INITIALIZATION
# ==============================================================================
# Online course platform REST API with FastAPI
# Architecture: Routers -> Services -> Repositories -> SQLAlchemy adapter
# ==============================================================================

"""
Online Course Platform API
==========================

REST backend for an online course platform: courses, categories,
enrollments, reviews, video requests and user profiles.

Features:
---------
- Repository Pattern over an async SQLAlchemy persistence gateway
- Explicit mapping profile between stored entities and transport models
- Bearer token verification with role and scope checks
- Blob storage and email collaborators injected at startup
- Health checks for the database and process memory

Usage:
------
    from online_course.main import app

    # Run with uvicorn
    uvicorn online_course.main:app --reload
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
