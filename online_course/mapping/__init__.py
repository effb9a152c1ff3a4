# ==============================================================================
# MAPPING PACKAGE INITIALIZATION
# ==============================================================================

"""
Mapping Layer
=============

Conversions between SQLAlchemy entities and pydantic transport models.
"""

from online_course.mapping.profile import (
    MappingProfile,
    build_mapping_profile,
    current_payment,
    display_name,
    user_rating,
)

__all__ = [
    "MappingProfile",
    "build_mapping_profile",
    "current_payment",
    "display_name",
    "user_rating",
]
