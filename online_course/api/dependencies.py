# ==============================================================================
# API DEPENDENCIES - Dependency Injection
# ==============================================================================
# FastAPI dependencies for authentication, authorization, collaborators and
# domain services
# ==============================================================================

from __future__ import annotations

from typing import Annotated, Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from online_course.core.constants import ErrorMessages
from online_course.core.exceptions import AuthenticationError, AuthorizationError
from online_course.core.health import HealthCheckService
from online_course.core.security import Principal, principal_from_token
from online_course.core.settings import settings
from online_course.database.adapters.base_adapter import BaseDatabaseAdapter
from online_course.database.factory import DatabaseFactory
from online_course.database.repositories import (
    CourseCategoryRepository,
    CourseRepository,
    EnrollmentRepository,
    InstructorRepository,
    ReviewRepository,
    UserRepository,
    VideoRequestRepository,
)
from online_course.integrations.blob_storage import BlobStorageService
from online_course.integrations.email_notification import EmailNotification
from online_course.mapping.profile import MappingProfile
from online_course.services import (
    ContactService,
    CourseCategoryService,
    CourseService,
    EnrollmentService,
    ReviewService,
    UserProfileService,
    VideoRequestService,
)

# Bearer scheme for identity provider tokens
bearer_scheme = HTTPBearer(auto_error=False)


# ==============================================================================
# DATABASE & COLLABORATOR DEPENDENCIES
# ==============================================================================

async def get_adapter() -> BaseDatabaseAdapter:
    """Initialized adapter from the factory."""
    return DatabaseFactory.get_adapter()


def get_mapper(request: Request) -> MappingProfile:
    return request.app.state.mapper


def get_blob_storage(request: Request) -> BlobStorageService:
    return request.app.state.blob_storage


def get_email_notification(request: Request) -> EmailNotification:
    return request.app.state.email_notification


def get_health_service(request: Request) -> HealthCheckService:
    return request.app.state.health_service


DatabaseDep = Annotated[BaseDatabaseAdapter, Depends(get_adapter)]
MapperDep = Annotated[MappingProfile, Depends(get_mapper)]
BlobStorageDep = Annotated[BlobStorageService, Depends(get_blob_storage)]
EmailDep = Annotated[EmailNotification, Depends(get_email_notification)]
HealthServiceDep = Annotated[HealthCheckService, Depends(get_health_service)]


# ==============================================================================
# AUTHENTICATION DEPENDENCIES
# ==============================================================================

async def get_current_principal(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
) -> Principal:
    """
    Verify the bearer token and return the caller.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(message=ErrorMessages.NOT_AUTHENTICATED)
    return principal_from_token(credentials.credentials)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


# ==============================================================================
# AUTHORIZATION DEPENDENCIES
# ==============================================================================

async def require_admin(principal: CurrentPrincipal) -> Principal:
    """
    Raises:
        AuthorizationError: Unless the caller holds the admin role
    """
    if not principal.is_admin:
        raise AuthorizationError(
            message=ErrorMessages.ADMIN_REQUIRED,
            required_permission=settings.ADMIN_ROLE,
        )
    return principal


def require_scope(scope: str) -> Callable[..., Principal]:
    """
    Build a dependency demanding a permission scope on the token.

    Example:
        >>> @router.get("/instructors")
        ... async def list_instructors(principal: Annotated[Principal, Depends(require_scope("read"))]):
        ...     ...
    """

    async def dependency(principal: CurrentPrincipal) -> Principal:
        if not principal.has_scope(scope):
            raise AuthorizationError(
                message=ErrorMessages.SCOPE_REQUIRED,
                required_permission=scope,
            )
        return principal

    return dependency


def ensure_can_act_for(principal: Principal, user_id: int) -> None:
    """
    Raises:
        AuthorizationError: If a non-admin caller targets another user's data
    """
    if not principal.can_act_for(user_id):
        raise AuthorizationError(message=ErrorMessages.NOT_OWNER)


AdminPrincipal = Annotated[Principal, Depends(require_admin)]
ReadScope = Annotated[Principal, Depends(require_scope(settings.READ_SCOPE))]
WriteScope = Annotated[Principal, Depends(require_scope(settings.WRITE_SCOPE))]


# ==============================================================================
# SERVICE DEPENDENCIES
# ==============================================================================

async def get_category_service(
    adapter: DatabaseDep,
    mapper: MapperDep,
) -> CourseCategoryService:
    return CourseCategoryService(CourseCategoryRepository(adapter), mapper)


async def get_course_service(
    adapter: DatabaseDep,
    mapper: MapperDep,
    blob_storage: BlobStorageDep,
) -> CourseService:
    return CourseService(
        CourseRepository(adapter),
        CourseCategoryRepository(adapter),
        InstructorRepository(adapter),
        mapper,
        blob_storage=blob_storage,
    )


async def get_enrollment_service(
    adapter: DatabaseDep,
    mapper: MapperDep,
) -> EnrollmentService:
    return EnrollmentService(
        EnrollmentRepository(adapter),
        CourseRepository(adapter),
        UserRepository(adapter),
        mapper,
    )


async def get_review_service(
    adapter: DatabaseDep,
    mapper: MapperDep,
) -> ReviewService:
    return ReviewService(
        ReviewRepository(adapter),
        CourseRepository(adapter),
        UserRepository(adapter),
        mapper,
    )


async def get_video_request_service(
    adapter: DatabaseDep,
    mapper: MapperDep,
) -> VideoRequestService:
    return VideoRequestService(
        VideoRequestRepository(adapter),
        UserRepository(adapter),
        mapper,
    )


async def get_user_profile_service(
    adapter: DatabaseDep,
    mapper: MapperDep,
    blob_storage: BlobStorageDep,
) -> UserProfileService:
    return UserProfileService(UserRepository(adapter), mapper, blob_storage=blob_storage)


async def get_contact_service(email: EmailDep) -> ContactService:
    return ContactService(email)


# Annotated service types
CategoryServiceDep = Annotated[CourseCategoryService, Depends(get_category_service)]
CourseServiceDep = Annotated[CourseService, Depends(get_course_service)]
EnrollmentServiceDep = Annotated[EnrollmentService, Depends(get_enrollment_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
VideoRequestServiceDep = Annotated[VideoRequestService, Depends(get_video_request_service)]
UserProfileServiceDep = Annotated[UserProfileService, Depends(get_user_profile_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
