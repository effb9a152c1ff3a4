# ==============================================================================
# MAPPING PROFILE - Entity <-> Transport Model Conversion
# ==============================================================================
# Pure conversion functions between SQLAlchemy entities and pydantic models
# registered once into an immutable profile
# ==============================================================================

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type

from online_course.domain_models import (
    Course,
    CourseCategory,
    Enrollment,
    Instructor,
    Payment,
    Review,
    SessionDetail,
    User,
    VideoRequest,
)
from online_course.schemas import (
    CourseCategoryCreate,
    CourseCategoryResponse,
    CourseCategoryUpdate,
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
    EnrollmentCreate,
    EnrollmentResponse,
    InstructorResponse,
    PaymentResponse,
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
    SessionDetailCreate,
    SessionDetailResponse,
    UserProfileCreate,
    UserProfileResponse,
    UserProfileUpdate,
    UserRatingResponse,
    VideoRequestCreate,
    VideoRequestResponse,
    VideoRequestUpdate,
)

Converter = Callable[[Any, "MappingProfile"], Any]
MappingKey = Tuple[type, type]


# ==============================================================================
# CUSTOM FIELD RESOLVERS
# ==============================================================================

def display_name(first_name: str, last_name: str, last_first: bool) -> str:
    """
    Build a user's display name.

    Args:
        first_name: Given name
        last_name: Family name
        last_first: ``True`` for "Last, First", ``False`` for "First, Last"

    Returns:
        Formatted name
    """
    if last_first:
        return f"{last_name}, {first_name}"
    return f"{first_name}, {last_name}"


def current_payment(payments: Iterable[Payment]) -> Optional[Payment]:
    """Return the payment with the latest ``payment_date``, or ``None``."""
    payments = list(payments)
    if not payments:
        return None
    return max(payments, key=lambda payment: payment.payment_date)


def user_rating(course_id: int, reviews: Sequence[Review]) -> UserRatingResponse:
    """Average rating and number of ratings of a course."""
    total = len(reviews)
    average = sum(review.rating for review in reviews) / total if total else 0.0
    return UserRatingResponse(
        course_id=course_id,
        average_rating=round(average, 2),
        total_ratings=total,
    )


# ==============================================================================
# ENTITY -> MODEL
# ==============================================================================

def _category_to_response(entity: CourseCategory, profile: "MappingProfile") -> CourseCategoryResponse:
    return CourseCategoryResponse(
        id=entity.id,
        name=entity.name,
        description=entity.description,
    )


def _instructor_to_response(entity: Instructor, profile: "MappingProfile") -> InstructorResponse:
    return InstructorResponse.model_validate(entity)


def _session_to_response(entity: SessionDetail, profile: "MappingProfile") -> SessionDetailResponse:
    return SessionDetailResponse.model_validate(entity)


def _course_fields(entity: Course, profile: "MappingProfile") -> Dict[str, Any]:
    return {
        "id": entity.id,
        "title": entity.title,
        "description": entity.description,
        "price": entity.price,
        "course_type": entity.course_type,
        "seats_available": entity.seats_available,
        "duration": entity.duration,
        "category_id": entity.category_id,
        "category_name": entity.category.name if entity.category else None,
        "instructor_id": entity.instructor_id,
        "instructor": (
            profile.map(entity.instructor, InstructorResponse)
            if entity.instructor
            else None
        ),
        "start_date": entity.start_date,
        "end_date": entity.end_date,
        "thumbnail_url": entity.thumbnail_url,
        "user_rating": user_rating(entity.id, entity.reviews),
    }


def _course_to_response(entity: Course, profile: "MappingProfile") -> CourseResponse:
    return CourseResponse(**_course_fields(entity, profile))


def _course_to_detail(entity: Course, profile: "MappingProfile") -> CourseDetailResponse:
    return CourseDetailResponse(
        **_course_fields(entity, profile),
        session_details=profile.map_many(entity.session_details, SessionDetailResponse),
        reviews=profile.map_many(entity.reviews, ReviewResponse),
    )


def _payment_to_response(entity: Payment, profile: "MappingProfile") -> PaymentResponse:
    return PaymentResponse.model_validate(entity)


def _enrollment_to_response(entity: Enrollment, profile: "MappingProfile") -> EnrollmentResponse:
    payment = current_payment(entity.payments)
    return EnrollmentResponse(
        id=entity.id,
        user_id=entity.user_id,
        course_id=entity.course_id,
        course_title=entity.course.title if entity.course else None,
        enrollment_date=entity.enrollment_date,
        payment_status=entity.payment_status,
        current_payment=profile.map(payment, PaymentResponse) if payment else None,
    )


def _review_to_response(entity: Review, profile: "MappingProfile") -> ReviewResponse:
    return ReviewResponse(
        id=entity.id,
        course_id=entity.course_id,
        user_id=entity.user_id,
        user_name=display_name(entity.user.first_name, entity.user.last_name, last_first=True),
        rating=entity.rating,
        comments=entity.comments,
        review_date=entity.review_date,
    )


def _video_request_to_response(entity: VideoRequest, profile: "MappingProfile") -> VideoRequestResponse:
    return VideoRequestResponse(
        id=entity.id,
        user_id=entity.user_id,
        user_name=display_name(entity.user.first_name, entity.user.last_name, last_first=False),
        topic=entity.topic,
        sub_topic=entity.sub_topic,
        short_title=entity.short_title,
        request_description=entity.request_description,
        response=entity.response,
        video_urls=entity.video_urls,
        status=entity.status,
    )


def _user_to_response(entity: User, profile: "MappingProfile") -> UserProfileResponse:
    return UserProfileResponse.model_validate(entity)


# ==============================================================================
# MODEL -> ENTITY DATA
# ==============================================================================
# Write models map to the column data handed to the persistence adapter.
# Owned children (sessions, payments) are built as entities so they are
# inserted in the same transaction as their parent.

def _session_entities(sessions: Sequence[SessionDetailCreate]) -> List[SessionDetail]:
    return [SessionDetail(**session.model_dump()) for session in sessions]


def _category_create_data(model: CourseCategoryCreate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump()


def _category_update_data(model: CourseCategoryUpdate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump(exclude_unset=True)


def _course_create_data(model: CourseCreate, profile: "MappingProfile") -> Dict[str, Any]:
    data = model.model_dump(exclude={"session_details"})
    data["session_details"] = _session_entities(model.session_details)
    return data


def _course_update_data(model: CourseUpdate, profile: "MappingProfile") -> Dict[str, Any]:
    data = model.model_dump(exclude_unset=True, exclude={"id", "session_details"})
    if model.session_details is not None:
        data["session_details"] = _session_entities(model.session_details)
    return data


def _enrollment_create_data(model: EnrollmentCreate, profile: "MappingProfile") -> Dict[str, Any]:
    data = model.model_dump(exclude={"payment"})
    payments: List[Payment] = []
    if model.payment is not None:
        payment_data = model.payment.model_dump(exclude_none=True)
        payments.append(Payment(**payment_data))
    data["payments"] = payments
    return data


def _review_create_data(model: ReviewCreate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump()


def _review_update_data(model: ReviewUpdate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump(exclude_unset=True, exclude={"id"})


def _video_request_create_data(model: VideoRequestCreate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump()


def _video_request_update_data(model: VideoRequestUpdate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump(exclude_unset=True, exclude={"id"})


def _user_create_data(model: UserProfileCreate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump()


def _user_update_data(model: UserProfileUpdate, profile: "MappingProfile") -> Dict[str, Any]:
    return model.model_dump(exclude_unset=True, exclude={"id"})


# ==============================================================================
# PROFILE
# ==============================================================================

class MappingProfile:
    """
    Immutable registry of conversions keyed by (source type, target type).

    Built once at application start by :func:`build_mapping_profile` and
    shared read-only afterwards.

    Example:
        >>> profile = build_mapping_profile()
        >>> response = profile.map(course, CourseResponse)
        >>> data = profile.map(CourseCreate(...), dict)
    """

    __slots__ = ("_converters",)

    def __init__(self, converters: Mapping[MappingKey, Converter]) -> None:
        self._converters: Mapping[MappingKey, Converter] = MappingProxyType(dict(converters))

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_converters"):
            raise AttributeError("MappingProfile is immutable")
        object.__setattr__(self, name, value)

    def supports(self, source_type: type, target_type: type) -> bool:
        return (source_type, target_type) in self._converters

    def map(self, source: Any, target_type: Type[Any]) -> Any:
        """
        Convert ``source`` into ``target_type``.

        Raises:
            KeyError: If no conversion is registered for the pair
        """
        key = (type(source), target_type)
        try:
            converter = self._converters[key]
        except KeyError:
            raise KeyError(
                f"No mapping registered from {key[0].__name__} to {target_type.__name__}"
            ) from None
        return converter(source, self)

    def map_many(self, sources: Iterable[Any], target_type: Type[Any]) -> List[Any]:
        return [self.map(source, target_type) for source in sources]


def build_mapping_profile() -> MappingProfile:
    """Register every entity/model conversion used by the API."""
    converters: Dict[MappingKey, Converter] = {
        # entity -> model
        (CourseCategory, CourseCategoryResponse): _category_to_response,
        (Instructor, InstructorResponse): _instructor_to_response,
        (SessionDetail, SessionDetailResponse): _session_to_response,
        (Course, CourseResponse): _course_to_response,
        (Course, CourseDetailResponse): _course_to_detail,
        (Payment, PaymentResponse): _payment_to_response,
        (Enrollment, EnrollmentResponse): _enrollment_to_response,
        (Review, ReviewResponse): _review_to_response,
        (VideoRequest, VideoRequestResponse): _video_request_to_response,
        (User, UserProfileResponse): _user_to_response,
        # model -> entity data
        (CourseCategoryCreate, dict): _category_create_data,
        (CourseCategoryUpdate, dict): _category_update_data,
        (CourseCreate, dict): _course_create_data,
        (CourseUpdate, dict): _course_update_data,
        (EnrollmentCreate, dict): _enrollment_create_data,
        (ReviewCreate, dict): _review_create_data,
        (ReviewUpdate, dict): _review_update_data,
        (VideoRequestCreate, dict): _video_request_create_data,
        (VideoRequestUpdate, dict): _video_request_update_data,
        (UserProfileCreate, dict): _user_create_data,
        (UserProfileUpdate, dict): _user_update_data,
    }
    return MappingProfile(converters)
