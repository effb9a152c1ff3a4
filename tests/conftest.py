# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests
# ==============================================================================

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator, Dict, Iterable, List, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["DATABASE_TYPE"] = "sqlite"
os.environ["SQLITE_URL"] = "sqlite+aiosqlite:///./test_online_course.db"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SMTP_HOST"] = ""

# Add package root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from online_course.core.exceptions import ServiceUnavailableError  # noqa: E402
from online_course.integrations.blob_storage import BlobStorageService  # noqa: E402
from online_course.integrations.email_notification import EmailNotification  # noqa: E402
from online_course.schemas.contact import ContactMessage  # noqa: E402

TEST_DB_PATH = "./test_online_course.db"


# ==============================================================================
# COLLABORATOR FAKES
# ==============================================================================

class FakeBlobStorage(BlobStorageService):
    """Records uploads instead of writing files."""

    def __init__(self) -> None:
        self.uploads: List[Tuple[str, str, bytes]] = []

    async def upload(self, content: bytes, file_name: str, container: str) -> str:
        self.uploads.append((container, file_name, content))
        return f"http://blobs.test/{container}/{file_name}"


class RecordingEmailNotification(EmailNotification):
    """Keeps sent contact messages in memory."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: List[ContactMessage] = []
        self.fail = fail

    async def send_contact_message(self, message: ContactMessage) -> None:
        if self.fail:
            raise ServiceUnavailableError(
                message="Email delivery failed",
                service_name="email",
            )
        self.sent.append(message)


def _remove_test_db() -> None:
    if os.path.exists(TEST_DB_PATH):
        try:
            os.remove(TEST_DB_PATH)
        except (PermissionError, OSError):
            pass


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest.fixture
def blob_storage() -> FakeBlobStorage:
    return FakeBlobStorage()


@pytest.fixture
def email_outbox() -> RecordingEmailNotification:
    return RecordingEmailNotification()


@pytest_asyncio.fixture
async def client(
    blob_storage: FakeBlobStorage,
    email_outbox: RecordingEmailNotification,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    # Reset factory to ensure clean state
    from online_course.database.factory import DatabaseFactory
    DatabaseFactory.reset()

    _remove_test_db()

    # Import app after environment is set
    from online_course.main import app

    await DatabaseFactory.initialize()

    original_blob_storage = app.state.blob_storage
    original_email = app.state.email_notification
    app.state.blob_storage = blob_storage
    app.state.email_notification = email_outbox

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client

    # Cleanup
    app.state.blob_storage = original_blob_storage
    app.state.email_notification = original_email

    await DatabaseFactory.shutdown()
    DatabaseFactory.reset()

    _remove_test_db()


# ==============================================================================
# AUTH HELPERS
# ==============================================================================

def make_headers(
    user_id: int,
    roles: Iterable[str] = (),
    scopes: str = "read write",
) -> Dict[str, str]:
    """Bearer header for a token shaped like the identity provider's."""
    from online_course.core.security import create_access_token

    token = create_access_token(
        subject=str(user_id),
        additional_claims={"roles": list(roles), "scp": scopes},
    )
    return {"Authorization": f"Bearer {token}"}


# ==============================================================================
# DATA FIXTURES
# ==============================================================================

@dataclass
class Seed:
    """Ids of the rows created by the ``seed`` fixture."""

    admin_id: int
    learner_id: int
    other_user_id: int
    category_id: int
    instructor_id: int
    course_id: int


@pytest_asyncio.fixture
async def seed(client: AsyncClient) -> Seed:
    """Users, a category, an instructor and a course with two sessions."""
    from online_course.core.constants import DatabaseConstants
    from online_course.database.factory import DatabaseFactory
    from online_course.domain_models import SessionDetail

    adapter = DatabaseFactory.get_adapter()

    admin = await adapter.create(
        DatabaseConstants.USERS_COLLECTION,
        {
            "display_name": "Grace Hopper",
            "first_name": "Grace",
            "last_name": "Hopper",
            "email": "grace@example.com",
        },
    )
    learner = await adapter.create(
        DatabaseConstants.USERS_COLLECTION,
        {
            "display_name": "Ada Lovelace",
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
        },
    )
    other = await adapter.create(
        DatabaseConstants.USERS_COLLECTION,
        {
            "display_name": "Alan Turing",
            "first_name": "Alan",
            "last_name": "Turing",
            "email": "alan@example.com",
        },
    )
    category = await adapter.create(
        DatabaseConstants.COURSE_CATEGORIES_COLLECTION,
        {"name": "Data", "description": "Databases and analytics"},
    )
    instructor = await adapter.create(
        DatabaseConstants.INSTRUCTORS_COLLECTION,
        {
            "first_name": "Edgar",
            "last_name": "Codd",
            "email": "codd@example.com",
            "bio": "Relational model",
        },
    )
    course = await adapter.create(
        DatabaseConstants.COURSES_COLLECTION,
        {
            "title": "Intro to SQL",
            "description": "Queries from scratch",
            "price": Decimal("49.99"),
            "course_type": "Online",
            "seats_available": 30,
            "duration": Decimal("12.50"),
            "category_id": category.id,
            "instructor_id": instructor.id,
            "start_date": datetime(2025, 1, 6),
            "end_date": datetime(2025, 3, 28),
            "session_details": [
                SessionDetail(title="Selecting rows", video_order=1),
                SessionDetail(title="Joining tables", video_order=2),
            ],
        },
    )

    return Seed(
        admin_id=admin.id,
        learner_id=learner.id,
        other_user_id=other.id,
        category_id=category.id,
        instructor_id=instructor.id,
        course_id=course.id,
    )


@pytest.fixture
def auth_headers():
    """Factory fixture: ``auth_headers(user_id, roles=..., scopes=...)``."""
    return make_headers


@pytest.fixture
def admin_headers(seed: Seed) -> Dict[str, str]:
    return make_headers(seed.admin_id, roles=["Admin"])


@pytest.fixture
def learner_headers(seed: Seed) -> Dict[str, str]:
    return make_headers(seed.learner_id)


@pytest.fixture
def other_headers(seed: Seed) -> Dict[str, str]:
    return make_headers(seed.other_user_id)
