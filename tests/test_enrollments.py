# ==============================================================================
# ENROLLMENT ENDPOINT TESTS
# ==============================================================================
# Tests for enrolling, duplicate protection and enrollment reads
# ==============================================================================

from decimal import Decimal

import pytest
from httpx import AsyncClient

from online_course.core.constants import DatabaseConstants
from online_course.core.exceptions import IntegrityViolationError
from online_course.database.factory import DatabaseFactory
from online_course.database.repositories.enrollment_repository import EnrollmentRepository


class TestEnroll:
    """Tests for POST /enrollment."""

    @pytest.mark.asyncio
    async def test_enroll(self, client: AsyncClient, seed, learner_headers):
        response = await client.post(
            "/api/enrollment",
            json={"user_id": seed.learner_id, "course_id": seed.course_id},
            headers=learner_headers,
        )

        assert response.status_code == 200
        data = response.json()

        assert data["user_id"] == seed.learner_id
        assert data["course_id"] == seed.course_id
        assert data["course_title"] == "Intro to SQL"
        assert data["payment_status"] == "Pending"
        assert data["current_payment"] is None

    @pytest.mark.asyncio
    async def test_enroll_with_payment(self, client: AsyncClient, seed, learner_headers):
        response = await client.post(
            "/api/enrollment",
            json={
                "user_id": seed.learner_id,
                "course_id": seed.course_id,
                "payment_status": "Completed",
                "payment": {
                    "amount": "49.99",
                    "payment_method": "card",
                    "payment_status": "Completed",
                },
            },
            headers=learner_headers,
        )

        assert response.status_code == 200
        payment = response.json()["current_payment"]

        assert Decimal(payment["amount"]) == Decimal("49.99")
        assert payment["payment_method"] == "card"
        assert payment["payment_status"] == "Completed"
        assert payment["payment_date"] is not None

    @pytest.mark.asyncio
    async def test_duplicate_enrollment_returns_400(
        self, client: AsyncClient, seed, learner_headers
    ):
        body = {"user_id": seed.learner_id, "course_id": seed.course_id}

        first = await client.post("/api/enrollment", json=body, headers=learner_headers)
        second = await client.post("/api/enrollment", json=body, headers=learner_headers)

        assert first.status_code == 200
        assert second.status_code == 400
        assert second.json()["error"]["code"] == "DUPLICATE_ENROLLMENT"

        listed = await client.get(
            f"/api/enrollment/user/{seed.learner_id}",
            headers=learner_headers,
        )
        assert len(listed.json()) == 1

    @pytest.mark.asyncio
    async def test_duplicate_after_missed_precheck_returns_400(
        self, client: AsyncClient, seed, learner_headers, monkeypatch
    ):
        """A concurrent insert that slips past the lookup still ends as a 400."""
        body = {"user_id": seed.learner_id, "course_id": seed.course_id}
        first = await client.post("/api/enrollment", json=body, headers=learner_headers)
        assert first.status_code == 200

        original = EnrollmentRepository.find_by_user_and_course
        calls = {"count": 0}

        async def miss_first_lookup(self, user_id, course_id):
            calls["count"] += 1
            if calls["count"] == 1:
                return None
            return await original(self, user_id, course_id)

        monkeypatch.setattr(
            EnrollmentRepository,
            "find_by_user_and_course",
            miss_first_lookup,
        )

        second = await client.post("/api/enrollment", json=body, headers=learner_headers)

        assert second.status_code == 400
        assert second.json()["error"]["code"] == "DUPLICATE_ENROLLMENT"
        assert calls["count"] == 2

        adapter = DatabaseFactory.get_adapter()
        count = await adapter.count(
            DatabaseConstants.ENROLLMENTS_COLLECTION,
            {"user_id": seed.learner_id, "course_id": seed.course_id},
        )
        assert count == 1

    @pytest.mark.asyncio
    async def test_enroll_unknown_course_returns_404(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.post(
            "/api/enrollment",
            json={"user_id": seed.learner_id, "course_id": 999},
            headers=learner_headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_enroll_for_someone_else_returns_403(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.post(
            "/api/enrollment",
            json={"user_id": seed.other_user_id, "course_id": seed.course_id},
            headers=learner_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_can_enroll_another_user(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/enrollment",
            json={"user_id": seed.other_user_id, "course_id": seed.course_id},
            headers=admin_headers,
        )

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_enroll_requires_write_scope(
        self, client: AsyncClient, seed, auth_headers
    ):
        response = await client.post(
            "/api/enrollment",
            json={"user_id": seed.learner_id, "course_id": seed.course_id},
            headers=auth_headers(seed.learner_id, scopes="read"),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_enroll_invalid_payment_status_returns_400(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.post(
            "/api/enrollment",
            json={
                "user_id": seed.learner_id,
                "course_id": seed.course_id,
                "payment_status": "Refunded",
            },
            headers=learner_headers,
        )

        assert response.status_code == 400


class TestEnrollmentReads:
    """Tests for enrollment reads."""

    @pytest.mark.asyncio
    async def test_get_enrollment(self, client: AsyncClient, seed, learner_headers):
        created = await client.post(
            "/api/enrollment",
            json={"user_id": seed.learner_id, "course_id": seed.course_id},
            headers=learner_headers,
        )
        enrollment_id = created.json()["id"]

        response = await client.get(
            f"/api/enrollment/{enrollment_id}",
            headers=learner_headers,
        )

        assert response.status_code == 200
        assert response.json()["id"] == enrollment_id

    @pytest.mark.asyncio
    async def test_get_someone_elses_enrollment_returns_403(
        self, client: AsyncClient, seed, learner_headers, other_headers
    ):
        created = await client.post(
            "/api/enrollment",
            json={"user_id": seed.learner_id, "course_id": seed.course_id},
            headers=learner_headers,
        )

        response = await client.get(
            f"/api/enrollment/{created.json()['id']}",
            headers=other_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_get_unknown_enrollment_returns_404(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.get("/api/enrollment/999", headers=learner_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_list_user_enrollments_of_other_user_returns_403(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.get(
            f"/api/enrollment/user/{seed.other_user_id}",
            headers=learner_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_list_user_enrollments_anonymous_returns_401(
        self, client: AsyncClient, seed
    ):
        response = await client.get(f"/api/enrollment/user/{seed.learner_id}")
        assert response.status_code == 401


class TestEnrollmentConstraint:
    """The (user, course) pair is unique at the storage level."""

    @pytest.mark.asyncio
    async def test_second_insert_violates_unique_constraint(self, client: AsyncClient, seed):
        adapter = DatabaseFactory.get_adapter()
        data = {"user_id": seed.learner_id, "course_id": seed.course_id}

        await adapter.create(DatabaseConstants.ENROLLMENTS_COLLECTION, dict(data))

        with pytest.raises(IntegrityViolationError):
            await adapter.create(DatabaseConstants.ENROLLMENTS_COLLECTION, dict(data))
