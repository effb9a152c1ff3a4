# ==============================================================================
# COURSE ENDPOINT TESTS
# ==============================================================================
# Tests for catalogue reads, admin maintenance and thumbnail upload
# ==============================================================================

from decimal import Decimal

import pytest
from httpx import AsyncClient


def _course_payload(category_id: int, instructor_id: int, **overrides) -> dict:
    payload = {
        "title": "Advanced Indexing",
        "description": "B-trees and friends",
        "price": "79.00",
        "course_type": "Hybrid",
        "seats_available": 12,
        "duration": "8.00",
        "category_id": category_id,
        "instructor_id": instructor_id,
        "start_date": "2025-04-01T09:00:00",
        "end_date": "2025-05-01T17:00:00",
        "session_details": [
            {"title": "Covering indexes", "video_order": 2},
            {"title": "Why indexes", "video_order": 1},
        ],
    }
    payload.update(overrides)
    return payload


class TestCourseReads:
    """Anonymous catalogue reads."""

    @pytest.mark.asyncio
    async def test_list_courses(self, client: AsyncClient, seed):
        response = await client.get("/api/course")

        assert response.status_code == 200
        data = response.json()

        assert len(data) == 1
        course = data[0]
        assert course["title"] == "Intro to SQL"
        assert course["category_name"] == "Data"
        assert course["instructor"]["last_name"] == "Codd"
        assert Decimal(course["price"]) == Decimal("49.99")
        assert course["user_rating"] == {
            "course_id": seed.course_id,
            "average_rating": 0.0,
            "total_ratings": 0,
        }

    @pytest.mark.asyncio
    async def test_list_courses_by_category(self, client: AsyncClient, seed):
        response = await client.get(f"/api/course/category/{seed.category_id}")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [seed.course_id]

    @pytest.mark.asyncio
    async def test_list_courses_by_unknown_category_is_empty(
        self, client: AsyncClient, seed
    ):
        response = await client.get("/api/course/category/999")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_course_detail(self, client: AsyncClient, seed):
        response = await client.get(f"/api/course/detail/{seed.course_id}")

        assert response.status_code == 200
        data = response.json()

        assert [s["title"] for s in data["session_details"]] == [
            "Selecting rows",
            "Joining tables",
        ]
        assert data["reviews"] == []

    @pytest.mark.asyncio
    async def test_get_course_by_id_returns_detail(self, client: AsyncClient, seed):
        response = await client.get(f"/api/course/{seed.course_id}")

        assert response.status_code == 200
        assert len(response.json()["session_details"]) == 2

    @pytest.mark.asyncio
    async def test_get_unknown_course_returns_404(self, client: AsyncClient, seed):
        response = await client.get("/api/course/detail/999")
        assert response.status_code == 404

        response = await client.get("/api/course/999")
        assert response.status_code == 404


class TestInstructors:
    """Instructor list requires the read scope."""

    @pytest.mark.asyncio
    async def test_list_instructors(self, client: AsyncClient, learner_headers):
        response = await client.get("/api/course/instructors", headers=learner_headers)

        assert response.status_code == 200
        assert [i["email"] for i in response.json()] == ["codd@example.com"]

    @pytest.mark.asyncio
    async def test_list_instructors_anonymous_returns_401(
        self, client: AsyncClient, seed
    ):
        response = await client.get("/api/course/instructors")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_list_instructors_without_read_scope_returns_403(
        self, client: AsyncClient, seed, auth_headers
    ):
        headers = auth_headers(seed.learner_id, scopes="write")

        response = await client.get("/api/course/instructors", headers=headers)
        assert response.status_code == 403


class TestCourseWrites:
    """Admin-only course maintenance."""

    @pytest.mark.asyncio
    async def test_create_course(self, client: AsyncClient, seed, admin_headers):
        response = await client.post(
            "/api/course",
            json=_course_payload(seed.category_id, seed.instructor_id),
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()

        assert data["id"] > seed.course_id
        assert data["course_type"] == "Hybrid"
        assert data["category_name"] == "Data"
        assert [s["title"] for s in data["session_details"]] == [
            "Why indexes",
            "Covering indexes",
        ]
        assert all(s["course_id"] == data["id"] for s in data["session_details"])

    @pytest.mark.asyncio
    async def test_create_course_unknown_category_returns_404(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/course",
            json=_course_payload(999, seed.instructor_id),
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_create_course_end_before_start_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/course",
            json=_course_payload(
                seed.category_id,
                seed.instructor_id,
                start_date="2025-05-01T00:00:00",
                end_date="2025-04-01T00:00:00",
            ),
            headers=admin_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_course_invalid_type_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/course",
            json=_course_payload(seed.category_id, seed.instructor_id, course_type="Radio"),
            headers=admin_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_course_as_learner_returns_403(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.post(
            "/api/course",
            json=_course_payload(seed.category_id, seed.instructor_id),
            headers=learner_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_create_course_anonymous_returns_401(self, client: AsyncClient, seed):
        response = await client.post(
            "/api/course",
            json=_course_payload(seed.category_id, seed.instructor_id),
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_update_course(self, client: AsyncClient, seed, admin_headers):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "title": "SQL Foundations", "price": "59.00"},
            headers=admin_headers,
        )

        assert response.status_code == 204

        detail = (await client.get(f"/api/course/detail/{seed.course_id}")).json()
        assert detail["title"] == "SQL Foundations"
        assert Decimal(detail["price"]) == Decimal("59.00")
        assert detail["course_type"] == "Online"
        assert len(detail["session_details"]) == 2

    @pytest.mark.asyncio
    async def test_update_course_replaces_sessions(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={
                "id": seed.course_id,
                "session_details": [{"title": "Window functions", "video_order": 1}],
            },
            headers=admin_headers,
        )

        assert response.status_code == 204

        detail = (await client.get(f"/api/course/detail/{seed.course_id}")).json()
        assert [s["title"] for s in detail["session_details"]] == ["Window functions"]

    @pytest.mark.asyncio
    async def test_update_course_id_mismatch_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id + 1, "title": "Mismatch"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    @pytest.mark.asyncio
    async def test_update_course_null_title_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "title": None},
            headers=admin_headers,
        )

        assert response.status_code == 400
        errors = response.json()["error"]["details"]["validation_errors"]
        assert any(err["field"].endswith("title") for err in errors)

        detail = (await client.get(f"/api/course/detail/{seed.course_id}")).json()
        assert detail["title"] == "Intro to SQL"

    @pytest.mark.asyncio
    async def test_update_course_null_category_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "category_id": None, "price": None},
            headers=admin_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_course_clears_nullable_fields(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "description": None, "seats_available": None},
            headers=admin_headers,
        )

        assert response.status_code == 204

        detail = (await client.get(f"/api/course/detail/{seed.course_id}")).json()
        assert detail["description"] is None
        assert detail["seats_available"] is None

    @pytest.mark.asyncio
    async def test_update_course_end_before_stored_start_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "end_date": "2024-01-01T00:00:00"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

        detail = (await client.get(f"/api/course/detail/{seed.course_id}")).json()
        assert detail["end_date"].startswith("2025-03-28")

    @pytest.mark.asyncio
    async def test_update_course_start_after_stored_end_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "start_date": "2025-06-01T00:00:00"},
            headers=admin_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_course_moves_both_dates(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            f"/api/course/{seed.course_id}",
            json={
                "id": seed.course_id,
                "start_date": "2025-06-01T00:00:00",
                "end_date": "2025-08-01T00:00:00",
            },
            headers=admin_headers,
        )

        assert response.status_code == 204

        detail = (await client.get(f"/api/course/detail/{seed.course_id}")).json()
        assert detail["start_date"].startswith("2025-06-01")
        assert detail["end_date"].startswith("2025-08-01")

    @pytest.mark.asyncio
    async def test_update_unknown_course_returns_404(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.put(
            "/api/course/999",
            json={"id": 999, "title": "Ghost"},
            headers=admin_headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_course(self, client: AsyncClient, seed, admin_headers):
        response = await client.delete(
            f"/api/course/{seed.course_id}",
            headers=admin_headers,
        )
        assert response.status_code == 204

        gone = await client.get(f"/api/course/{seed.course_id}")
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_course_returns_204(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.delete("/api/course/999", headers=admin_headers)
        assert response.status_code == 204


class TestThumbnailUpload:
    """Multipart thumbnail upload."""

    @pytest.mark.asyncio
    async def test_upload_thumbnail(
        self, client: AsyncClient, seed, admin_headers, blob_storage
    ):
        response = await client.post(
            "/api/course/upload-thumbnail",
            data={"courseId": str(seed.course_id)},
            files={"file": ("cover.png", b"\x89PNG-bytes", "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 200
        expected_name = f"{seed.course_id}_Intro_to_SQL.png"
        expected_url = f"http://blobs.test/course-preview/{expected_name}"
        assert response.json()["thumbnail_url"] == expected_url

        assert blob_storage.uploads == [
            ("course-preview", expected_name, b"\x89PNG-bytes"),
        ]

        detail = (await client.get(f"/api/course/{seed.course_id}")).json()
        assert detail["thumbnail_url"] == expected_url

    @pytest.mark.asyncio
    async def test_upload_empty_file_returns_400(
        self, client: AsyncClient, seed, admin_headers, blob_storage
    ):
        response = await client.post(
            "/api/course/upload-thumbnail",
            data={"courseId": str(seed.course_id)},
            files={"file": ("cover.png", b"", "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert blob_storage.uploads == []

    @pytest.mark.asyncio
    async def test_upload_for_unknown_course_returns_404(
        self, client: AsyncClient, seed, admin_headers, blob_storage
    ):
        response = await client.post(
            "/api/course/upload-thumbnail",
            data={"courseId": "999"},
            files={"file": ("cover.png", b"bytes", "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert blob_storage.uploads == []

    @pytest.mark.asyncio
    async def test_upload_as_learner_returns_403(
        self, client: AsyncClient, seed, learner_headers, blob_storage
    ):
        response = await client.post(
            "/api/course/upload-thumbnail",
            data={"courseId": str(seed.course_id)},
            files={"file": ("cover.png", b"bytes", "image/png")},
            headers=learner_headers,
        )

        assert response.status_code == 403
        assert blob_storage.uploads == []

    @pytest.mark.asyncio
    async def test_upload_after_retitle_with_slash_keeps_course_id(
        self, client: AsyncClient, seed, admin_headers, blob_storage
    ):
        retitled = await client.put(
            f"/api/course/{seed.course_id}",
            json={"id": seed.course_id, "title": "CI/CD Basics"},
            headers=admin_headers,
        )
        assert retitled.status_code == 204

        response = await client.post(
            "/api/course/upload-thumbnail",
            data={"courseId": str(seed.course_id)},
            files={"file": ("cover.png", b"bytes", "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 200
        expected_name = f"{seed.course_id}_CI_CD_Basics.png"
        assert blob_storage.uploads == [("course-preview", expected_name, b"bytes")]

    @pytest.mark.asyncio
    async def test_upload_file_without_extension(
        self, client: AsyncClient, seed, admin_headers, blob_storage
    ):
        response = await client.post(
            "/api/course/upload-thumbnail",
            data={"courseId": str(seed.course_id)},
            files={"file": ("cover", b"bytes", "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert blob_storage.uploads[0][1] == f"{seed.course_id}_Intro_to_SQL.cover"
