# ==============================================================================
# USER PROFILE ENDPOINT TESTS
# ==============================================================================
# Tests for profiles, picture/bio updates and the admin user list
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestUserProfileReads:
    """Tests for GET /userprofile/{id}."""

    @pytest.mark.asyncio
    async def test_get_own_profile(self, client: AsyncClient, seed, learner_headers):
        response = await client.get(
            f"/api/userprofile/{seed.learner_id}",
            headers=learner_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "ada@example.com"
        assert data["profile_picture_url"] is None

    @pytest.mark.asyncio
    async def test_get_other_profile_returns_403(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.get(
            f"/api/userprofile/{seed.other_user_id}",
            headers=learner_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_gets_unknown_profile_returns_404(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.get("/api/userprofile/999", headers=admin_headers)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_get_profile_anonymous_returns_401(self, client: AsyncClient, seed):
        response = await client.get(f"/api/userprofile/{seed.learner_id}")
        assert response.status_code == 401


class TestUserProfileWrites:
    """Registering, editing and removing profiles."""

    @pytest.mark.asyncio
    async def test_admin_registers_profile(self, client: AsyncClient, seed, admin_headers):
        response = await client.post(
            "/api/userprofile",
            json={
                "display_name": "Barbara Liskov",
                "first_name": "Barbara",
                "last_name": "Liskov",
                "email": "barbara@example.com",
                "adobject_id": "b3f1c2d4",
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["adobject_id"] == "b3f1c2d4"

    @pytest.mark.asyncio
    async def test_register_duplicate_email_returns_409(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/userprofile",
            json={
                "display_name": "Ada Again",
                "first_name": "Ada",
                "last_name": "Again",
                "email": "ada@example.com",
            },
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_register_invalid_email_returns_400(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/userprofile",
            json={
                "display_name": "Nobody",
                "first_name": "No",
                "last_name": "Body",
                "email": "not-an-email",
            },
            headers=admin_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_learner_cannot_register_profiles(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.post(
            "/api/userprofile",
            json={
                "display_name": "Sneaky",
                "first_name": "Sne",
                "last_name": "Aky",
                "email": "sneaky@example.com",
            },
            headers=learner_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_update_own_profile(self, client: AsyncClient, seed, learner_headers):
        response = await client.put(
            f"/api/userprofile/{seed.learner_id}",
            json={"id": seed.learner_id, "display_name": "Countess Lovelace"},
            headers=learner_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == "Countess Lovelace"
        assert data["first_name"] == "Ada"

    @pytest.mark.asyncio
    async def test_update_profile_to_taken_email_returns_409(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.put(
            f"/api/userprofile/{seed.learner_id}",
            json={"id": seed.learner_id, "email": "alan@example.com"},
            headers=learner_headers,
        )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_profile_null_email_returns_400(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.put(
            f"/api/userprofile/{seed.learner_id}",
            json={"id": seed.learner_id, "email": None},
            headers=learner_headers,
        )

        assert response.status_code == 400

        profile = (
            await client.get(f"/api/userprofile/{seed.learner_id}", headers=learner_headers)
        ).json()
        assert profile["email"] == "ada@example.com"

    @pytest.mark.asyncio
    async def test_update_profile_id_mismatch_returns_400(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.put(
            f"/api/userprofile/{seed.learner_id}",
            json={"id": seed.other_user_id, "bio": "Mismatch"},
            headers=learner_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_admin_deletes_profile(self, client: AsyncClient, seed, admin_headers):
        response = await client.delete(
            f"/api/userprofile/{seed.other_user_id}",
            headers=admin_headers,
        )
        assert response.status_code == 204

        gone = await client.get(f"/api/userprofile/{seed.other_user_id}", headers=admin_headers)
        assert gone.status_code == 404

    @pytest.mark.asyncio
    async def test_learner_cannot_delete_profiles(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.delete(
            f"/api/userprofile/{seed.learner_id}",
            headers=learner_headers,
        )

        assert response.status_code == 403


class TestUpdateProfilePictureAndBio:
    """Tests for the multipart POST /userprofile/updateProfile."""

    @pytest.mark.asyncio
    async def test_upload_picture_and_bio(
        self, client: AsyncClient, seed, learner_headers, blob_storage
    ):
        response = await client.post(
            "/api/userprofile/updateProfile",
            data={"userId": str(seed.learner_id), "bio": "Analytical engines"},
            files={"picture": ("me.jpeg", b"jpeg-bytes", "image/jpeg")},
            headers=learner_headers,
        )

        assert response.status_code == 200
        expected_name = f"{seed.learner_id}_profile_picture.jpeg"
        expected_url = f"http://blobs.test/profile-pictures/{expected_name}"
        data = response.json()
        assert data["profile_picture_url"] == expected_url
        assert data["bio"] == "Analytical engines"
        assert blob_storage.uploads == [("profile-pictures", expected_name, b"jpeg-bytes")]

        profile = (
            await client.get(f"/api/userprofile/{seed.learner_id}", headers=learner_headers)
        ).json()
        assert profile["profile_picture_url"] == expected_url
        assert profile["bio"] == "Analytical engines"

    @pytest.mark.asyncio
    async def test_bio_only(self, client: AsyncClient, seed, learner_headers, blob_storage):
        response = await client.post(
            "/api/userprofile/updateProfile",
            data={"userId": str(seed.learner_id), "bio": "Poetical science"},
            headers=learner_headers,
        )

        assert response.status_code == 200
        assert response.json()["profile_picture_url"] is None
        assert blob_storage.uploads == []

    @pytest.mark.asyncio
    async def test_empty_picture_returns_400(
        self, client: AsyncClient, seed, learner_headers, blob_storage
    ):
        response = await client.post(
            "/api/userprofile/updateProfile",
            data={"userId": str(seed.learner_id)},
            files={"picture": ("me.png", b"", "image/png")},
            headers=learner_headers,
        )

        assert response.status_code == 400
        assert blob_storage.uploads == []

    @pytest.mark.asyncio
    async def test_other_user_returns_403(
        self, client: AsyncClient, seed, learner_headers, blob_storage
    ):
        response = await client.post(
            "/api/userprofile/updateProfile",
            data={"userId": str(seed.other_user_id), "bio": "Hijack"},
            headers=learner_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_unknown_user_returns_404(
        self, client: AsyncClient, seed, admin_headers
    ):
        response = await client.post(
            "/api/userprofile/updateProfile",
            data={"userId": "999", "bio": "Ghost"},
            headers=admin_headers,
        )

        assert response.status_code == 404


class TestUserAdmin:
    """Tests for GET /useradmin."""

    @pytest.mark.asyncio
    async def test_admin_lists_users(self, client: AsyncClient, seed, admin_headers):
        response = await client.get("/api/useradmin", headers=admin_headers)

        assert response.status_code == 200
        assert {u["email"] for u in response.json()} == {
            "grace@example.com",
            "ada@example.com",
            "alan@example.com",
        }

    @pytest.mark.asyncio
    async def test_learner_cannot_list_users(
        self, client: AsyncClient, seed, learner_headers
    ):
        response = await client.get("/api/useradmin", headers=learner_headers)
        assert response.status_code == 403
