# ==============================================================================
# AUTHENTICATION TESTS
# ==============================================================================
# Tests for bearer token handling and caller principals
# ==============================================================================

from datetime import timedelta

import pytest
from httpx import AsyncClient

from online_course.core.exceptions import InvalidTokenError, TokenExpiredError
from online_course.core.security import (
    Principal,
    create_access_token,
    principal_from_token,
)


class TestTokenHandling:
    """Tests for token decoding into principals."""

    def test_principal_from_token(self):
        token = create_access_token(
            subject=42,
            additional_claims={"roles": ["Admin"], "scp": "read write"},
        )

        principal = principal_from_token(token)

        assert principal.user_id == 42
        assert principal.is_admin
        assert principal.has_scope("read")
        assert principal.has_scope("write")

    def test_scopes_as_list(self):
        token = create_access_token(subject=1, additional_claims={"scp": ["read"]})

        principal = principal_from_token(token)

        assert principal.scopes == frozenset({"read"})
        assert not principal.is_admin

    def test_expired_token(self):
        token = create_access_token(subject=1, expires_delta=timedelta(minutes=-5))

        with pytest.raises(TokenExpiredError):
            principal_from_token(token)

    def test_non_numeric_subject(self):
        token = create_access_token(subject="not-a-number")

        with pytest.raises(InvalidTokenError):
            principal_from_token(token)

    def test_can_act_for(self):
        learner = Principal(user_id=5)
        admin = Principal(user_id=1, roles=frozenset({"Admin"}))

        assert learner.can_act_for(5)
        assert not learner.can_act_for(6)
        assert admin.can_act_for(6)


class TestBearerAuthentication:
    """Tests for bearer tokens at the HTTP boundary."""

    @pytest.mark.asyncio
    async def test_garbage_token_returns_401(self, client: AsyncClient, seed):
        response = await client.get(
            "/api/course/instructors",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_expired_token_returns_401(self, client: AsyncClient, seed):
        token = create_access_token(
            subject=seed.learner_id,
            expires_delta=timedelta(minutes=-5),
            additional_claims={"scp": "read"},
        )

        response = await client.get(
            "/api/course/instructors",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "TOKEN_EXPIRED"

    @pytest.mark.asyncio
    async def test_anonymous_catalogue_read_ignores_missing_token(
        self, client: AsyncClient, seed
    ):
        response = await client.get("/api/course")
        assert response.status_code == 200
