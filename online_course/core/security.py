# ==============================================================================
# SECURITY MODULE - Identity Provider Token Verification
# ==============================================================================
# Bearer tokens are issued by the external identity provider; this module
# verifies them and extracts the caller's id, roles and scopes.
# ==============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

from jose import JWTError, jwt

from online_course.core.settings import settings
from online_course.core.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
)


# ==============================================================================
# PRINCIPAL
# ==============================================================================

@dataclass(frozen=True)
class Principal:
    """
    Authenticated caller.

    Attributes:
        user_id: Internal user id carried in the ``sub`` claim
        roles: Role names granted by the identity provider
        scopes: Permission scopes granted to the access token
    """

    user_id: int
    roles: FrozenSet[str] = field(default_factory=frozenset)
    scopes: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_admin(self) -> bool:
        return settings.ADMIN_ROLE in self.roles

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes

    def can_act_for(self, user_id: int) -> bool:
        """Admins act for anyone; other callers only for themselves."""
        return self.is_admin or self.user_id == user_id


def _as_set(value: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        return frozenset(value.split())
    return frozenset(str(v) for v in value)


# ==============================================================================
# TOKEN HANDLING
# ==============================================================================

def create_access_token(
    subject: Union[str, int],
    expires_delta: Optional[timedelta] = None,
    additional_claims: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Mint an access token the way the identity provider does.

    Used by local tooling and the test-suite; production tokens come from
    the provider.

    Args:
        subject: Internal user id
        expires_delta: Custom lifetime (default from settings)
        additional_claims: Extra claims such as roles and scopes

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta
        or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )

    to_encode: Dict[str, Any] = {
        "sub": str(subject),
        "exp": expire,
        "iat": now,
    }
    if settings.TOKEN_AUDIENCE:
        to_encode["aud"] = settings.TOKEN_AUDIENCE
    if settings.TOKEN_ISSUER:
        to_encode["iss"] = settings.TOKEN_ISSUER
    if additional_claims:
        to_encode.update(additional_claims)

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a bearer token.

    Verifies signature, expiry and, when configured, audience and issuer.

    Raises:
        TokenExpiredError: If token has expired
        InvalidTokenError: If token is invalid or malformed
    """
    options = {"verify_aud": settings.TOKEN_AUDIENCE is not None}
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.TOKEN_AUDIENCE,
            issuer=settings.TOKEN_ISSUER,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError as e:
        raise InvalidTokenError(message=f"Invalid token: {str(e)}")


def principal_from_token(token: str) -> Principal:
    """
    Build the caller principal from a bearer token.

    Raises:
        TokenExpiredError: If token has expired
        InvalidTokenError: If token is invalid or has no usable subject
    """
    payload = decode_token(token)

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise InvalidTokenError(message="Invalid token payload: subject is not a user id")

    return Principal(
        user_id=user_id,
        roles=_as_set(payload.get(settings.ROLES_CLAIM)),
        scopes=_as_set(payload.get(settings.SCOPES_CLAIM)),
    )
