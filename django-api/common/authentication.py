"""Bearer-token authentication.

Tokens are issued by an external identity provider; this module only
verifies them and exposes the caller as a :class:`Principal`.
"""

import logging
from dataclasses import dataclass

from django.conf import settings
from django.utils.translation import gettext_lazy as _
from jose import JWTError, jwt
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

KEYWORD = "Bearer"
ROLES = frozenset({"user", "organizer", "admin", "ticket_checker"})


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""

    uid: str
    email: str | None
    role: str

    is_authenticated = True

    @property
    def is_anonymous(self) -> bool:
        return False


def decode_token(token: str) -> Principal:
    """Verify a bearer token and return its principal.

    Raises:
        AuthenticationFailed: If the signature, expiry or claims are invalid.
    """
    try:
        claims = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_aud": False},
        )
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise AuthenticationFailed(_("Invalid or expired token.")) from exc

    uid = claims.get("sub")
    if not uid:
        raise AuthenticationFailed(_("Token has no subject."))

    role = claims.get("role", "user")
    if role not in ROLES:
        raise AuthenticationFailed(_("Token carries an unknown role."))

    return Principal(uid=str(uid), email=claims.get("email"), role=role)


class BearerTokenAuthentication(BaseAuthentication):
    """DRF authentication backed by ``Authorization: Bearer <jwt>``."""

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != KEYWORD.lower().encode():
            return None

        if len(auth) != 2:
            raise AuthenticationFailed(_("Malformed authorization header."))

        try:
            token = auth[1].decode()
        except UnicodeError as exc:
            raise AuthenticationFailed(_("Malformed authorization header.")) from exc

        return decode_token(token), token

    def authenticate_header(self, request) -> str:
        return KEYWORD
