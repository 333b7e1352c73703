"""Tests for bearer-token authentication and role checks.

Run with: pytest tests/test_auth.py -v
"""

import time

import pytest
from django.conf import settings
from jose import jwt
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIClient

from common.authentication import decode_token
from tests.conftest import make_token

HISTORY_URL = "/api/transactions"


def bearer(token: str) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


class TestDecodeToken:
    def test_valid_token(self):
        principal = decode_token(make_token(uid="u-7", role="organizer", email="o@example.com"))
        assert principal.uid == "u-7"
        assert principal.role == "organizer"
        assert principal.email == "o@example.com"
        assert principal.is_authenticated

    def test_role_defaults_to_user(self):
        token = jwt.encode({"sub": "u-1"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        assert decode_token(token).role == "user"

    def test_wrong_secret(self):
        token = jwt.encode({"sub": "u-1"}, "not-the-secret", algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(AuthenticationFailed):
            decode_token(token)

    def test_expired(self):
        token = jwt.encode(
            {"sub": "u-1", "exp": int(time.time()) - 60},
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
        )
        with pytest.raises(AuthenticationFailed):
            decode_token(token)

    def test_missing_subject(self):
        token = jwt.encode({"role": "user"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(AuthenticationFailed):
            decode_token(token)

    def test_unknown_role(self):
        with pytest.raises(AuthenticationFailed):
            decode_token(make_token(role="superuser"))


@pytest.mark.django_db
class TestBearerAuthentication:
    def test_garbage_token_is_401(self):
        response = bearer("not.a.jwt").get(HISTORY_URL)
        assert response.status_code == 401
        assert response["WWW-Authenticate"] == "Bearer"

    def test_header_with_extra_parts_is_401(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {make_token()} extra")
        assert client.get(HISTORY_URL).status_code == 401

    def test_other_schemes_are_anonymous(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION="Basic dXNlcjpwYXNz")
        assert client.get(HISTORY_URL).status_code == 401

    def test_valid_token_reaches_view(self):
        response = bearer(make_token(uid="u-1")).get(HISTORY_URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_public_reads_ignore_missing_token(self, api_client, make_ticket_type):
        ticket = make_ticket_type()
        assert api_client.get(f"/api/tickets/{ticket.id}").status_code == 200
