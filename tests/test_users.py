"""Tests for POST /api/users with the repository patched out."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from core import errors
from users import service


def _user_row(email: str) -> dict:
    now = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return {
        "id": uuid.UUID("5f0c8f3e-8d3b-4a2e-9a57-1d2b3c4d5e6f"),
        "created_at": now,
        "updated_at": now,
        "email": email,
    }


class TestCreateUserEndpoint:
    def test_scenario_creates_user(self, client: TestClient) -> None:
        create = AsyncMock(return_value=_user_row("a@b.com"))
        with patch("users.repository.create_user", create):
            response = client.post("/api/users", json={"email": "a@b.com"})

        assert response.status_code == 201
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert data["email"] == "a@b.com"
        assert data["id"] == "5f0c8f3e-8d3b-4a2e-9a57-1d2b3c4d5e6f"
        assert set(data) == {"id", "created_at", "updated_at", "email"}
        create.assert_awaited_once_with(email="a@b.com")

    def test_email_is_forwarded_unvalidated(self, client: TestClient) -> None:
        create = AsyncMock(return_value=_user_row("not-an-email"))
        with patch("users.repository.create_user", create):
            response = client.post("/api/users", json={"email": "not-an-email"})

        assert response.status_code == 201
        create.assert_awaited_once_with(email="not-an-email")

    def test_malformed_json(self, client: TestClient) -> None:
        create = AsyncMock()
        with patch("users.repository.create_user", create):
            response = client.post("/api/users", content=b"{email:")

        assert response.status_code == 500
        assert response.json() == {"cleaned_body": "", "error": "Invalid JSON"}
        create.assert_not_awaited()

    def test_repository_failure_is_hidden_from_client(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        failure = ConnectionRefusedError("connection refused: db:5432")
        create = AsyncMock(side_effect=failure)
        with caplog.at_level(logging.ERROR, logger="users.service"):
            with patch("users.repository.create_user", create):
                response = client.post("/api/users", json={"email": "a@b.com"})

        assert response.status_code == 500
        assert response.json() == {"cleaned_body": "", "error": "Error creating user"}
        assert "refused" not in response.text
        assert any("user_create_failed" in r.getMessage() for r in caplog.records)

    def test_pool_not_initialized_is_persistence_error(self, client: TestClient) -> None:
        # No lifespan in tests, so the real repository hits an uninitialized pool.
        response = client.post("/api/users", json={"email": "a@b.com"})
        assert response.status_code == 500
        assert response.json()["error"] == "Error creating user"


class TestCreateUserService:
    @pytest.mark.asyncio
    async def test_bad_row_is_serialization_error(self) -> None:
        with patch("users.repository.create_user", AsyncMock(return_value={"email": "a@b.com"})):
            with pytest.raises(errors.SerializationError):
                await service.create_user(b'{"email": "a@b.com"}')

    @pytest.mark.asyncio
    async def test_missing_email_decodes_as_empty(self) -> None:
        create = AsyncMock(return_value=_user_row(""))
        with patch("users.repository.create_user", create):
            user = await service.create_user(b"{}")

        assert user.email == ""
        create.assert_awaited_once_with(email="")


class TestCreateUserDecoding:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw",
        [
            b'{"Email": "a@b.com"}',
            b'{"EMAIL": "a@b.com"}',
            b'{"email": "a@b.com"} trailing',
            b'{"email": "a@b.com"}{"email": "x@y.com"}',
        ],
    )
    async def test_decodes_like_existing_clients(self, raw: bytes) -> None:
        create = AsyncMock(return_value=_user_row("a@b.com"))
        with patch("users.repository.create_user", create):
            await service.create_user(raw)

        create.assert_awaited_once_with(email="a@b.com")

    @pytest.mark.asyncio
    async def test_top_level_null_creates_with_empty_email(self) -> None:
        create = AsyncMock(return_value=_user_row(""))
        with patch("users.repository.create_user", create):
            await service.create_user(b"null")

        create.assert_awaited_once_with(email="")

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_replaced(self) -> None:
        create = AsyncMock(return_value=_user_row("a�@b.com"))
        with patch("users.repository.create_user", create):
            await service.create_user(b'{"email": "a\xff@b.com"}')

        create.assert_awaited_once_with(email="a�@b.com")

    @pytest.mark.asyncio
    async def test_non_string_email_is_decode_error(self) -> None:
        create = AsyncMock()
        with patch("users.repository.create_user", create):
            with pytest.raises(errors.DecodeError):
                await service.create_user(b'{"email": 5}')

        create.assert_not_awaited()
