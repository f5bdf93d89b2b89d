"""Testes do LoginUseCase."""

from __future__ import annotations

import base64

import httpx
import pytest

from api.networking import ApiErrorResponse, ApiSession
from app.domain import Credentials
from app.infra.stores import MemorySessionStore
from app.use_cases.auth.login import (
    INVALID_PASSWORD,
    INVALID_USERNAME,
    NETWORK_FAILED,
    LoginUseCase,
    LoginUseCaseError,
    validate_password,
    validate_username,
)
from tests.fakes.fake_api_session import FakeApiSession

VALID = Credentials("goku@kame.house", "kamehameha")


class TestValidation:
    """Testes das regras de validação."""

    @pytest.mark.parametrize(
        ("username", "expected"),
        [("a@b.com", True), ("@", True), ("", False), ("goku", False)],
    )
    def test_validate_username(self, username: str, expected: bool) -> None:
        """Usuário não vazio com '@'."""
        assert validate_username(username) is expected

    @pytest.mark.parametrize(
        ("password", "expected"),
        [("1234", True), ("123", False), ("", False)],
    )
    def test_validate_password(self, password: str, expected: bool) -> None:
        """Senha com ao menos 4 caracteres."""
        assert validate_password(password) is expected


class TestLoginUseCase:
    """Testes do fluxo de login."""

    @pytest.mark.asyncio
    async def test_success_stores_token(self) -> None:
        """Bytes da resposta viram o token armazenado."""
        session = FakeApiSession({"/api/auth/login": b"hello-world"})
        store = MemorySessionStore()

        await LoginUseCase(session, store).execute(VALID)

        assert store.get() == b"hello-world"
        assert session.paths == ["/api/auth/login"]

    @pytest.mark.asyncio
    async def test_empty_credentials_report_username_first(self) -> None:
        """Usuário é validado antes da senha."""
        session = FakeApiSession()

        with pytest.raises(LoginUseCaseError) as exc_info:
            await LoginUseCase(session, MemorySessionStore()).execute(Credentials("", ""))

        assert exc_info.value.reason == INVALID_USERNAME
        assert session.requests == []

    @pytest.mark.asyncio
    async def test_short_password(self) -> None:
        """Senha curta falha sem IO."""
        session = FakeApiSession()

        with pytest.raises(LoginUseCaseError) as exc_info:
            await LoginUseCase(session, MemorySessionStore()).execute(
                Credentials("goku@kame.house", "123")
            )

        assert exc_info.value == LoginUseCaseError(INVALID_PASSWORD)
        assert session.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            ApiErrorResponse.network("/api/auth/login"),
            ApiErrorResponse.malformed_url("/api/auth/login"),
            httpx.ConnectTimeout("timeout"),
        ],
    )
    async def test_execution_failure_is_network_failed(self, error: Exception) -> None:
        """Qualquer falha de execução vira "Network failed" e não grava token."""
        store = MemorySessionStore()

        with pytest.raises(LoginUseCaseError) as exc_info:
            await LoginUseCase(FakeApiSession(error=error), store).execute(VALID)

        assert exc_info.value.reason == NETWORK_FAILED
        assert exc_info.value.__cause__ is error
        assert store.get() is None

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_token(self) -> None:
        """Falha não apaga token anterior."""
        store = MemorySessionStore()
        store.store(b"previous")

        with pytest.raises(LoginUseCaseError):
            await LoginUseCase(
                FakeApiSession(error=ApiErrorResponse.network("/api/auth/login")), store
            ).execute(VALID)

        assert store.get() == b"previous"

    @pytest.mark.asyncio
    async def test_sends_basic_authorization_over_http(self) -> None:
        """Header Basic chega ao servidor via ApiSession."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"jwt-token")

        store = MemorySessionStore()
        session = ApiSession(transport=httpx.MockTransport(handler))

        await LoginUseCase(session, store).execute(VALID)

        expected = base64.b64encode(b"goku@kame.house:kamehameha").decode()
        assert seen[0].headers["Authorization"] == f"Basic {expected}"
        assert seen[0].url.path == "/api/auth/login"
        assert store.get() == b"jwt-token"

    @pytest.mark.asyncio
    async def test_http_error_status_is_network_failed(self) -> None:
        """401 do servidor vira "Network failed"."""
        session = ApiSession(transport=httpx.MockTransport(lambda r: httpx.Response(401)))

        with pytest.raises(LoginUseCaseError) as exc_info:
            await LoginUseCase(session, MemorySessionStore()).execute(VALID)

        assert str(exc_info.value) == NETWORK_FAILED
