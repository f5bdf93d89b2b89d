"""Testes do descritor ApiRequest (URL, headers, body, timeout)."""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from api.networking import ApiErrorResponse, ApiRequest, HttpMethod, ResponseShape


class _NameBody(BaseModel):
    name: str = ""


def _request(**overrides: object) -> ApiRequest[bytes]:
    params: dict[str, object] = {
        "method": HttpMethod.GET,
        "path": "/api/heros/all",
        "response_shape": ResponseShape.raw_bytes(),
    }
    params.update(overrides)
    return ApiRequest(**params)  # type: ignore[arg-type]


class TestBuildUrl:
    """Testes da montagem de URL."""

    def test_default_host_and_https(self) -> None:
        """URL usa https e o host padrão."""
        url = _request().build_url()
        assert str(url) == "https://dragonball.keepcoding.education/api/heros/all"

    def test_path_used_verbatim(self) -> None:
        """Path é usado sem modificação."""
        url = _request(path="/api/heros/tranformations").build_url()
        assert url.path == "/api/heros/tranformations"

    def test_query_parameters_encoded(self) -> None:
        """Query string é codificada e ordenada por chave."""
        url = _request(query_parameters={"z": "1", "a": "b c"}).build_url()
        assert url.params["a"] == "b c"
        assert url.params["z"] == "1"
        assert url.query.decode().startswith("a=")

    def test_no_query_without_parameters(self) -> None:
        """Sem parâmetros não há query string."""
        assert _request().build_url().query == b""

    def test_host_with_port(self) -> None:
        """Host com porta é aceito."""
        url = _request(host="localhost:8443").build_url()
        assert url.host == "localhost"
        assert url.port == 8443

    @pytest.mark.parametrize(
        "host",
        ["", "exa mple.com", "https://example.com", "example.com/api", "-bad.com"],
    )
    def test_invalid_host_is_malformed_url(self, host: str) -> None:
        """Host inválido vira malformed_url com o path."""
        with pytest.raises(ApiErrorResponse) as exc_info:
            _request(host=host).build_url()
        assert exc_info.value == ApiErrorResponse.malformed_url("/api/heros/all")

    @pytest.mark.parametrize("path", ["api/heros", "/api heros", "/api?x=1", "/api#frag"])
    def test_invalid_path_is_malformed_url(self, path: str) -> None:
        """Path relativo ou com caracteres inválidos vira malformed_url."""
        with pytest.raises(ApiErrorResponse) as exc_info:
            _request(path=path).build()
        assert exc_info.value.status_code == -5
        assert exc_info.value.url == path


class TestBuildHeadersAndBody:
    """Testes de headers e corpo."""

    def test_default_json_headers(self) -> None:
        """Headers padrão declaram JSON."""
        headers = _request().build_headers()
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"

    def test_descriptor_headers_win(self) -> None:
        """Header do descritor vence o padrão, sem diferenciar caixa."""
        headers = _request(headers={"content-type": "text/plain", "X-Trace": "1"}).build_headers()
        assert headers["Content-Type"] == "text/plain"
        assert headers["X-Trace"] == "1"
        assert len(headers.get_list("content-type")) == 1

    def test_get_never_has_body(self) -> None:
        """GET ignora o body."""
        assert _request(body=_NameBody(name="Goku")).encode_body() is None

    def test_post_body_is_json(self) -> None:
        """POST serializa o body em JSON."""
        body = _request(method=HttpMethod.POST, body=_NameBody(name="Goku")).encode_body()
        assert json.loads(body) == {"name": "Goku"}

    def test_post_without_body(self) -> None:
        """POST sem body não carrega conteúdo."""
        assert _request(method=HttpMethod.POST).encode_body() is None

    def test_unserializable_body_propagates(self) -> None:
        """Falha de serialização propaga sem classificação."""
        with pytest.raises(PydanticSerializationError):
            _request(method=HttpMethod.POST, body={"when": object()}).encode_body()


class TestBuild:
    """Testes da requisição concreta."""

    def test_build_produces_httpx_request(self) -> None:
        """build() monta método, URL, headers e conteúdo."""
        request = _request(method=HttpMethod.POST, body=_NameBody()).build()

        assert isinstance(request, httpx.Request)
        assert request.method == "POST"
        assert request.url.path == "/api/heros/all"
        assert json.loads(request.content) == {"name": ""}

    def test_build_sets_timeout(self) -> None:
        """Timeout do descritor vai para as extensions."""
        request = _request(timeout_seconds=2.0).build()
        assert request.extensions["timeout"]["read"] == 2.0

    def test_update_method_is_supported(self) -> None:
        """Método UPDATE (não padrão) é enviado como está."""
        assert _request(method=HttpMethod.UPDATE).build().method == "UPDATE"
