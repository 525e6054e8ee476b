"""Unit tests for collaborator invocation and the HTTP backend (sitegen.backends).

Tests cover:
- call_collaborator with sync, async and awaitable-returning callables, timeouts
- Collaborators.http bundling
- HttpGenerationBackend success, structured errors, HTTP errors, timeouts, bad JSON
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from sitegen.backends import Collaborators, HttpGenerationBackend, call_collaborator
from sitegen.config import BackendConfig
from sitegen.errors import BackendError, TransportError


def _backend(handler) -> HttpGenerationBackend:
    return HttpGenerationBackend("http://backend.test", transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# call_collaborator
# ---------------------------------------------------------------------------


class TestCallCollaborator:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sync_function(self):
        assert await call_collaborator(lambda x, y=0: x + y, 2, y=3) == 5

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_async_function(self):
        async def double(x):
            return x * 2

        assert await call_collaborator(double, 21) == 42

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sync_function_returning_awaitable(self):
        async def inner():
            return "done"

        assert await call_collaborator(lambda: inner()) == "done"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout(self):
        async def slow():
            await asyncio.sleep(1)

        with pytest.raises(asyncio.TimeoutError):
            await call_collaborator(slow, timeout=0.01)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_exception_propagates(self):
        def broken():
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError, match="nope"):
            await call_collaborator(broken)


class TestCollaborators:
    @pytest.mark.unit
    def test_defaults_are_empty(self):
        bundle = Collaborators()
        assert bundle.assemble_project is None
        assert bundle.deploy_project is None

    @pytest.mark.unit
    def test_http_bundle(self):
        backend = HttpGenerationBackend()
        deploy = object()
        bundle = Collaborators.http(backend, deploy_project=deploy)
        assert bundle.assemble_project == backend.assemble
        assert bundle.orchestrate_project == backend.orchestrate
        assert bundle.deploy_project is deploy
        assert bundle.delete_project is None


# ---------------------------------------------------------------------------
# HttpGenerationBackend
# ---------------------------------------------------------------------------


class TestHttpGenerationBackend:
    @pytest.mark.unit
    def test_from_config(self):
        backend = HttpGenerationBackend.from_config(
            BackendConfig(url="http://gen.local:4000/", timeout=60, assemble_path="/v2/assemble")
        )
        assert backend.base_url == "http://gen.local:4000"
        assert backend.timeout == 60
        assert backend.assemble_path == "/v2/assemble"
        assert backend.orchestrate_path == "/api/orchestrate"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_assemble_posts_json(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"projectPath": "/out/x", "pages": ["home"]})

        result = await _backend(handler).assemble({"name": "X", "testMode": True})

        assert seen == {"method": "POST", "path": "/api/assemble", "body": {"name": "X", "testMode": True}}
        assert result == {"projectPath": "/out/x", "pages": ["home"]}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_orchestrate_path(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/orchestrate"
            return httpx.Response(200, json={"pages": []})

        assert await _backend(handler).orchestrate({"input": "hi", "autoDeploy": False}) == {"pages": []}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_structured_error_raises_backend_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"error": "Unknown industry"})

        with pytest.raises(BackendError) as excinfo:
            await _backend(handler).assemble({})
        assert str(excinfo.value) == "Unknown industry"
        assert excinfo.value.status_code == 422

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unstructured_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(TransportError) as excinfo:
            await _backend(handler).assemble({})
        assert not isinstance(excinfo.value, BackendError)
        assert "502" in str(excinfo.value)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_connect_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(TransportError, match="Connection refused"):
            await _backend(handler).orchestrate({})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(TransportError, match="timed out after 300s"):
            await _backend(handler).assemble({})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        with pytest.raises(TransportError, match="Invalid JSON"):
            await _backend(handler).assemble({})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_object_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["home"])

        with pytest.raises(TransportError, match="expected a JSON object"):
            await _backend(handler).assemble({})
