"""Generation backends and injected collaborators.

The router and tracker never import service modules themselves; callers hand
them a :class:`Collaborators` bundle.  Each collaborator may be a plain
function or a coroutine function.  :class:`HttpGenerationBackend` provides the
assembly/orchestration collaborators over HTTP.

Typical usage::

    backend = HttpGenerationBackend("http://localhost:3001")
    collaborators = Collaborators.http(backend, deploy_project=deploy)
    router = GenerationRouter(collaborators)
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

import httpx

from sitegen.config import GENERATION_TIMEOUT_SECONDS, BackendConfig
from sitegen.errors import BackendError, TransportError

Collaborator = Callable[..., Any]


@dataclass(frozen=True)
class Collaborators:
    """External services the engine calls.  Every entry is optional.

    Attributes:
        assemble_project: ``(payload: dict) -> response`` deterministic assembly.
        orchestrate_project: ``(payload: dict) -> response`` AI orchestration.
        deploy_project: ``(artifact_name: str) -> result``.
        delete_project: ``(artifact_name: str, *, local_only: bool) -> None``.
        rebuild_project: ``(data: dict) -> response`` rebuild of an existing site.
    """

    assemble_project: Optional[Collaborator] = None
    orchestrate_project: Optional[Collaborator] = None
    deploy_project: Optional[Collaborator] = None
    delete_project: Optional[Collaborator] = None
    rebuild_project: Optional[Collaborator] = None

    @classmethod
    def http(cls, backend: "HttpGenerationBackend", **others: Collaborator) -> "Collaborators":
        """Bundle an HTTP backend's assemble/orchestrate calls with *others*."""
        bundle = cls(assemble_project=backend.assemble, orchestrate_project=backend.orchestrate)
        return replace(bundle, **others)


async def call_collaborator(
    func: Collaborator,
    *args: Any,
    timeout: float | None = None,
    **kwargs: Any,
) -> Any:
    """Invoke a sync or async collaborator, optionally bounded by *timeout*.

    Sync callables run in a worker thread so they never block the event loop.

    Raises:
        asyncio.TimeoutError: If *timeout* elapses first.
    """

    async def _invoke() -> Any:
        if inspect.iscoroutinefunction(func):
            return await func(*args, **kwargs)
        result = await asyncio.to_thread(func, *args, **kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result

    if timeout is None:
        return await _invoke()
    return await asyncio.wait_for(_invoke(), timeout)


class HttpGenerationBackend:
    """Async client for the assembly and orchestration HTTP endpoints.

    One POST per call, no retry.  Failures raise instead of returning an error
    object: :class:`BackendError` when the server answered with a JSON
    ``error`` field, :class:`TransportError` for everything else.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = GENERATION_TIMEOUT_SECONDS,
        assemble_path: str = "/api/assemble",
        orchestrate_path: str = "/api/orchestrate",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.assemble_path = assemble_path
        self.orchestrate_path = orchestrate_path
        self._transport = transport

    @classmethod
    def from_config(cls, config: BackendConfig) -> "HttpGenerationBackend":
        return cls(
            base_url=config.url,
            timeout=config.timeout,
            assemble_path=config.assemble_path,
            orchestrate_path=config.orchestrate_path,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            transport=self._transport,
        )

    @staticmethod
    def _extract_error(response: httpx.Response) -> str | None:
        """Pull the structured ``error`` string out of an error response body."""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
            return data["error"]
        return None

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.post(path, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"Request to {self.base_url}{path} timed out after {self.timeout}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            message = self._extract_error(exc.response)
            if message is not None:
                raise BackendError(message, status_code=exc.response.status_code) from exc
            raise TransportError(str(exc) or "Request failed") from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise TransportError(f"Invalid JSON from {self.base_url}{path}: {exc}") from exc

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected response from {self.base_url}{path}: expected a JSON object")
        return data

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def assemble(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST an assembly request (``{name, industry, description, ...}``)."""
        return await self._post(self.assemble_path, payload)

    async def orchestrate(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST an orchestration request (``{input, autoDeploy}``)."""
        return await self._post(self.orchestrate_path, payload)
