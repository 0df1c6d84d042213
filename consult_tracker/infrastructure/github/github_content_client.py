"""GitHub contents API client — implements the ContentStore interface.

Each document is one file in the configured repository and branch. Reads
decode the base64 content envelope and record the blob SHA; writes send the
cached SHA back so GitHub rejects updates based on a stale read (HTTP 409).
"""

import base64
import binascii
import json
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx

from consult_tracker.application.interfaces import ContentStore
from consult_tracker.domain.entities import (
    Absent,
    Found,
    ProbeResult,
    ReadResult,
    RemoteConfig,
)
from consult_tracker.domain.exceptions import (
    ConflictError,
    NotConfiguredError,
    RemoteReadError,
    RemoteWriteError,
)
from consult_tracker.infrastructure.github.version_cache import VersionTokenCache

logger = logging.getLogger(__name__)

# Returns the current settings; consulted before every operation.
ConfigProvider = Callable[[], RemoteConfig | None]


class GitHubContentClient(ContentStore):
    """Infrastructure adapter — stores JSON documents as files in a GitHub repository.

    Uses an injected ``httpx.AsyncClient`` when given (tests, shared
    connection pool) and otherwise opens a short-lived client per call.
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        token_cache: VersionTokenCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config_provider = config_provider
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._token_cache = token_cache if token_cache is not None else VersionTokenCache()
        self._http_client = http_client

    @property
    def token_cache(self) -> VersionTokenCache:
        return self._token_cache

    def _require_config(self) -> RemoteConfig:
        config = self._config_provider()
        if config is None or not config.is_complete:
            raise NotConfiguredError()
        return config

    @staticmethod
    def _get_headers(config: RemoteConfig) -> dict[str, str]:
        """Standard headers for GitHub REST requests."""
        return {
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/vnd.github.v3+json",
        }

    def _contents_url(self, config: RemoteConfig, path: str) -> str:
        return f"{self._base_url}/repos/{config.owner}/{config.repo}/contents/{path}"

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the injected client, or a short-lived one that is closed on exit."""
        if self._http_client is not None:
            yield self._http_client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    # ── Read ────────────────────────────────────────────────────────

    async def read(self, path: str) -> ReadResult:
        """Fetch and decode the JSON document at ``path`` on the configured branch."""
        config = self._require_config()
        url = self._contents_url(config, path)

        try:
            async with self._session() as client:
                response = await client.get(
                    url,
                    headers=self._get_headers(config),
                    params={"ref": config.branch},
                )
        except httpx.TimeoutException as exc:
            raise RemoteReadError(path, detail=str(exc) or "request timed out", kind="timeout") from exc
        except httpx.HTTPError as exc:
            raise RemoteReadError(path, detail=str(exc), kind="transport") from exc

        if response.status_code == 404:
            logger.debug("No document at %s — treating as absent", path)
            return Absent(path)

        if not response.is_success:
            raise RemoteReadError(
                path,
                status_code=response.status_code,
                detail=_error_detail(response),
            )

        try:
            data = response.json()
            sha = data["sha"]
            raw = base64.b64decode(data["content"])
            document = json.loads(raw.decode("utf-8"))
        except (ValueError, KeyError, TypeError, binascii.Error) as exc:
            raise RemoteReadError(
                path,
                status_code=response.status_code,
                detail=f"Could not decode document: {exc}",
                kind="decode",
            ) from exc

        self._token_cache.set(path, sha)
        logger.debug("Read %s (sha=%s)", path, sha)
        return Found(document=document, sha=sha)

    # ── Write ───────────────────────────────────────────────────────

    async def write(self, path: str, document: Any, message: str | None = None) -> str:
        """Commit ``document`` as pretty-printed JSON to ``path``.

        Sends the cached SHA as the expected prior version when one is known.
        A 409 response raises ConflictError and leaves the cache untouched;
        nothing is retried.
        """
        config = self._require_config()
        url = self._contents_url(config, path)

        text = json.dumps(document, indent=2, ensure_ascii=False)
        payload: dict[str, str] = {
            "message": message or f"Update {path}",
            "content": base64.b64encode(text.encode("utf-8")).decode("ascii"),
            "branch": config.branch,
        }
        prior = self._token_cache.get(path)
        if prior is not None:
            payload["sha"] = prior

        try:
            async with self._session() as client:
                response = await client.put(
                    url, headers=self._get_headers(config), json=payload
                )
        except httpx.TimeoutException as exc:
            raise RemoteWriteError(path, detail=str(exc) or "request timed out", kind="timeout") from exc
        except httpx.HTTPError as exc:
            raise RemoteWriteError(path, detail=str(exc), kind="transport") from exc

        if response.status_code == 409:
            logger.warning("Version conflict writing %s (sent sha=%s)", path, prior)
            raise ConflictError(path)

        if not response.is_success:
            raise RemoteWriteError(
                path,
                status_code=response.status_code,
                detail=_error_detail(response),
            )

        try:
            sha = response.json()["content"]["sha"]
        except (ValueError, KeyError, TypeError) as exc:
            raise RemoteWriteError(
                path,
                status_code=response.status_code,
                detail=f"Unexpected write response: {exc}",
                kind="decode",
            ) from exc

        self._token_cache.set(path, sha)
        logger.info("Wrote %s (%d bytes, sha=%s)", path, len(text), sha)
        return sha

    # ── Probe ───────────────────────────────────────────────────────

    async def probe(self) -> ProbeResult:
        """Check that the token can see the configured repository."""
        try:
            config = self._require_config()
        except NotConfiguredError as exc:
            return ProbeResult(ok=False, detail=exc.message)

        url = f"{self._base_url}/repos/{config.owner}/{config.repo}"
        try:
            async with self._session() as client:
                response = await client.get(url, headers=self._get_headers(config))
            body = response.json() if response.is_success else None
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Connection probe failed: %s", exc)
            return ProbeResult(ok=False, detail=f"Connection error: {exc}")

        if not response.is_success:
            return ProbeResult(
                ok=False,
                detail=f"Connection failed: {response.status_code} {response.reason_phrase}",
            )
        # A proxy or a wrong base URL can answer 2xx with something other than a repository
        if not isinstance(body, dict):
            return ProbeResult(
                ok=False,
                detail=f"Connection failed: unexpected response from {url}",
            )
        full_name = body.get("full_name") or f"{config.owner}/{config.repo}"
        return ProbeResult(ok=True, detail=f"Connected: {full_name}")


def _error_detail(response: httpx.Response) -> str:
    """Extract GitHub's error message from a failed response."""
    try:
        data = response.json()
        return data.get("message", response.text)
    except (ValueError, AttributeError):
        return response.text
