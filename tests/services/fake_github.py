"""In-memory GitHub contents API served through httpx.MockTransport."""

import base64
import hashlib
import json
import re
from dataclasses import dataclass, field

import httpx

_CONTENTS_RE = re.compile(r"^/repos/(?P<owner>[^/]+)/(?P<repo>[^/]+)/contents/(?P<path>.+)$")
_REPO_RE = re.compile(r"^/repos/(?P<owner>[^/]+)/(?P<repo>[^/]+)$")


@dataclass
class RecordedRequest:
    method: str
    path: str
    params: dict[str, str]
    headers: dict[str, str]
    body: dict | None


@dataclass
class FakeGitHub:
    """Emulates GET/PUT on ``/repos/{owner}/{repo}/contents/{path}``.

    PUT follows GitHub's optimistic locking: updating an existing file needs
    the current blob SHA, otherwise the fake answers 409.
    Use ``fail`` to force a status code for the next request to a path.
    """

    owner: str = "o"
    repo: str = "r"
    files: dict[str, str] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)
    failures: dict[tuple[str, str], tuple[int, str]] = field(default_factory=dict)

    # ── Helpers for tests ───────────────────────────────────────────

    @staticmethod
    def sha_of(text: str) -> str:
        return hashlib.sha1(text.encode("utf-8")).hexdigest()

    def put_file(self, path: str, document) -> str:
        """Place a document directly, as if committed by someone else."""
        text = json.dumps(document, indent=2, ensure_ascii=False)
        self.files[path] = text
        return self.sha_of(text)

    def document(self, path: str):
        return json.loads(self.files[path])

    def fail(self, method: str, path: str, status_code: int, message: str = "boom") -> None:
        self.failures[(method, path)] = (status_code, message)

    def writes(self) -> list[RecordedRequest]:
        return [r for r in self.requests if r.method == "PUT"]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())

    # ── Request handling ────────────────────────────────────────────

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        url_path = request.url.path

        match = _CONTENTS_RE.match(url_path)
        path = match.group("path") if match else url_path
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                params=dict(request.url.params),
                headers=dict(request.headers),
                body=body,
            )
        )

        failure = self.failures.pop((request.method, path), None)
        if failure is not None:
            status_code, message = failure
            return httpx.Response(status_code, json={"message": message})

        if match:
            if (match.group("owner"), match.group("repo")) != (self.owner, self.repo):
                return httpx.Response(404, json={"message": "Not Found"})
            if request.method == "GET":
                return self._get(path)
            if request.method == "PUT":
                return self._put(path, body or {})

        repo_match = _REPO_RE.match(url_path)
        if repo_match and request.method == "GET":
            if (repo_match.group("owner"), repo_match.group("repo")) != (self.owner, self.repo):
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json={"full_name": f"{self.owner}/{self.repo}"})

        return httpx.Response(404, json={"message": "Not Found"})

    def _get(self, path: str) -> httpx.Response:
        if path not in self.files:
            return httpx.Response(404, json={"message": "Not Found"})
        text = self.files[path]
        encoded = base64.encodebytes(text.encode("utf-8")).decode("ascii")
        return httpx.Response(
            200,
            json={
                "name": path.rsplit("/", 1)[-1],
                "path": path,
                "sha": self.sha_of(text),
                "encoding": "base64",
                "content": encoded,
            },
        )

    def _put(self, path: str, body: dict) -> httpx.Response:
        current = self.files.get(path)
        sent_sha = body.get("sha")
        if current is not None and sent_sha != self.sha_of(current):
            return httpx.Response(
                409, json={"message": f"{path} does not match {sent_sha}"}
            )
        text = base64.b64decode(body["content"]).decode("utf-8")
        self.files[path] = text
        status_code = 200 if current is not None else 201
        return httpx.Response(
            status_code,
            json={"content": {"path": path, "sha": self.sha_of(text)}, "commit": {}},
        )
