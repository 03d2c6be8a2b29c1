"""GitHub REST API adapter."""

import logging
import threading
from typing import Any, Dict, List

import requests

from prstats.adapters.base import HostingAdapter, RemoteRequestFailed
from prstats.models import PullRequestDetail, PullRequestReference, SearchPage, TimelineEvent

LOG = logging.getLogger("prstats.adapters.github")

# Timeline was a preview API; this media type is needed to receive ready_for_review events.
TIMELINE_MEDIA_TYPE = "application/vnd.github.mockingbird-preview+json"


def _error_message(resp: requests.Response) -> str:
    """Build a message from the API error body: message plus errors[].message."""
    msg = resp.text or resp.reason or str(resp.status_code)
    try:
        data = resp.json()
    except ValueError:
        return msg
    if not isinstance(data, dict):
        return msg
    msg = data.get("message") or msg
    details = [
        e["message"] for e in (data.get("errors") or []) if isinstance(e, dict) and e.get("message")
    ]
    if details:
        msg = f"{msg}: {'; '.join(details)}"
    return msg


def _reference_from_api(data: Dict[str, Any]) -> PullRequestReference:
    user = data.get("user") or {}
    return PullRequestReference(
        url=data["pull_request"]["url"],
        author=user.get("login", ""),
        number=data.get("number"),
    )


def _pull_request_from_api(data: Dict[str, Any]) -> PullRequestDetail:
    base_repo = (data.get("base") or {}).get("repo") or {}
    owner = base_repo.get("owner") or {}
    return PullRequestDetail(
        owner=owner.get("login", ""),
        repo=base_repo.get("name", ""),
        number=data["number"],
        created_at=data["created_at"],
        merged_at=data.get("merged_at"),
        html_url=data.get("html_url"),
    )


def _timeline_event_from_api(data: Dict[str, Any]) -> TimelineEvent:
    return TimelineEvent(event=data.get("event") or "", created_at=data.get("created_at"))


class GitHubAdapter(HostingAdapter):
    """GitHub API implementation.

    Each thread gets its own requests.Session (author checks run in a thread
    pool and Session is not documented as thread-safe).
    """

    def __init__(self, token: str, api_url: str = "https://api.github.com", timeout: int = 30) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._token = token
        self._local = threading.local()

    @property
    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers["Authorization"] = f"token {self._token}"
            session.headers["Accept"] = "application/vnd.github.v3+json"
            session.headers["User-Agent"] = "prstats"
            self._local.session = session
        return session

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        headers: Dict[str, str] | None = None,
    ) -> requests.Response:
        url = self._url(path)
        LOG.debug("%s %s params=%s", method, url, params)
        try:
            resp = self._session.request(method, url, params=params, headers=headers, timeout=self._timeout)
        except requests.RequestException as e:
            raise RemoteRequestFailed(None, f"{method} {url} failed: {e}") from e
        if resp.status_code >= 400:
            raise RemoteRequestFailed(resp.status_code, _error_message(resp))
        return resp

    def search_issues(self, query: str, per_page: int = 100, page: int = 1) -> SearchPage:
        resp = self._request(
            "GET",
            "/search/issues",
            params={"q": query, "per_page": per_page, "page": page},
        )
        data = resp.json() or {}
        items = data.get("items") or []
        return SearchPage(
            items=[_reference_from_api(d) for d in items if d.get("pull_request")],
            raw_count=len(items),
        )

    def get_pull_request(self, url: str) -> PullRequestDetail:
        resp = self._request("GET", url)
        return _pull_request_from_api(resp.json())

    def list_timeline_events(self, owner: str, repo: str, number: int) -> List[TimelineEvent]:
        url: str | None = f"/repos/{owner}/{repo}/issues/{number}/timeline"
        params: Dict[str, Any] | None = {"per_page": 100}
        events: List[TimelineEvent] = []
        while url:
            resp = self._request("GET", url, params=params, headers={"Accept": TIMELINE_MEDIA_TYPE})
            events.extend(_timeline_event_from_api(d) for d in (resp.json() or []))
            url = resp.links.get("next", {}).get("url")
            # The next link already carries per_page and page.
            params = None
        return events

    def get_authenticated_user(self) -> str:
        resp = self._request("GET", "/user")
        return resp.json()["login"]
