"""GitHub API adapter."""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, TypeVar

import requests

from prcomment.adapters.base import GitPlatformError, IssueTrackerAdapter
from prcomment.models import PR, Comment

T = TypeVar("T")


def _parse_iso(s: str | None) -> datetime | None:
    if not s:
        return None
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    created = _parse_iso(data.get("created_at"))
    updated = _parse_iso(data.get("updated_at")) or created
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        created_at=created,
        updated_at=updated,
        html_url=data.get("html_url"),
    )


def _pr_from_api(data: Dict[str, Any]) -> PR:
    head = data.get("head") or {}
    base = data.get("base") or {}
    user = data.get("user") or {}
    return PR(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        head_branch=head.get("ref", ""),
        base_branch=base.get("ref", ""),
        state=data.get("state", "open"),
        author=user.get("login", ""),
        html_url=data.get("html_url"),
    )


class GitHubAdapter(IssueTrackerAdapter):
    """GitHub REST API implementation of IssueTrackerAdapter."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: float = 30,
        per_page: int = 100,
        log: logging.Logger | None = None,
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.per_page = per_page
        self._log = log or logging.getLogger("prcomment.adapters.github")
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.api_url}{path}"
        self._log.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise GitPlatformError(f"GitHub API request failed: {e}") from e
        if resp.status_code == 404:
            raise GitPlatformError(f"Not found: {path}", status_code=404)
        if resp.status_code >= 400:
            msg = resp.text
            try:
                data = resp.json()
                if isinstance(data, dict) and "message" in data:
                    msg = data["message"]
            except ValueError:
                pass
            raise GitPlatformError(f"GitHub API error {resp.status_code}: {msg}", status_code=resp.status_code)
        return resp

    def _decode(self, resp: requests.Response, parse: Callable[[Any], T]) -> T:
        """Parse a successful response body; malformed payloads raise
        GitPlatformError."""
        try:
            return parse(resp.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise GitPlatformError(
                f"Unexpected GitHub API response ({type(e).__name__}): {e}",
                status_code=resp.status_code,
            ) from e

    def get_pr(self, repo: str, pr_number: int) -> PR:
        """Fetch a pull request by number."""
        resp = self._request("GET", f"/repos/{repo}/pulls/{pr_number}")
        return self._decode(resp, _pr_from_api)

    def list_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        """List comments on a pull request's discussion thread.

        Only the first page is fetched; GitHub returns it in creation
        order.
        """
        path = f"/repos/{repo}/issues/{issue_number}/comments"
        resp = self._request("GET", path, params={"per_page": self.per_page})
        return self._decode(resp, lambda data_list: [_comment_from_api(data) for data in data_list])

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue or pull request."""
        path = f"/repos/{repo}/issues/{issue_number}/comments"
        resp = self._request("POST", path, json={"body": body})
        return self._decode(resp, _comment_from_api)

    def edit_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing issue comment."""
        path = f"/repos/{repo}/issues/comments/{comment_id}"
        resp = self._request("PATCH", path, json={"body": body})
        return self._decode(resp, _comment_from_api)
