"""Data models for pull requests and their comments (Pydantic)."""

from collections.abc import Callable
from datetime import datetime

from pydantic import BaseModel, Field


class PullRequestRef(BaseModel):
    """Identifies a pull request: host, owner, repository and number."""

    host: str = "github.com"
    owner: str
    repo: str
    number: int = Field(ge=1)

    @property
    def full_name(self) -> str:
        """Repository in format owner/repo."""
        return f"{self.owner}/{self.repo}"

    @property
    def html_url(self) -> str:
        return f"https://{self.host}/{self.owner}/{self.repo}/pull/{self.number}"


class PR(BaseModel):
    """Pull request metadata passed to the body generator."""

    number: int
    title: str
    body: str = ""
    head_branch: str = ""
    base_branch: str = ""
    state: str = "open"
    author: str = ""
    html_url: str | None = None


class Comment(BaseModel):
    """Comment in a pull request's discussion thread."""

    id: int
    body: str = ""
    author: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    html_url: str | None = None


# Computes the comment body from the fetched pull request; may raise.
BodyGenerator = Callable[[PR], str]

# Selects the existing comment to update.
CommentMatcher = Callable[[Comment], bool]
