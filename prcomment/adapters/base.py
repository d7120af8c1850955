"""Abstract base class for issue-tracker adapters.

Only the four operations the commenter needs are part of the interface,
so a test double can stand in for a real API client.
"""

from abc import ABC, abstractmethod
from typing import List

from prcomment.models import PR, Comment


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class IssueTrackerAdapter(ABC):
    """Pull-request and issue-comment operations of a Git hosting
    platform."""

    @abstractmethod
    def get_pr(self, repo: str, pr_number: int) -> PR:
        """Fetch a pull request by number.

        Args:
            repo: Repository in format owner/repo
            pr_number: Pull request number

        Returns:
            PR instance

        Raises:
            GitPlatformError: If the API call fails or PR not found
        """

    @abstractmethod
    def list_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        """List comments on an issue or pull request (first page only).

        Args:
            repo: Repository in format owner/repo
            issue_number: Issue or pull request number

        Returns:
            Comments in the order returned by the platform
        """

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue or pull request.

        Args:
            repo: Repository in format owner/repo
            issue_number: Issue or pull request number
            body: Comment body (markdown supported)

        Returns:
            Created Comment instance
        """

    @abstractmethod
    def edit_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing comment.

        Args:
            repo: Repository in format owner/repo
            comment_id: ID of the comment to edit
            body: New comment body

        Returns:
            Updated Comment instance
        """
