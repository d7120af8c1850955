"""Issue-tracker adapters."""

from prcomment.adapters.base import GitPlatformError, IssueTrackerAdapter
from prcomment.adapters.github import GitHubAdapter

__all__ = ["IssueTrackerAdapter", "GitPlatformError", "GitHubAdapter"]
