"""Add or update a single comment on a GitHub pull request."""

from prcomment.adapters import GitHubAdapter, GitPlatformError, IssueTrackerAdapter
from prcomment.commenter import Commenter, make_commenter
from prcomment.errors import (
    BodyGenerationError,
    CreateError,
    EditError,
    FetchError,
    InvalidNumberError,
    ListError,
    MalformedURLError,
    PRCommentError,
    PullRequestURLError,
    TooFewSegmentsError,
    UnexpectedFormatError,
)
from prcomment.logging import setup_logging
from prcomment.matchers import all_of, by_author, comment_marker, has_marker, with_marker
from prcomment.models import PR, Comment, PullRequestRef
from prcomment.url import parse_pr_url

__all__ = [
    "BodyGenerationError",
    "Comment",
    "Commenter",
    "CreateError",
    "EditError",
    "FetchError",
    "GitHubAdapter",
    "GitPlatformError",
    "InvalidNumberError",
    "IssueTrackerAdapter",
    "ListError",
    "MalformedURLError",
    "PR",
    "PRCommentError",
    "PullRequestRef",
    "PullRequestURLError",
    "TooFewSegmentsError",
    "UnexpectedFormatError",
    "all_of",
    "by_author",
    "comment_marker",
    "has_marker",
    "make_commenter",
    "parse_pr_url",
    "setup_logging",
    "with_marker",
]
