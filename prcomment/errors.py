"""Errors raised while adding or updating a pull-request comment.

Every error carries the stage it happened in. The underlying failure is
kept as ``__cause__`` (``raise ... from``), so callers can inspect it.
"""


class PRCommentError(Exception):
    """Base error; ``str()`` reads ``"<stage>: <cause>"``."""

    stage = "commenting on pull request"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        detail = self.message
        if detail is None and self.__cause__ is not None:
            detail = str(self.__cause__)
        if detail:
            return f"{self.stage}: {detail}"
        return self.stage


class FetchError(PRCommentError):
    """Pull request could not be fetched (not found, auth, network)."""

    stage = "getting pull request"


class BodyGenerationError(PRCommentError):
    """The body generator raised."""

    stage = "getting comment body"


class ListError(PRCommentError):
    """Listing comments on the pull request failed."""

    stage = "listing PR comments"


class EditError(PRCommentError):
    """Editing the matched comment failed."""

    stage = "updating PR comment"


class CreateError(PRCommentError):
    """Creating a new comment failed."""

    stage = "adding PR comment"


class PullRequestURLError(PRCommentError, ValueError):
    """Pull-request URL is not of the form scheme://host/owner/repo/pull/N."""

    stage = "parsing GitHub pull-request URL"


class MalformedURLError(PullRequestURLError):
    """The URL itself could not be parsed."""


class TooFewSegmentsError(PullRequestURLError):
    """The path has fewer than four segments (owner/repo/pull/number)."""


class UnexpectedFormatError(PullRequestURLError):
    """The third path segment is not ``pull``."""


class InvalidNumberError(PullRequestURLError):
    """The fourth path segment is not a positive integer."""
