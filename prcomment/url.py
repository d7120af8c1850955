"""Parse GitHub pull-request URLs."""

import re
from urllib.parse import urlsplit

from prcomment.errors import (
    InvalidNumberError,
    MalformedURLError,
    TooFewSegmentsError,
    UnexpectedFormatError,
)
from prcomment.models import PullRequestRef

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def parse_pr_url(url: str) -> PullRequestRef:
    """Parse a pull-request URL of the form
    http(s)://HOST/OWNER/REPO/pull/NUMBER.

    Segments after NUMBER (e.g. ``/files``) are ignored.

    Raises:
        MalformedURLError: URL cannot be parsed
        TooFewSegmentsError: fewer than four path segments
        UnexpectedFormatError: third path segment is not ``pull``
        InvalidNumberError: fourth path segment is not a positive number
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise MalformedURLError(str(e)) from e

    segments = parts.path.lstrip("/").split("/")
    if len(segments) < 4:
        raise TooFewSegmentsError(f"too few path elements in pull-request URL (got {len(segments)}, want 4)")
    owner, repo, kind, number = segments[:4]
    if kind != "pull":
        raise UnexpectedFormatError(f"pull-request URL not in expected format: {url}")
    if not _NUMBER_RE.fullmatch(number):
        raise InvalidNumberError(f"invalid pull-request number {number!r}")
    pr_number = int(number)
    if pr_number < 1:
        raise InvalidNumberError(f"pull-request number must be positive, got {pr_number}")

    return PullRequestRef(host=parts.netloc, owner=owner, repo=repo, number=pr_number)
