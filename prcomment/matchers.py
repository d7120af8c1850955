"""Ready-made comment matchers.

A matcher is any ``Callable[[Comment], bool]``. The usual way to find
"our" comment again is a hidden HTML marker embedded in its body.
"""

from prcomment.models import Comment, CommentMatcher

MARKER_PREFIX = "prcomment"


def comment_marker(name: str) -> str:
    """Return the hidden marker for ``name``, e.g. ``<!-- prcomment:coverage -->``."""
    name = name.strip()
    if not name:
        raise ValueError("marker name must not be empty")
    return f"<!-- {MARKER_PREFIX}:{name} -->"


def with_marker(body: str, name: str) -> str:
    """Append the marker for ``name`` to ``body`` unless already present."""
    marker = comment_marker(name)
    if marker in body:
        return body
    return f"{body.rstrip()}\n\n{marker}\n"


def has_marker(name: str) -> CommentMatcher:
    """Match comments whose body contains the marker for ``name``."""
    marker = comment_marker(name)

    def match(comment: Comment) -> bool:
        return marker in (comment.body or "")

    return match


def by_author(login: str) -> CommentMatcher:
    """Match comments written by ``login`` (case-insensitive)."""
    wanted = login.strip().lower()

    def match(comment: Comment) -> bool:
        return (comment.author or "").lower() == wanted

    return match


def all_of(*matchers: CommentMatcher) -> CommentMatcher:
    """Match comments accepted by every one of ``matchers``."""

    def match(comment: Comment) -> bool:
        return all(m(comment) for m in matchers)

    return match
