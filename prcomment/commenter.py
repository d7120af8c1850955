"""Add a comment to a pull request, or update the one already there.

Per call: fetch the PR, generate the body, list the PR's comments, then
either edit the first comment accepted by ``is_comment`` or create a new
one. Exactly one write happens, and none if an earlier step fails.

Concurrent calls against the same pull request are not coordinated; two
of them may both decide to create.
"""

import logging

from prcomment.adapters.base import GitPlatformError, IssueTrackerAdapter
from prcomment.adapters.github import GitHubAdapter
from prcomment.config import AppConfig
from prcomment.errors import BodyGenerationError, CreateError, EditError, FetchError, ListError
from prcomment.logging import setup_logging
from prcomment.matchers import all_of, by_author, has_marker, with_marker
from prcomment.models import PR, BodyGenerator, Comment, CommentMatcher, PullRequestRef


class Commenter:
    """Adds a comment to a GitHub pull request or updates an existing one."""

    def __init__(
        self,
        adapter: IssueTrackerAdapter,
        body: BodyGenerator,
        is_comment: CommentMatcher | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        """
        Args:
            adapter: Issue-tracker client (get PR, list/create/edit comments)
            body: Called with the fetched PR to produce the comment body
            is_comment: Returns True for the comment to update; None means
                always create a new comment
            log: Logger (default ``prcomment.commenter``)
        """
        self.adapter = adapter
        self.body = body
        self.is_comment = is_comment
        self._log = log or logging.getLogger("prcomment.commenter")

    def add_or_update(self, owner: str, repo: str, pr_number: int) -> Comment:
        """Create or update the comment on owner/repo#pr_number.

        Returns:
            The created or edited Comment as reported by the platform

        Raises:
            FetchError, BodyGenerationError, ListError, EditError, CreateError
        """
        full_name = f"{owner}/{repo}"

        self._log.debug("Fetching PR %s#%s", full_name, pr_number)
        try:
            pr = self.adapter.get_pr(full_name, pr_number)
        except GitPlatformError as e:
            raise FetchError() from e

        try:
            body = self.body(pr)
        except Exception as e:
            raise BodyGenerationError() from e

        try:
            comments = self.adapter.list_issue_comments(full_name, pr_number)
        except GitPlatformError as e:
            raise ListError() from e
        self._log.debug("PR %s#%s has %d comment(s)", full_name, pr_number, len(comments))

        if self.is_comment is not None:
            for comment in comments:
                if self.is_comment(comment):
                    try:
                        updated = self.adapter.edit_comment(full_name, comment.id, body)
                    except GitPlatformError as e:
                        raise EditError() from e
                    self._log.info("Updated comment %s on PR %s#%s", comment.id, full_name, pr_number)
                    return updated

        try:
            created = self.adapter.create_comment(full_name, pr_number, body)
        except GitPlatformError as e:
            raise CreateError() from e
        self._log.info("Created comment %s on PR %s#%s", created.id, full_name, pr_number)
        return created

    def upsert(self, ref: PullRequestRef) -> Comment:
        """Same as add_or_update, taking a parsed PullRequestRef."""
        return self.add_or_update(ref.owner, ref.repo, ref.number)


def make_commenter(
    config: AppConfig,
    body: BodyGenerator,
    is_comment: CommentMatcher | None = None,
) -> Commenter:
    """Build a Commenter talking to GitHub from app config.

    With ``comment.marker`` set, every generated body gets the hidden
    marker appended, so later runs find and update the same comment.
    When ``is_comment`` is not given, it is derived from ``comment.marker``
    and ``comment.author``; with neither set, every call creates a new
    comment. The ``logging`` section is applied to the ``prcomment``
    logger.
    """
    setup_logging(config.logging)
    gh = config.github
    adapter = GitHubAdapter(
        token=config.github_token_resolved,
        api_url=gh.api_url,
        timeout=gh.timeout,
        per_page=gh.per_page,
    )
    marker = config.comment.marker

    def marked_body(pr: PR) -> str:
        return with_marker(body(pr), marker)

    if is_comment is None:
        matchers = []
        if marker:
            matchers.append(has_marker(marker))
        if config.comment.author:
            matchers.append(by_author(config.comment.author))
        if matchers:
            is_comment = matchers[0] if len(matchers) == 1 else all_of(*matchers)
    return Commenter(adapter, marked_body if marker else body, is_comment=is_comment)
