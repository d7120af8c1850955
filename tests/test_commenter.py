"""Tests for Commenter (add or update a PR comment) with a mocked adapter."""

import logging
from unittest.mock import Mock, patch

import pytest

from prcomment.adapters.base import GitPlatformError, IssueTrackerAdapter
from prcomment.adapters.github import GitHubAdapter
from prcomment.commenter import Commenter
from prcomment.errors import BodyGenerationError, CreateError, EditError, FetchError, ListError, PRCommentError
from prcomment.matchers import has_marker, with_marker
from prcomment.models import PR, Comment, PullRequestRef


def _pr(number: int = 7) -> PR:
    return PR(number=number, title="Add widgets", head_branch="7-widgets", base_branch="main")


def _adapter(comments: list[Comment] | None = None) -> Mock:
    adapter = Mock(spec=IssueTrackerAdapter)
    adapter.get_pr.return_value = _pr()
    adapter.list_issue_comments.return_value = comments or []
    adapter.create_comment.side_effect = lambda repo, num, body: Comment(id=999, body=body)
    adapter.edit_comment.side_effect = lambda repo, cid, body: Comment(id=cid, body=body)
    return adapter


def _body(pr: PR) -> str:
    return f"Report for #{pr.number}"


def test_no_matcher_always_creates() -> None:
    """Without a matcher a new comment is created even if comments exist."""
    adapter = _adapter([Comment(id=1, body="Report for #7")])
    result = Commenter(adapter, _body).add_or_update("acme", "widgets", 7)

    adapter.create_comment.assert_called_once_with("acme/widgets", 7, "Report for #7")
    adapter.edit_comment.assert_not_called()
    assert result.id == 999
    assert result.body == "Report for #7"


def test_matcher_never_matching_creates() -> None:
    """A matcher that never matches creates and never edits."""
    adapter = _adapter([Comment(id=1, body="a"), Comment(id=2, body="b")])
    matcher = Mock(return_value=False)
    Commenter(adapter, _body, is_comment=matcher).add_or_update("acme", "widgets", 7)

    assert matcher.call_count == 2
    adapter.create_comment.assert_called_once()
    adapter.edit_comment.assert_not_called()


def test_single_match_is_edited() -> None:
    """The matching comment is edited and nothing is created."""
    comments = [
        Comment(id=1, body="lgtm", author="alice"),
        Comment(id=2, body=with_marker("old report", "report"), author="bot"),
    ]
    adapter = _adapter(comments)
    result = Commenter(adapter, _body, is_comment=has_marker("report")).add_or_update("acme", "widgets", 7)

    adapter.edit_comment.assert_called_once_with("acme/widgets", 2, "Report for #7")
    adapter.create_comment.assert_not_called()
    assert result.id == 2


def test_only_first_of_several_matches_is_edited() -> None:
    """With several matches only the first in listed order is edited."""
    comments = [Comment(id=10, body="x"), Comment(id=11, body="match"), Comment(id=12, body="match")]
    adapter = _adapter(comments)
    seen: list[int] = []

    def matcher(comment: Comment) -> bool:
        seen.append(comment.id)
        return comment.body == "match"

    Commenter(adapter, _body, is_comment=matcher).add_or_update("acme", "widgets", 7)

    adapter.edit_comment.assert_called_once_with("acme/widgets", 11, "Report for #7")
    adapter.create_comment.assert_not_called()
    assert seen == [10, 11]


def test_body_generator_receives_fetched_pr() -> None:
    """The body generator gets the PR returned by the adapter."""
    adapter = _adapter()
    body = Mock(return_value="hello")
    Commenter(adapter, body).add_or_update("acme", "widgets", 7)

    adapter.get_pr.assert_called_once_with("acme/widgets", 7)
    body.assert_called_once_with(adapter.get_pr.return_value)
    adapter.list_issue_comments.assert_called_once_with("acme/widgets", 7)


def test_fetch_failure_raises_fetch_error() -> None:
    """A failing get_pr stops before the body generator runs."""
    adapter = _adapter()
    adapter.get_pr.side_effect = GitPlatformError("Not found: /repos/acme/widgets/pulls/7", status_code=404)
    body = Mock(return_value="hello")

    with pytest.raises(FetchError) as exc_info:
        Commenter(adapter, body).add_or_update("acme", "widgets", 7)

    assert isinstance(exc_info.value.__cause__, GitPlatformError)
    assert str(exc_info.value).startswith("getting pull request: Not found")
    body.assert_not_called()
    adapter.list_issue_comments.assert_not_called()
    adapter.create_comment.assert_not_called()
    adapter.edit_comment.assert_not_called()


def test_body_failure_writes_nothing() -> None:
    """If the body generator raises, no create or edit happens."""
    adapter = _adapter([Comment(id=1, body="match")])

    def body(pr: PR) -> str:
        raise RuntimeError("template missing")

    commenter = Commenter(adapter, body, is_comment=lambda c: True)
    with pytest.raises(BodyGenerationError) as exc_info:
        commenter.add_or_update("acme", "widgets", 7)

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert "getting comment body: template missing" == str(exc_info.value)
    adapter.create_comment.assert_not_called()
    adapter.edit_comment.assert_not_called()


def test_list_failure_writes_nothing() -> None:
    """If listing comments fails, no create or edit happens."""
    adapter = _adapter()
    adapter.list_issue_comments.side_effect = GitPlatformError("GitHub API error 500: boom", status_code=500)

    with pytest.raises(ListError):
        Commenter(adapter, _body, is_comment=lambda c: True).add_or_update("acme", "widgets", 7)

    adapter.create_comment.assert_not_called()
    adapter.edit_comment.assert_not_called()


def test_edit_failure_does_not_fall_back_to_create() -> None:
    """A failing edit raises EditError and does not create instead."""
    adapter = _adapter([Comment(id=3, body="match")])
    adapter.edit_comment.side_effect = GitPlatformError("GitHub API error 403: Forbidden", status_code=403)

    with pytest.raises(EditError) as exc_info:
        Commenter(adapter, _body, is_comment=lambda c: True).add_or_update("acme", "widgets", 7)

    assert exc_info.value.__cause__.status_code == 403
    adapter.create_comment.assert_not_called()


def test_create_failure_raises_create_error() -> None:
    adapter = _adapter()
    adapter.create_comment.side_effect = GitPlatformError("GitHub API error 422: Validation Failed")

    with pytest.raises(CreateError) as exc_info:
        Commenter(adapter, _body).add_or_update("acme", "widgets", 7)

    assert isinstance(exc_info.value, PRCommentError)
    assert str(exc_info.value) == "adding PR comment: GitHub API error 422: Validation Failed"


def test_upsert_uses_ref_fields() -> None:
    """upsert(ref) passes owner/repo and number to the adapter."""
    adapter = _adapter()
    ref = PullRequestRef(host="github.example.com", owner="acme", repo="widgets", number=42)
    Commenter(adapter, _body).upsert(ref)

    adapter.get_pr.assert_called_once_with("acme/widgets", 42)
    adapter.create_comment.assert_called_once_with("acme/widgets", 42, "Report for #7")


def test_logs_created_comment(caplog: pytest.LogCaptureFixture) -> None:
    adapter = _adapter()
    with caplog.at_level(logging.INFO, logger="prcomment.commenter"):
        Commenter(adapter, _body).add_or_update("acme", "widgets", 7)
    assert "Created comment 999 on PR acme/widgets#7" in caplog.text


def test_matcher_exception_propagates_unwrapped() -> None:
    """An exception from the matcher reaches the caller as-is; nothing is
    written."""
    adapter = _adapter([Comment(id=1, body="x")])

    def matcher(comment: Comment) -> bool:
        raise RuntimeError("matcher broke")

    with pytest.raises(RuntimeError, match="matcher broke") as exc_info:
        Commenter(adapter, _body, is_comment=matcher).add_or_update("acme", "widgets", 7)

    assert not isinstance(exc_info.value, PRCommentError)
    adapter.create_comment.assert_not_called()
    adapter.edit_comment.assert_not_called()


def test_non_json_pr_response_raises_fetch_error() -> None:
    """A 200 response with an unparseable body is reported at the fetch
    stage."""
    adapter = GitHubAdapter(token="t")
    mock_resp = Mock()
    mock_resp.status_code = 200
    mock_resp.json.side_effect = ValueError("Expecting value")
    body = Mock(return_value="hello")

    with patch.object(adapter._session, "request", return_value=mock_resp) as req:
        with pytest.raises(FetchError) as exc_info:
            Commenter(adapter, body).add_or_update("acme", "widgets", 7)

    assert isinstance(exc_info.value.__cause__, GitPlatformError)
    assert str(exc_info.value).startswith("getting pull request: Unexpected GitHub API response")
    body.assert_not_called()
    req.assert_called_once()
