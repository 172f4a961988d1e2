from datetime import datetime, timedelta, timezone
from typing import List, Mapping

from github import GithubException

from prstat.core.exceptions import (
    DiffTooLargeError,
    SourceError,
    SourceNetworkError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from prstat.core.ports.pr_source import PRSource
from prstat.core.schema.pr import GitHubUser, PullRequestModel
from prstat.infra.github.client import GitHubClient


STATUS_OPEN = "open"
STATUS_CLOSED = "closed"
STATUS_ALL = "all"


class GitHubPRSource(PRSource):
    def __init__(
        self,
        client: GitHubClient,
        pr_state: str = STATUS_OPEN,
    ) -> None:
        self._client = client
        self._pr_state = pr_state

    def get_pull_requests(self, owner: str, repo: str) -> List[PullRequestModel]:
        resource = f"{owner}/{repo}"
        try:
            pulls = list(
                self._client.get_repo(owner, repo).get_pulls(
                    state=self._pr_state,
                    sort="created",
                    direction="desc",
                )
            )
        except GithubException as error:
            self._translate_exception("Failed to fetch pull requests", error, resource)
        except OSError as error:
            raise SourceNetworkError(
                f"Failed to fetch pull requests for {resource}: {error}"
            ) from error
        return [self._to_model(pr, owner, repo) for pr in pulls]

    def get_pull_request_diff(self, owner: str, repo: str, number: int) -> str:
        message = f"Failed to fetch diff for PR #{number}"
        try:
            status, headers, body = self._client.request_diff(owner, repo, number)
        except GithubException as error:
            self._translate_exception(message, error, f"{owner}/{repo}#{number}")
        except OSError as error:
            raise SourceNetworkError(f"{message}: {error}") from error

        if 200 <= status < 300:
            return body or ""
        if status == 406:
            raise DiffTooLargeError("Pull request diff is too large", number)
        raise self._error_for_status(message, status, headers, f"{owner}/{repo}#{number}")

    def _to_model(self, pr, owner: str, repo: str) -> PullRequestModel:
        user = pr.user
        return PullRequestModel(
            id=pr.id,
            number=pr.number,
            owner=owner,
            repo=repo,
            title=pr.title or "",
            created_at=pr.created_at,
            merged_at=pr.merged_at,
            user=GitHubUser(
                login=user.login if user else "",
                id=user.id if user else 0,
                avatar_url=user.avatar_url if user else "",
                html_url=user.html_url if user else "",
                type=user.type if user else "User",
            ),
            html_url=pr.html_url,
            diff=None,
            processed=False,
        )

    def _translate_exception(
        self,
        message: str,
        error: GithubException,
        resource: str,
    ) -> None:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        if status is None:
            raise SourceError(f"{message}: {error}") from error
        raise self._error_for_status(message, status, headers, resource) from error

    def _error_for_status(
        self,
        message: str,
        status: int,
        headers: Mapping[str, str],
        resource: str,
    ) -> SourceError:
        if status in (403, 429):
            return SourceRateLimitError(
                "GitHub API rate limit exceeded",
                self._retry_after_from_headers(headers),
            )
        if status == 404:
            return SourceNotFoundError("Resource not found", resource)
        return SourceNetworkError(f"{message}: HTTP status {status}", status)

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        lowered = {str(key).lower(): value for key, value in headers.items()}
        retry_after = _to_float(lowered.get("retry-after"))
        if retry_after is not None:
            return datetime.now(timezone.utc) + timedelta(seconds=retry_after)
        reset = _to_float(lowered.get("x-ratelimit-reset"))
        if reset is not None:
            return datetime.fromtimestamp(reset, tz=timezone.utc)
        return None


def _to_float(value) -> float | None:  # noqa: ANN001
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
