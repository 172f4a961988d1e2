from typing import Any, Dict, Optional, Tuple

from github import Auth, Github

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"


class GitHubClient:
    def __init__(self, token: Optional[str] = None) -> None:
        if token:
            self._client = Github(auth=Auth.Token(token))
        else:
            self._client = Github()

    def get_repo(self, owner: str, name: str):
        return self._client.get_repo(f'{owner}/{name}', lazy=True)

    def request_diff(
        self,
        owner: str,
        repo: str,
        number: int,
    ) -> Tuple[int, Dict[str, Any], str]:
        """Fetch the unified diff of a pull request.

        Returns ``(status, headers, body)`` without raising on HTTP errors.
        """
        return self._client.requester.requestJson(
            "GET",
            f"/repos/{owner}/{repo}/pulls/{number}",
            headers={"Accept": DIFF_MEDIA_TYPE},
        )

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
