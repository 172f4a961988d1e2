from typing import List, Protocol, runtime_checkable

from prstat.core.schema.pr import PullRequestModel


@runtime_checkable
class PRSource(Protocol):
    """Read side of a code host.

    Both calls raise a ``SourceError`` subclass on failure; ``kind`` on the
    exception tells the caller what went wrong.
    """

    def get_pull_requests(self, owner: str, repo: str) -> List[PullRequestModel]:
        ...

    def get_pull_request_diff(self, owner: str, repo: str, number: int) -> str:
        ...
