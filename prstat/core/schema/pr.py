from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class GitDiffStat:
    added_lines: int = 0
    deleted_lines: int = 0
    total_lines: int = 0


@dataclass(frozen=True, slots=True)
class GitHubUser:
    login: str
    id: int
    avatar_url: str
    html_url: str
    type: str = "User"


@dataclass(frozen=True, slots=True)
class PullRequestModel:
    id: int
    number: int
    owner: str
    repo: str
    title: str
    created_at: datetime
    merged_at: Optional[datetime]
    user: GitHubUser
    html_url: str
    diff: Optional[GitDiffStat] = None
    processed: bool = False

    def matches(self, number: int, owner: str, repo: str) -> bool:
        return self.number == number and self.owner == owner and self.repo == repo


@dataclass(frozen=True, slots=True)
class ProgressData:
    pull_requests: List[PullRequestModel]
