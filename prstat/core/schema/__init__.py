from prstat.core.schema.pr import (
    GitDiffStat,
    GitHubUser,
    ProgressData,
    PullRequestModel,
)
from prstat.core.schema.repository import RepositoryRef, parse_repository_url

__all__ = [
    "GitDiffStat",
    "GitHubUser",
    "PullRequestModel",
    "ProgressData",
    "RepositoryRef",
    "parse_repository_url",
]
