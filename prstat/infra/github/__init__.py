from prstat.infra.github.client import GitHubClient
from prstat.infra.github.pr_source import GitHubPRSource

__all__ = ["GitHubClient", "GitHubPRSource"]
