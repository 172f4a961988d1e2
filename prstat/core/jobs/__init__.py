from prstat.core.jobs.base import BaseJob
from prstat.core.jobs.pr_stats import DEFAULT_REQUEST_DELAY, PullRequestStatsJob

__all__ = [
    'BaseJob',
    'PullRequestStatsJob',
    'DEFAULT_REQUEST_DELAY',
]
