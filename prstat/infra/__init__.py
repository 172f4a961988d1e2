from prstat.infra.clock import SystemClock
from prstat.infra.github import GitHubClient, GitHubPRSource
from prstat.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire
from prstat.infra.repositories import load_repositories
from prstat.infra.state import FileStateStore

__all__ = [
    'GitHubClient',
    'GitHubPRSource',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
    'FileStateStore',
    'load_repositories',
]
