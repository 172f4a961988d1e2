from tests.fakes.clock import FakeClock
from tests.fakes.github import (
    FakeDiffResponse,
    FakeGitHubClient,
    FakePullRequest,
    FakeRepository,
    FakeUser,
)
from tests.fakes.logger import FakeLogger
from tests.fakes.pr_source import FakePRSource
from tests.fakes.state_store import FailingStateStore, FakeStateStore

__all__ = [
    "FailingStateStore",
    "FakeClock",
    "FakeDiffResponse",
    "FakeGitHubClient",
    "FakeLogger",
    "FakePRSource",
    "FakePullRequest",
    "FakeRepository",
    "FakeStateStore",
    "FakeUser",
]
