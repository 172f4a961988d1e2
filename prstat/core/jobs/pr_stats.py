from collections import deque
from typing import Deque, List, Optional, Sequence

from prstat.core.exceptions import SourceError
from prstat.core.export.csv import CsvExporter
from prstat.core.jobs.base import BaseJob
from prstat.core.ports.clock import Clock
from prstat.core.ports.logger import Logger
from prstat.core.ports.pr_source import PRSource
from prstat.core.progress.store import ProgressStore
from prstat.core.schema.pr import GitDiffStat, PullRequestModel
from prstat.core.schema.repository import RepositoryRef
from prstat.core.stats.diff import compute_diff_stats

DEFAULT_REQUEST_DELAY = 0.5


class PullRequestStatsJob(BaseJob):
    """Collect diff statistics for every pull request of each repository.

    One repository is handled per ``execute_once``. Progress is checkpointed
    after every pull request, so a rerun on the same day only fetches diffs
    that are still unprocessed.
    """

    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        pr_source: PRSource,
        progress_store: ProgressStore,
        repositories: Sequence[RepositoryRef],
        *,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        exporter: Optional[CsvExporter] = None,
        record_failed_diffs: bool = False,
    ) -> None:
        super().__init__(logger, clock)
        self._pr_source = pr_source
        self._progress_store = progress_store
        self._repositories = list(repositories)
        self._request_delay = request_delay
        self._exporter = exporter
        self._record_failed_diffs = record_failed_diffs
        self._pending: Deque[RepositoryRef] = deque()
        self._run_date: Optional[str] = None
        self.processed_count = 0
        self.failed_count = 0

    def setup(self) -> None:
        self._pending = deque(self._repositories)
        self._run_date = self._progress_store.today()
        self._logger.info(
            "Collecting pull request stats",
            repositories=len(self._pending),
            date=self._run_date,
        )

    def should_continue(self) -> bool:
        return bool(self._pending)

    def execute_once(self) -> None:
        repository = self._pending.popleft()
        self.process_repository(repository)

    def teardown(self) -> None:
        self._logger.info(
            "Pull request stats complete",
            repositories=len(self._repositories) - len(self._pending),
            processed=self.processed_count,
            failed=self.failed_count,
        )

    def process_repository(self, repository: RepositoryRef) -> List[PullRequestModel]:
        assert self._run_date is not None
        owner, repo = repository.owner, repository.repo

        pull_requests = self._pr_source.get_pull_requests(owner, repo)
        if not pull_requests:
            self._logger.info("No pull requests found", repository=repository.full_name)
            return []

        progress = self._progress_store.init_progress(pull_requests, self._run_date, owner, repo)

        for pr in pull_requests:
            if self._is_processed(progress, pr):
                self._logger.info(
                    "Skipping processed pull request",
                    number=pr.number,
                    repository=repository.full_name,
                )
                continue

            stat = self._fetch_diff_stat(pr)
            self._sleep(self._request_delay)
            if stat is None:
                continue

            progress = self._progress_store.update_progress(
                progress,
                number=pr.number,
                owner=owner,
                repo=repo,
                diff=stat,
                processed=True,
            )
            # An existing checkpoint may not list every fetched pull request.
            if not self._is_processed(progress, pr):
                continue

            self._logger.info(
                "Processed pull request",
                number=pr.number,
                title=pr.title,
                changes=stat.total_lines,
            )
            self.processed_count += 1

        if self._exporter is not None:
            self._exporter.export(progress, self._run_date, owner, repo)
        return progress

    def _fetch_diff_stat(self, pr: PullRequestModel) -> Optional[GitDiffStat]:
        try:
            diff_text = self._pr_source.get_pull_request_diff(pr.owner, pr.repo, pr.number)
        except SourceError as error:
            self.failed_count += 1
            self._logger.warning(
                "Failed to fetch diff",
                number=pr.number,
                repository=f"{pr.owner}/{pr.repo}",
                kind=error.kind.value,
                error=str(error),
            )
            if self._record_failed_diffs:
                return GitDiffStat()
            return None
        return compute_diff_stats(diff_text, self._logger)

    def _is_processed(self, progress: Sequence[PullRequestModel], pr: PullRequestModel) -> bool:
        return any(
            entry.processed and entry.matches(pr.number, pr.owner, pr.repo)
            for entry in progress
        )
