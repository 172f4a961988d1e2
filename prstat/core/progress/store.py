from dataclasses import replace
from typing import Callable, List, Optional

from prstat.core.ports.clock import Clock
from prstat.core.ports.logger import Logger
from prstat.core.ports.state_store import StateStore
from prstat.core.schema.codec import progress_from_json, progress_to_json
from prstat.core.schema.pr import GitDiffStat, ProgressData, PullRequestModel

DATE_FORMAT = "%Y-%m-%d"


def progress_key(date: str, owner: str, repo: str) -> str:
    return f"{date}-{owner}-{repo}-progress.json"


class ProgressStore:
    """Checkpoint of per-pull-request processing state.

    One checkpoint exists per ``(date, owner, repo)``. Nothing is cached in
    memory; every call goes to the backing store. Failures other than a
    missing checkpoint are logged and re-raised.
    """

    def __init__(
        self,
        state_store: StateStore,
        logger: Logger,
        clock: Clock,
        key_for: Callable[[str, str, str], str] = progress_key,
    ) -> None:
        self._state_store = state_store
        self._logger = logger
        self._clock = clock
        self._key_for = key_for

    def today(self) -> str:
        return self._clock.now().strftime(DATE_FORMAT)

    def load_progress(self, date: str, owner: str, repo: str) -> Optional[ProgressData]:
        key = self._key_for(date, owner, repo)
        try:
            text = self._state_store.read(key)
            if text is None:
                return None
            return progress_from_json(text)
        except Exception as error:
            self._logger.exception("Error loading progress", key=key, error=str(error))
            raise

    def save_progress(
        self,
        progress: ProgressData,
        date: str,
        owner: str,
        repo: str,
    ) -> None:
        key = self._key_for(date, owner, repo)
        try:
            self._state_store.write(key, progress_to_json(progress))
        except Exception as error:
            self._logger.exception("Error saving progress", key=key, error=str(error))
            raise
        self._logger.debug(
            "Progress saved",
            key=key,
            pull_requests=len(progress.pull_requests),
        )

    def init_progress(
        self,
        pull_requests: List[PullRequestModel],
        date: str,
        owner: str,
        repo: str,
    ) -> List[PullRequestModel]:
        existing = self.load_progress(date, owner, repo)
        if existing is not None:
            self._logger.info(
                "Progress file already exists, resuming",
                owner=owner,
                repo=repo,
                date=date,
            )
            return existing.pull_requests

        self._logger.info("Creating progress file", owner=owner, repo=repo, date=date)
        self.save_progress(ProgressData(pull_requests=list(pull_requests)), date, owner, repo)
        return list(pull_requests)

    def update_progress(
        self,
        pull_requests: List[PullRequestModel],
        number: int,
        owner: str,
        repo: str,
        diff: Optional[GitDiffStat],
        processed: bool,
    ) -> List[PullRequestModel]:
        matched = False
        updated: List[PullRequestModel] = []
        for pr in pull_requests:
            if pr.matches(number, owner, repo):
                updated.append(replace(pr, diff=diff, processed=processed))
                matched = True
            else:
                updated.append(pr)

        if not matched:
            self._logger.warning(
                "No pull request in progress matches update",
                number=number,
                owner=owner,
                repo=repo,
            )

        self.save_progress(ProgressData(pull_requests=updated), self.today(), owner, repo)
        return updated
