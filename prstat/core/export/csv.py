from enum import Enum
from typing import List, Sequence

from prstat.core.ports.logger import Logger
from prstat.core.ports.state_store import StateStore
from prstat.core.schema.codec import format_timestamp
from prstat.core.schema.pr import PullRequestModel


class CsvHeaderStyle(Enum):
    FLAT = "flat"
    NESTED = "nested"


_BASE_COLUMNS = (
    "id",
    "number",
    "title",
    "created_at",
    "merged_at",
    "authorName",
    "avatar_url",
    "url",
)
_DIFF_COLUMNS = ("addedLines", "deletedLines", "totalLines")


def csv_header(header_style: CsvHeaderStyle = CsvHeaderStyle.FLAT) -> str:
    if header_style is CsvHeaderStyle.NESTED:
        diff_columns = tuple(f"diff.{column}" for column in _DIFF_COLUMNS)
    else:
        diff_columns = _DIFF_COLUMNS
    return ",".join(_BASE_COLUMNS + diff_columns)


def _quote(value: str) -> str:
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def _row(pr: PullRequestModel) -> str:
    diff = pr.diff
    if diff is not None:
        diff_values = [str(diff.added_lines), str(diff.deleted_lines), str(diff.total_lines)]
    else:
        diff_values = ["", "", ""]
    values = [
        str(pr.id),
        str(pr.number),
        _quote(pr.title),
        format_timestamp(pr.created_at) or "",
        format_timestamp(pr.merged_at) or "",
        f'"{pr.user.login}"',
        pr.user.avatar_url,
        pr.html_url,
        *diff_values,
    ]
    return ",".join(values)


def pull_requests_to_csv(
    pull_requests: Sequence[PullRequestModel],
    header_style: CsvHeaderStyle = CsvHeaderStyle.FLAT,
) -> str:
    """Render pull requests as CSV text.

    Only the title and author login are quoted. An empty input renders as an
    empty string, without a header.
    """
    if not pull_requests:
        return ""
    lines: List[str] = [csv_header(header_style)]
    lines.extend(_row(pr) for pr in pull_requests)
    return "\n".join(lines)


def csv_key(date: str, owner: str, repo: str) -> str:
    return f"{date}-{owner}-{repo}-pull-requests.csv"


class CsvExporter:
    def __init__(
        self,
        state_store: StateStore,
        logger: Logger,
        header_style: CsvHeaderStyle = CsvHeaderStyle.FLAT,
    ) -> None:
        self._state_store = state_store
        self._logger = logger
        self._header_style = header_style

    def export(
        self,
        pull_requests: Sequence[PullRequestModel],
        date: str,
        owner: str,
        repo: str,
    ) -> None:
        if not pull_requests:
            self._logger.info("Nothing to export", owner=owner, repo=repo)
            return
        key = csv_key(date, owner, repo)
        self._state_store.write(key, pull_requests_to_csv(pull_requests, self._header_style))
        self._logger.info("Exported CSV", key=key, rows=len(pull_requests))
