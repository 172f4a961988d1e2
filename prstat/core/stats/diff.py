import re
from typing import Optional

from prstat.core.ports.logger import Logger
from prstat.core.schema.pr import GitDiffStat

GIT_METADATA_PREFIXES = (
    "diff --git",
    "index ",
    "--- ",
    "+++ ",
    "@@ ",
)
_LINE_SPLIT_PATTERN = re.compile(r"\r?\n")


def compute_diff_stats(diff_text: str, logger: Optional[Logger] = None) -> GitDiffStat:
    """Count added and deleted lines in a unified diff.

    File headers (``--- a/x``, ``+++ b/x``), hunk headers and the other git
    metadata lines are skipped before the ``+``/``-`` classification. Leading
    whitespace is ignored. Any failure yields an all-zero stat.
    """
    try:
        if not diff_text:
            return GitDiffStat()

        added = 0
        deleted = 0
        for line in _LINE_SPLIT_PATTERN.split(diff_text):
            stripped = line.lstrip()
            if stripped.startswith(GIT_METADATA_PREFIXES):
                continue
            if stripped.startswith("+"):
                added += 1
            elif stripped.startswith("-"):
                deleted += 1

        return GitDiffStat(
            added_lines=added,
            deleted_lines=deleted,
            total_lines=added + deleted,
        )
    except Exception as error:  # noqa: BLE001
        if logger is not None:
            logger.error("Error parsing diff", error=str(error))
        return GitDiffStat()
