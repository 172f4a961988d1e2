"""JSON encoding of checkpoint files.

The wire format keeps the camelCase keys used by earlier checkpoint files
(``pullRequests``, ``addedLines``...) so existing progress files stay
readable.
"""
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from prstat.core.schema.pr import (
    GitDiffStat,
    GitHubUser,
    ProgressData,
    PullRequestModel,
)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render ``value`` as ISO 8601, with a ``Z`` suffix for aware values.

    Whole-second UTC values come out in GitHub's ``YYYY-MM-DDTHH:MM:SSZ`` form;
    fractional seconds are kept. Naive values are written without an offset
    and read back naive.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.isoformat()
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def diff_to_dict(diff: Optional[GitDiffStat]) -> Optional[Dict[str, int]]:
    if diff is None:
        return None
    return {
        "addedLines": diff.added_lines,
        "deletedLines": diff.deleted_lines,
        "totalLines": diff.total_lines,
    }


def diff_from_dict(data: Optional[Dict[str, Any]]) -> Optional[GitDiffStat]:
    if data is None:
        return None
    return GitDiffStat(
        added_lines=int(data["addedLines"]),
        deleted_lines=int(data["deletedLines"]),
        total_lines=int(data["totalLines"]),
    )


def pull_request_to_dict(pr: PullRequestModel) -> Dict[str, Any]:
    return {
        "id": pr.id,
        "number": pr.number,
        "owner": pr.owner,
        "repo": pr.repo,
        "title": pr.title,
        "created_at": format_timestamp(pr.created_at),
        "merged_at": format_timestamp(pr.merged_at),
        "user": {
            "login": pr.user.login,
            "id": pr.user.id,
            "avatar_url": pr.user.avatar_url,
            "html_url": pr.user.html_url,
            "type": pr.user.type,
        },
        "html_url": pr.html_url,
        "diff": diff_to_dict(pr.diff),
        "processed": pr.processed,
    }


def pull_request_from_dict(data: Dict[str, Any]) -> PullRequestModel:
    user = data.get("user") or {}
    return PullRequestModel(
        id=data["id"],
        number=data["number"],
        owner=data["owner"],
        repo=data["repo"],
        title=data.get("title") or "",
        created_at=parse_timestamp(data["created_at"]),
        merged_at=parse_timestamp(data.get("merged_at")),
        user=GitHubUser(
            login=user.get("login", ""),
            id=user.get("id", 0),
            avatar_url=user.get("avatar_url", ""),
            html_url=user.get("html_url", ""),
            type=user.get("type", "User"),
        ),
        html_url=data.get("html_url", ""),
        diff=diff_from_dict(data.get("diff")),
        processed=bool(data.get("processed", False)),
    )


def progress_to_json(progress: ProgressData) -> str:
    body = {
        "pullRequests": [
            pull_request_to_dict(pr) for pr in progress.pull_requests
        ]
    }
    return json.dumps(body, indent=2, ensure_ascii=False)


def progress_from_json(text: str) -> ProgressData:
    body = json.loads(text)
    return ProgressData(
        pull_requests=[
            pull_request_from_dict(item) for item in body.get("pullRequests", [])
        ]
    )
