from dataclasses import dataclass
from urllib.parse import urlparse

from prstat.core.exceptions import InvalidRepositoryError


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_repository_url(url: str) -> RepositoryRef:
    """Parse ``https://github.com/{owner}/{repo}`` into a :class:`RepositoryRef`.

    Extra path segments (``/pulls``, ``/tree/main``) and a trailing ``.git``
    are tolerated.
    """
    parsed = urlparse(str(url).strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRepositoryError("Repository URL must be absolute", str(url))

    parts = [part for part in parsed.path.split("/") if part]
    if len(parts) < 2:
        raise InvalidRepositoryError("Repository URL is missing owner or name", str(url))

    owner, repo = parts[0], parts[1]
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo:
        raise InvalidRepositoryError("Repository URL is missing owner or name", str(url))
    return RepositoryRef(owner=owner, repo=repo)
