from pathlib import Path
from typing import List

import yaml

from prstat.core.exceptions import ConfigurationError
from prstat.core.schema.repository import RepositoryRef, parse_repository_url


def load_repositories(path: str | Path) -> List[RepositoryRef]:
    """Read a ``repositories:`` list of GitHub URLs from a YAML file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise ConfigurationError(f"Repository list not found: {path}") from error

    try:
        document = yaml.safe_load(text) or {}
    except yaml.YAMLError as error:
        raise ConfigurationError(f"Repository list is not valid YAML: {path}") from error

    if not isinstance(document, dict):
        raise ConfigurationError(f"Repository list must be a mapping: {path}")
    urls = document.get("repositories")
    if not isinstance(urls, list):
        raise ConfigurationError(f"'repositories' must be a list in {path}")

    return [parse_repository_url(url) for url in urls]
