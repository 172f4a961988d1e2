import pytest

from prstat.core.exceptions import ConfigurationError, InvalidRepositoryError
from prstat.core.schema.repository import RepositoryRef, parse_repository_url
from prstat.infra.repositories.yaml_file import load_repositories


class TestParseRepositoryUrl:
    def test_plain_url(self) -> None:
        assert parse_repository_url("https://github.com/octo/hello") == RepositoryRef("octo", "hello")

    def test_trailing_segments_and_git_suffix(self) -> None:
        assert parse_repository_url("https://github.com/octo/hello/pulls") == RepositoryRef("octo", "hello")
        assert parse_repository_url("https://github.com/octo/hello.git") == RepositoryRef("octo", "hello")
        assert parse_repository_url(" https://github.com/octo/hello/ ") == RepositoryRef("octo", "hello")

    def test_full_name(self) -> None:
        assert RepositoryRef("octo", "hello").full_name == "octo/hello"

    @pytest.mark.parametrize(
        "url",
        [
            "octo/hello",
            "https://github.com/octo",
            "https://github.com/",
            "ftp://github.com/octo/hello",
        ],
    )
    def test_rejects_incomplete_urls(self, url: str) -> None:
        with pytest.raises(InvalidRepositoryError) as excinfo:
            parse_repository_url(url)

        assert excinfo.value.url == url


class TestLoadRepositories:
    def test_reads_repository_list(self, tmp_path) -> None:
        path = tmp_path / "repos.yml"
        path.write_text(
            "repositories:\n"
            "  - https://github.com/octo/hello\n"
            "  - https://github.com/octo/world\n",
            encoding="utf-8",
        )

        assert load_repositories(path) == [
            RepositoryRef("octo", "hello"),
            RepositoryRef("octo", "world"),
        ]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            load_repositories(tmp_path / "missing.yml")

    def test_missing_repositories_key(self, tmp_path) -> None:
        path = tmp_path / "repos.yml"
        path.write_text("projects: []\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_repositories(path)

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "repos.yml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_repositories(path)

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "repos.yml"
        path.write_text("repositories: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_repositories(path)

    def test_invalid_url_in_list(self, tmp_path) -> None:
        path = tmp_path / "repos.yml"
        path.write_text("repositories:\n  - not-a-url\n", encoding="utf-8")

        with pytest.raises(InvalidRepositoryError):
            load_repositories(path)
