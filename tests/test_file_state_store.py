import pytest

from prstat.infra.state.file_store import FileStateStore


class TestFileStateStore:
    def test_read_missing_key_returns_none(self, tmp_path) -> None:
        store = FileStateStore(tmp_path)

        assert store.read("2024-01-01-owner-repo-progress.json") is None

    def test_write_then_read(self, tmp_path) -> None:
        store = FileStateStore(tmp_path)

        store.write("progress.json", '{"pullRequests": []}')

        assert store.read("progress.json") == '{"pullRequests": []}'
        assert (tmp_path / "progress.json").read_text(encoding="utf-8") == '{"pullRequests": []}'

    def test_write_creates_missing_directory(self, tmp_path) -> None:
        base_dir = tmp_path / "output" / "nested"
        store = FileStateStore(base_dir)

        store.write("key.json", "{}")

        assert (base_dir / "key.json").exists()

    def test_write_overwrites_and_leaves_no_temp_file(self, tmp_path) -> None:
        store = FileStateStore(tmp_path)
        store.write("key.json", "first")

        store.write("key.json", "second")

        assert store.read("key.json") == "second"
        assert sorted(path.name for path in tmp_path.iterdir()) == ["key.json"]

    def test_utf8_content(self, tmp_path) -> None:
        store = FileStateStore(tmp_path)

        store.write("key.json", "プルリクエスト")

        assert store.read("key.json") == "プルリクエスト"

    def test_slashes_in_key_are_flattened(self, tmp_path) -> None:
        store = FileStateStore(tmp_path)

        store.write("owner/repo.json", "{}")

        assert store.path_for("owner/repo.json") == tmp_path / "owner_repo.json"
        assert (tmp_path / "owner_repo.json").exists()

    def test_other_read_errors_propagate(self, tmp_path) -> None:
        store = FileStateStore(tmp_path)
        (tmp_path / "key.json").mkdir()

        with pytest.raises(OSError):
            store.read("key.json")
