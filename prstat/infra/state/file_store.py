import os
from pathlib import Path
from typing import Optional

from prstat.core.ports.state_store import StateStore


class FileStateStore(StateStore):
    """Stores each key as a UTF-8 file under ``base_dir``."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        with temp_path.open("w", encoding="utf-8") as handle:
            handle.write(value)
            handle.flush()
            os.fsync(handle.fileno())
        temp_path.replace(path)

    def path_for(self, key: str) -> Path:
        safe_key = key.replace("/", "_")
        return self._base_dir / safe_key
