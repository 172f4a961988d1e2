from prstat.infra.state.file_store import FileStateStore

__all__ = ["FileStateStore"]
