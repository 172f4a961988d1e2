from prstat.core.progress.store import ProgressStore, progress_key

__all__ = ["ProgressStore", "progress_key"]
