from prstat.core.stats.diff import GIT_METADATA_PREFIXES, compute_diff_stats

__all__ = ["GIT_METADATA_PREFIXES", "compute_diff_stats"]
