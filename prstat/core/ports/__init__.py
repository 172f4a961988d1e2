from prstat.core.ports.clock import Clock
from prstat.core.ports.logger import Logger
from prstat.core.ports.pr_source import PRSource
from prstat.core.ports.state_store import StateStore

__all__ = [
    "Logger",
    "PRSource",
    "Clock",
    "StateStore",
]
