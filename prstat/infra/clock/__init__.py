from prstat.infra.clock.system import SystemClock

__all__ = ["SystemClock"]
