from prstat.infra.logging.console import ConsoleLogger
from prstat.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
