from prstat.config.settings import (
    GitHubSettings,
    JobSettings,
    LoggingSettings,
    OutputSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LoggingSettings',
    'JobSettings',
    'OutputSettings',
    'load_settings',
]
