from prstat.core.exceptions.errors import (
    ConfigurationError,
    DiffTooLargeError,
    FetchErrorKind,
    InvalidRepositoryError,
    PrstatError,
    SourceError,
    SourceNetworkError,
    SourceNotFoundError,
    SourceRateLimitError,
)

__all__ = [
    "PrstatError",
    "ConfigurationError",
    "InvalidRepositoryError",
    "FetchErrorKind",
    "SourceError",
    "SourceNetworkError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "DiffTooLargeError",
]
