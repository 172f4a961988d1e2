from datetime import datetime
from enum import Enum
from typing import Optional


class FetchErrorKind(Enum):
    NETWORK = "network"
    NOT_FOUND = "notFound"
    RATE_LIMIT_EXCEEDED = "rateLimitExceeded"
    DIFF_TOO_LARGE = "diffTooLarge"
    UNKNOWN = "unknown"


class PrstatError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PrstatError):
    pass


class InvalidRepositoryError(ConfigurationError):
    def __init__(self, message: str, url: str) -> None:
        self.url = url
        super().__init__(f"{message}: {url}")


class SourceError(PrstatError):
    kind = FetchErrorKind.UNKNOWN


class SourceNetworkError(SourceError):
    kind = FetchErrorKind.NETWORK

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)


class SourceRateLimitError(SourceError):
    kind = FetchErrorKind.RATE_LIMIT_EXCEEDED

    def __init__(self, message: str, retry_after: Optional[datetime] = None) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    kind = FetchErrorKind.NOT_FOUND

    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class DiffTooLargeError(SourceError):
    kind = FetchErrorKind.DIFF_TOO_LARGE

    def __init__(self, message: str, pr_number: int) -> None:
        self.pr_number = pr_number
        super().__init__(message)
