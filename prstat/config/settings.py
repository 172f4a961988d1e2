import os
from dataclasses import dataclass
from typing import Optional

from prstat.core.exceptions import ConfigurationError
from prstat.core.export.csv import CsvHeaderStyle

PR_STATES = ("open", "closed", "all")
LOGGER_BACKENDS = ("console", "logfire")


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: Optional[str]
    pr_state: str


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class JobSettings:
    repos_file: str
    request_delay: float
    record_failed_diffs: bool


@dataclass(frozen=True, slots=True)
class OutputSettings:
    base_dir: str
    export_csv: bool
    csv_header_style: CsvHeaderStyle


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    jobs: JobSettings
    output: OutputSettings


def load_settings() -> Settings:
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))

    pr_state = _env_choice("PRSTAT_PR_STATE", "open", PR_STATES)
    logging_backend = _env_choice("PRSTAT_LOGGER_BACKEND", "console", LOGGER_BACKENDS)
    header_style = _env_choice(
        "PRSTAT_CSV_HEADER_STYLE",
        CsvHeaderStyle.FLAT.value,
        tuple(style.value for style in CsvHeaderStyle),
    )

    return Settings(
        github=GitHubSettings(
            token=_env_or_default("GITHUB_TOKEN"),
            pr_state=pr_state,
        ),
        logging=LoggingSettings(
            backend=logging_backend,
            name=_env_or_default("PRSTAT_LOGGER_NAME", "prstat"),
            logfire_token=_env_or_default("PRSTAT_LOGFIRE_TOKEN"),
        ),
        jobs=JobSettings(
            repos_file=_env_or_default("PRSTAT_REPOS_FILE", "repos.yml"),
            request_delay=_env_float("PRSTAT_REQUEST_DELAY", 0.5),
            record_failed_diffs=_env_bool("PRSTAT_RECORD_FAILED_DIFFS", False),
        ),
        output=OutputSettings(
            base_dir=_env_or_default("PRSTAT_OUTPUT_DIR", "output"),
            export_csv=_env_bool("PRSTAT_EXPORT_CSV", False),
            csv_header_style=CsvHeaderStyle(header_style),
        ),
    )


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = (_env_or_default(name, default) or default).lower()
    if value not in choices:
        raise ConfigurationError(
            f"{name} must be one of {', '.join(choices)}, got {value!r}"
        )
    return value


def _env_float(name: str, default: float) -> float:
    value = _env_or_default(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    value = _env_or_default(name)
    if value is None:
        return default
    return value.strip().upper() in ("TRUE", "1", "YES")
