import sys

from prstat.config import Settings, load_settings
from prstat.core.exceptions import ConfigurationError
from prstat.core.export import CsvExporter
from prstat.core.jobs import PullRequestStatsJob
from prstat.core.ports.logger import Logger
from prstat.core.progress import ProgressStore
from prstat.infra import (
    ConsoleLogger,
    FileStateStore,
    GitHubClient,
    GitHubPRSource,
    LogfireLogger,
    SystemClock,
    configure_logfire,
    load_repositories,
)


def main() -> int:
    try:
        settings = load_settings()
        logger = _build_logger(settings)
    except ConfigurationError as error:
        print(f'prstat: {error.message}', file=sys.stderr)
        return 1

    try:
        repositories = load_repositories(settings.jobs.repos_file)
    except ConfigurationError as error:
        logger.error('Invalid repository list', error=error.message)
        return 1

    clock = SystemClock()
    state_store = FileStateStore(settings.output.base_dir)
    progress_store = ProgressStore(state_store, logger, clock)
    exporter = None
    if settings.output.export_csv:
        exporter = CsvExporter(
            state_store,
            logger,
            header_style=settings.output.csv_header_style,
        )

    with GitHubClient(settings.github.token) as github_client:
        pr_source = GitHubPRSource(github_client, pr_state=settings.github.pr_state)
        job = PullRequestStatsJob(
            logger=logger,
            clock=clock,
            pr_source=pr_source,
            progress_store=progress_store,
            repositories=repositories,
            request_delay=settings.jobs.request_delay,
            exporter=exporter,
            record_failed_diffs=settings.jobs.record_failed_diffs,
        )
        try:
            job.run()
        except KeyboardInterrupt:
            logger.info('Shutdown requested')
            job.stop()
            return 130
    return 0


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but PRSTAT_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')


if __name__ == '__main__':
    sys.exit(main())
