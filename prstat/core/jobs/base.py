from abc import ABC, abstractmethod
from typing import final

from prstat.core.exceptions import PrstatError
from prstat.core.ports.clock import Clock
from prstat.core.ports.logger import Logger


class BaseJob(ABC):
    """Runs ``execute_once`` until ``should_continue`` turns false.

    A ``PrstatError`` from one step is logged and the next step runs. Any
    other exception ends the job; ``teardown`` still runs.
    """

    def __init__(self, logger: Logger, clock: Clock) -> None:
        self._logger = logger
        self._clock = clock
        self._running = False
        self.steps = 0

    @final
    def run(self) -> None:
        job_name = self.__class__.__name__
        self._running = True
        self._logger.info("Job starting", job=job_name)
        try:
            self.setup()
            while self._running and self.should_continue():
                self.steps += 1
                try:
                    self.execute_once()
                except PrstatError as error:
                    self.handle_error(error)
        finally:
            try:
                self.teardown()
            finally:
                self._running = False
                self._logger.info("Job stopping", job=job_name, steps=self.steps)

    @abstractmethod
    def setup(self) -> None: ...

    @abstractmethod
    def execute_once(self) -> None: ...

    @abstractmethod
    def teardown(self) -> None: ...

    def handle_error(self, error: PrstatError) -> None:
        self._logger.exception(
            "Job error",
            error=str(error),
            error_type=type(error).__name__,
            job=self.__class__.__name__,
        )

    def should_continue(self) -> bool:
        return True

    def stop(self) -> None:
        self._running = False

    def _sleep(self, seconds: float) -> None:
        self._clock.sleep(seconds)
