from typing import Callable, Optional, TextIO

import click

from core.config.settings import Settings
from core.logging import get_logger
from .packets import AlgorithmNodePacket

logger = get_logger(__name__, component="job_queue")

ANALYSIS_COMPLETE_MESSAGE = "Engine.Main(): Analysis Complete."
PRESS_ANY_KEY_MESSAGE = "Engine.Main(): Press any key to continue."


def _wait_for_keypress() -> None:
    click.pause(info="")


class JobAcknowledger:
    """Tells the operator a job has finished.

    Unless ``close-automatically`` is set the calling thread waits for a
    keypress so the log output can be read before the process exits.
    """

    def __init__(
        self,
        settings: Settings,
        output: Optional[TextIO] = None,
        wait: Optional[Callable[[], None]] = None,
    ):
        self._settings = settings
        self._output = output
        self._wait = wait or _wait_for_keypress

    def acknowledge(self, job: AlgorithmNodePacket) -> None:
        logger.info("Job processed", packet_type=job.type.value, algorithm_id=job.algorithm_id)
        click.echo(ANALYSIS_COMPLETE_MESSAGE, file=self._output)

        # Optimization runs close automatically so finished instances don't pile up
        if not self._settings.close_automatically:
            click.echo(PRESS_ANY_KEY_MESSAGE, file=self._output)
            self._wait()
