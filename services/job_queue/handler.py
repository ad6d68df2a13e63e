from typing import Any, Optional, Tuple

from core.config.settings import Settings
from core.logging import get_logger
from services.brokerages.registry import BrokerageRegistry
from .acknowledgment import JobAcknowledger
from .builder import JobPacketBuilder
from .locator import AlgorithmLocator
from .packets import AlgorithmNodePacket

logger = get_logger(__name__, component="job_queue")


class JobQueue:
    """Local job queue: serves jobs described by configuration on this node."""

    def __init__(
        self,
        settings: Settings,
        brokerages: BrokerageRegistry,
        locator: Optional[AlgorithmLocator] = None,
        acknowledger: Optional[JobAcknowledger] = None,
    ):
        self._settings = settings
        self._builder = JobPacketBuilder(settings, brokerages, locator)
        self._acknowledger = acknowledger or JobAcknowledger(settings)

    def initialize(self, api: Any = None) -> None:
        """Nothing to set up for local jobs; the API client is unused."""
        logger.debug("Local job queue initialized", live_mode=self._settings.live_mode)

    def next_job(self) -> Tuple[AlgorithmNodePacket, str]:
        """Build the job for this run. Returns the packet and the algorithm location."""
        return self._builder.build()

    def acknowledge_job(self, job: AlgorithmNodePacket) -> None:
        """Call once after the engine has finished processing ``job``."""
        self._acknowledger.acknowledge(job)
