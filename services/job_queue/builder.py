"""
Builds the next job packet from configuration.

Live mode produces a ``LiveNodePacket``; otherwise a ``BacktestNodePacket`` is
built with the algorithm artifact loaded into it. Locating or reading the
artifact and parsing run parameters are fatal on failure. Resolving brokerage
data is not: the live job is dispatched without it.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from core.config.settings import Settings
from core.logging import get_logger
from core.utils.exceptions import ArtifactReadError
from services.brokerages.registry import BrokerageRegistry
from .locator import AlgorithmLocator
from .packets import (
    AlgorithmNodePacket,
    BacktestNodePacket,
    Controls,
    Language,
    LiveNodePacket,
)
from .parameters import parse_parameters

logger = get_logger(__name__, component="job_queue")


class JobPacketBuilder:
    """Assembles one job packet per ``build()`` call."""

    def __init__(
        self,
        settings: Settings,
        brokerages: BrokerageRegistry,
        locator: Optional[AlgorithmLocator] = None,
    ):
        self._settings = settings
        self._brokerages = brokerages
        self._locator = locator or AlgorithmLocator()
        # Unknown languages fail here rather than when a job is requested
        self._language = Language.parse(settings.algorithm_language)

    @property
    def language(self) -> Language:
        return self._language

    def build(self) -> Tuple[AlgorithmNodePacket, str]:
        """Return the next job packet and the resolved algorithm location."""
        location = self._locator.resolve(self._language, self._settings.algorithm_location)
        logger.info("Selected algorithm", location=location, language=self._language.value)

        parameters = parse_parameters(self._settings.parameters)
        controls = self._build_controls()
        common = self._common_fields(parameters, controls)

        if self._settings.live_mode:
            packet: AlgorithmNodePacket = self._build_live_packet(common)
        else:
            packet = self._build_backtest_packet(common, location)

        logger.info(
            "Built job packet",
            packet_type=packet.type.value,
            algorithm_id=packet.algorithm_id,
            parameter_count=len(parameters),
        )
        return packet, location

    def _build_controls(self) -> Controls:
        settings = self._settings
        return Controls(
            minute_limit=settings.symbol_minute_limit,
            second_limit=settings.symbol_second_limit,
            tick_limit=settings.symbol_tick_limit,
            ram_allocation=settings.ram_allocation,
            maximum_data_points_per_chart_series=settings.maximum_data_points_per_chart_series,
        )

    def _common_fields(self, parameters: Dict[str, str], controls: Controls) -> Dict[str, Any]:
        settings = self._settings
        return {
            "version": settings.version,
            "deploy_id": settings.resolved_algorithm_id,
            "user_id": settings.job_user_id,
            "project_id": settings.job_project_id,
            "organization_id": settings.job_organization_id,
            "language": self._language,
            "algorithm_type_name": settings.algorithm_type_name,
            "channel": settings.api_access_token,
            "user_token": settings.api_access_token,
            "parameters": parameters,
            "controls": controls,
            "history_provider": settings.history_provider,
        }

    def _build_live_packet(self, common: Dict[str, Any]) -> LiveNodePacket:
        brokerage = self._settings.live_mode_brokerage
        return LiveNodePacket(
            **common,
            brokerage=brokerage,
            brokerage_data=self._resolve_brokerage_data(brokerage),
            data_queue_handler=self._settings.data_queue_handler,
            data_channel_provider=self._settings.data_channel_provider,
        )

    def _resolve_brokerage_data(self, brokerage: str) -> Dict[str, str]:
        # Some brokerages need no connection data, so a failed lookup must not block the job
        try:
            factory = self._brokerages.resolve(brokerage)
            return dict(factory.brokerage_data)
        except Exception as e:
            logger.error(
                "Error resolving brokerage data for live job",
                brokerage=brokerage,
                error=str(e),
                error_type=type(e).__name__,
            )
            return {}

    def _build_backtest_packet(self, common: Dict[str, Any], location: str) -> BacktestNodePacket:
        try:
            algorithm = Path(location).read_bytes()
        except OSError as e:
            raise ArtifactReadError(
                f"Unable to read algorithm artifact: {location}",
                path=location,
                details={"error": str(e)},
            ) from e

        return BacktestNodePacket(
            **common,
            backtest_id=common["deploy_id"],
            algorithm=algorithm,
        )
