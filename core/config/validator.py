"""
Configuration validation at startup.

Checks the job configuration before a job is requested, providing clear
messages for settings that would make job construction fail or degrade.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List

from .settings import Settings

if TYPE_CHECKING:
    from services.brokerages.registry import BrokerageRegistry

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


@dataclass
class ValidationResult:
    """Result of a configuration validation check"""
    is_valid: bool
    component: str
    message: str
    severity: str = "error"  # "error", "warning", "info"


class ConfigurationValidator:
    """Validates job configuration against the brokerages available on this node."""

    def __init__(self, settings: Settings, brokerages: "BrokerageRegistry"):
        self.settings = settings
        self.brokerages = brokerages
        self.validation_results: List[ValidationResult] = []

    def validate_all(self) -> bool:
        """
        Run all validation checks.

        Returns:
            bool: True if no check reported an error
        """
        self.validation_results = []
        self._validate_algorithm()
        self._validate_parameters()
        self._validate_live_settings()
        self._validate_logging_settings()

        errors = [r for r in self.validation_results if r.severity == "error"]
        warnings = [r for r in self.validation_results if r.severity == "warning"]

        for result in errors:
            logger.error(f"ERROR [{result.component}]: {result.message}")
        for result in warnings:
            logger.warning(f"WARNING [{result.component}]: {result.message}")

        if not errors:
            logger.info(f"Configuration validation passed with {len(warnings)} warnings")
        return len(errors) == 0

    def _add(self, is_valid: bool, component: str, message: str, severity: str) -> None:
        self.validation_results.append(ValidationResult(
            is_valid=is_valid, component=component, message=message, severity=severity
        ))

    def _validate_algorithm(self):
        # Imported here to keep the config package free of service imports at load time
        from core.utils.exceptions import UnsupportedLanguageError
        from services.job_queue.locator import DEFAULT_ALGORITHM_LOCATION
        from services.job_queue.packets import Language

        try:
            language = Language.parse(self.settings.algorithm_language)
        except UnsupportedLanguageError as e:
            self._add(False, "Algorithm", e.message, "error")
            return

        location = self.settings.algorithm_location or DEFAULT_ALGORITHM_LOCATION
        if not Path(location).is_file():
            if language.is_interpreted:
                self._add(False, "Algorithm", f"Python algorithm not found: {location}", "error")
            elif not self.settings.live_mode:
                self._add(False, "Algorithm", f"Algorithm artifact not found: {location}", "error")
            else:
                self._add(True, "Algorithm", f"Algorithm artifact not on this node: {location}", "info")

        if not self.settings.resolved_algorithm_id:
            self._add(
                True, "Algorithm",
                "Neither algorithm-id nor algorithm-type-name is set; job id will be empty",
                "warning",
            )

    def _validate_parameters(self):
        from core.utils.exceptions import InvalidParametersError
        from services.job_queue.parameters import parse_parameters

        try:
            parse_parameters(self.settings.parameters)
        except InvalidParametersError as e:
            self._add(False, "Parameters", e.message, "error")

    def _validate_live_settings(self):
        if not self.settings.live_mode:
            return

        from core.utils.exceptions import BrokerageResolutionError

        brokerage = self.settings.live_mode_brokerage
        try:
            factory = self.brokerages.resolve(brokerage)
        except BrokerageResolutionError:
            self._add(
                True, "Brokerage",
                f"No brokerage registered for '{brokerage}'; live job will have no brokerage data. "
                f"Registered: {self.brokerages.brokerage_types()}",
                "warning",
            )
        else:
            try:
                factory.brokerage_data
            except Exception as e:
                self._add(
                    True, "Brokerage",
                    f"Brokerage data for '{brokerage}' unavailable: {e}",
                    "warning",
                )
        if not self.settings.api_access_token:
            self._add(True, "Environment", "api-access-token is empty for a live job", "warning")

    def _validate_logging_settings(self):
        level = self.settings.logging.level.upper()
        if level not in _LOG_LEVELS:
            self._add(False, "Logging", f"Invalid log level: {self.settings.logging.level}", "error")
