# Structured exception hierarchy for the local job queue

from typing import Dict, Any, Optional
from datetime import datetime, timezone


class JobQueueException(Exception):
    """Base exception for all job queue specific errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)


class JobConstructionError(JobQueueException):
    """Base class for fatal errors - no job packet is produced"""
    pass


# Algorithm artifact errors
class ArtifactNotFoundError(JobConstructionError):
    """Interpreted algorithm source file is missing at the resolved location"""

    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class ArtifactReadError(JobConstructionError):
    """Algorithm artifact was located but could not be read"""

    def __init__(self, message: str, path: str, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


# Configuration errors
class InvalidParametersError(JobConstructionError):
    """Run parameters are not a flat JSON object of strings"""

    def __init__(self, message: str, raw_parameters: str, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_parameters = raw_parameters


class UnsupportedLanguageError(JobConstructionError):
    """Algorithm language tag outside the supported set"""

    def __init__(self, message: str, language: str, **kwargs):
        super().__init__(message, **kwargs)
        self.language = language


# Brokerage errors
class BrokerageResolutionError(JobQueueException):
    """No brokerage data could be resolved - live jobs continue without it"""

    def __init__(self, message: str, brokerage: str, **kwargs):
        super().__init__(message, **kwargs)
        self.brokerage = brokerage
