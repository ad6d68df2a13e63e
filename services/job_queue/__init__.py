from .acknowledgment import JobAcknowledger
from .builder import JobPacketBuilder
from .locator import DEFAULT_ALGORITHM_LOCATION, AlgorithmLocator
from .packets import (
    AlgorithmNodePacket,
    BacktestNodePacket,
    Controls,
    JobPacket,
    Language,
    LiveNodePacket,
    PacketType,
    parse_job_packet,
)
from .parameters import parse_parameters
from .python_paths import PythonPathRegistry, python_paths
from .handler import JobQueue

__all__ = [
    "AlgorithmLocator",
    "AlgorithmNodePacket",
    "BacktestNodePacket",
    "Controls",
    "DEFAULT_ALGORITHM_LOCATION",
    "JobAcknowledger",
    "JobPacket",
    "JobPacketBuilder",
    "JobQueue",
    "Language",
    "LiveNodePacket",
    "PacketType",
    "PythonPathRegistry",
    "parse_job_packet",
    "parse_parameters",
    "python_paths",
]
