"""
Job packets handed to the execution engine.

A job is either a backtest or a live deployment. Both variants share the
``AlgorithmNodePacket`` fields and are told apart by ``type``.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from core.config.settings import (
    DEFAULT_HISTORY_PROVIDER,
    DEFAULT_MAXIMUM_DATA_POINTS_PER_CHART_SERIES,
    DEFAULT_SYMBOL_LIMIT,
    UNBOUNDED_RAM_ALLOCATION,
)
from core.utils.exceptions import UnsupportedLanguageError


class Language(str, Enum):
    CSHARP = "CSharp"
    FSHARP = "FSharp"
    VISUAL_BASIC = "VisualBasic"
    JAVA = "Java"
    PYTHON = "Python"

    @classmethod
    def parse(cls, value: str) -> "Language":
        """Case-insensitive lookup by name, e.g. ``python`` or ``CSHARP``."""
        for language in cls:
            if language.value.lower() == str(value).strip().lower():
                return language
        raise UnsupportedLanguageError(
            f"Unsupported algorithm language: {value!r}",
            language=str(value),
            details={"supported": [language.value for language in cls]},
        )

    @property
    def is_interpreted(self) -> bool:
        return self is Language.PYTHON


class PacketType(str, Enum):
    BACKTEST_NODE = "BacktestNode"
    LIVE_NODE = "LiveNode"


class Controls(BaseModel):
    """Resource ceilings for a single run"""
    model_config = ConfigDict(frozen=True)

    minute_limit: int = Field(default=DEFAULT_SYMBOL_LIMIT, ge=0)
    second_limit: int = Field(default=DEFAULT_SYMBOL_LIMIT, ge=0)
    tick_limit: int = Field(default=DEFAULT_SYMBOL_LIMIT, ge=0)
    ram_allocation: int = Field(default=UNBOUNDED_RAM_ALLOCATION, ge=0)
    maximum_data_points_per_chart_series: int = Field(
        default=DEFAULT_MAXIMUM_DATA_POINTS_PER_CHART_SERIES, ge=0
    )


class AlgorithmNodePacket(BaseModel):
    """Fields common to every job packet"""
    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")

    type: PacketType
    version: str
    deploy_id: str = ""
    user_id: int = 0
    project_id: int = 0
    organization_id: str = ""
    language: Language
    algorithm_type_name: str = ""
    channel: str = ""
    user_token: str = ""
    parameters: Dict[str, str] = Field(default_factory=dict)
    controls: Controls = Field(default_factory=Controls)
    history_provider: str = DEFAULT_HISTORY_PROVIDER

    @property
    def algorithm_id(self) -> str:
        return self.deploy_id


class BacktestNodePacket(AlgorithmNodePacket):
    type: Literal[PacketType.BACKTEST_NODE] = PacketType.BACKTEST_NODE
    backtest_id: str = ""
    algorithm: bytes = b""
    compile_id: str = "local"

    @property
    def algorithm_id(self) -> str:
        return self.backtest_id


class LiveNodePacket(AlgorithmNodePacket):
    type: Literal[PacketType.LIVE_NODE] = PacketType.LIVE_NODE
    brokerage: str
    brokerage_data: Dict[str, str] = Field(default_factory=dict)
    data_queue_handler: str
    data_channel_provider: str


JobPacket = Annotated[Union[BacktestNodePacket, LiveNodePacket], Field(discriminator="type")]

_job_packet_adapter: TypeAdapter = TypeAdapter(JobPacket)


def parse_job_packet(data: Mapping[str, Any]) -> AlgorithmNodePacket:
    """Validate a plain mapping into the packet variant named by its ``type``."""
    return _job_packet_adapter.validate_python(dict(data))
