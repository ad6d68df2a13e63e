# Job queue settings, resolved from init kwargs, environment, .env and config.json
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


PAPER_BROKERAGE_TYPE_NAME = "PaperBrokerage"
DEFAULT_HISTORY_PROVIDER = "SubscriptionDataReaderHistoryProvider"
DEFAULT_DATA_QUEUE_HANDLER = "LiveDataQueue"
DEFAULT_DATA_CHANNEL_PROVIDER = "DataChannelProvider"
DEFAULT_SYMBOL_LIMIT = 10000
DEFAULT_MAXIMUM_DATA_POINTS_PER_CHART_SERIES = 4000
UNBOUNDED_RAM_ALLOCATION = sys.maxsize


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class PaperTradingSettings(BaseModel):
    # Reported to the paper brokerage as its live cash balance when set
    starting_cash: float | None = None


class ZerodhaSettings(BaseModel):
    api_key: str = ""
    access_token: str = ""
    trading_segment: str = "EQUITY"  # EQUITY|COMMODITY
    product_type: str = "MIS"  # MIS|CNC|NRML


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    console_enabled: bool = True


class HyphenatedKeysSource(PydanticBaseSettingsSource):
    """Maps config-file style keys (``live-mode``) onto field names (``live_mode``)."""

    def __init__(self, settings_cls: type[BaseSettings], source: PydanticBaseSettingsSource):
        super().__init__(settings_cls)
        self._source = source

    def get_field_value(self, field: FieldInfo, field_name: str) -> Tuple[Any, str, bool]:
        # Values come from the wrapped source in __call__
        return None, field_name, False

    def __call__(self) -> Dict[str, Any]:
        return {key.replace("-", "_"): value for key, value in self._source().items()}


class Settings(BaseSettings):
    """Local job queue settings.

    Job keys can be given by their hyphenated name (``live-mode``) in init
    kwargs and config.json, by field name (``live_mode``), or as environment
    variables (``LIVE_MODE``). Nested sections use ``__`` in environment
    variables, e.g. ``ZERODHA__API_KEY``.

    Precedence: init kwargs, environment, .env, config.json, secrets.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Passed to the JSON source directly; the key wrapper hides it from model_config checks
    config_file: ClassVar[str] = "config.json"

    app_name: str = "Local Job Queue"
    version: str = "1.0.0"
    environment: Environment = Environment.DEVELOPMENT

    # Job selection
    live_mode: bool = False
    close_automatically: bool = False

    # Identity
    api_access_token: str = ""
    job_organization_id: str = ""
    job_user_id: int = 0
    job_project_id: int = 0
    algorithm_id: str = Field(default="", description="Defaults to algorithm_type_name")

    # Algorithm artifact
    algorithm_type_name: str = ""
    algorithm_language: str = "CSharp"
    algorithm_location: str = ""
    parameters: str = Field(default="", description="Flat JSON object of string run parameters")

    # Resource controls
    symbol_minute_limit: int = Field(default=DEFAULT_SYMBOL_LIMIT, ge=0)
    symbol_second_limit: int = Field(default=DEFAULT_SYMBOL_LIMIT, ge=0)
    symbol_tick_limit: int = Field(default=DEFAULT_SYMBOL_LIMIT, ge=0)
    maximum_ram_allocation: Optional[int] = Field(
        default=None, ge=0, description="Memory ceiling; unbounded when unset"
    )
    maximum_data_points_per_chart_series: int = Field(
        default=DEFAULT_MAXIMUM_DATA_POINTS_PER_CHART_SERIES, ge=0
    )

    # Live handlers
    live_mode_brokerage: str = PAPER_BROKERAGE_TYPE_NAME
    history_provider: str = DEFAULT_HISTORY_PROVIDER
    data_queue_handler: str = DEFAULT_DATA_QUEUE_HANDLER
    data_channel_provider: str = DEFAULT_DATA_CHANNEL_PROVIDER

    logging: LoggingSettings = LoggingSettings()
    paper_trading: PaperTradingSettings = PaperTradingSettings()
    zerodha: ZerodhaSettings = ZerodhaSettings()

    @field_validator("parameters", mode="before")
    @classmethod
    def serialize_parameters(cls, v: Union[str, dict, None]) -> Any:
        """Keep the raw text; a parameters object from config.json is re-serialized."""
        if v is None:
            return ""
        if isinstance(v, dict):
            return json.dumps(v)
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            HyphenatedKeysSource(settings_cls, init_settings),
            env_settings,
            dotenv_settings,
            HyphenatedKeysSource(
                settings_cls, JsonConfigSettingsSource(settings_cls, json_file=cls.config_file)
            ),
            file_secret_settings,
        )

    @property
    def resolved_algorithm_id(self) -> str:
        """Explicit algorithm id, falling back to the algorithm type name."""
        return self.algorithm_id or self.algorithm_type_name

    @property
    def ram_allocation(self) -> int:
        if self.maximum_ram_allocation is None:
            return UNBOUNDED_RAM_ALLOCATION
        return self.maximum_ram_allocation


def load_settings(config_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings, reading job keys from ``config_file`` instead of ./config.json."""
    if config_file is None:
        return Settings()

    path = str(config_file)

    class FileSettings(Settings):
        config_file: ClassVar[str] = path

    return FileSettings()


# No global settings instance - use dependency injection instead
