import pytest

from core.utils.exceptions import BrokerageResolutionError
from services.brokerages import (
    BrokerageFactory,
    BrokerageRegistry,
    PaperBrokerageFactory,
    ZerodhaBrokerageFactory,
    create_default_registry,
)


class _StaticFactory(BrokerageFactory):
    brokerage_type = "StaticBrokerage"
    brokerage_module = "brokerages.static"

    @property
    def brokerage_data(self):
        return {"endpoint": "wss://example.invalid"}


def test_default_registry_contains_builtin_brokerages(test_settings):
    registry = create_default_registry(test_settings)

    assert registry.brokerage_types() == ["PaperBrokerage", "ZerodhaBrokerage"]
    assert isinstance(registry.resolve("PaperBrokerage"), PaperBrokerageFactory)
    assert isinstance(registry.resolve("ZerodhaBrokerage"), ZerodhaBrokerageFactory)


def test_resolve_matches_qualified_name():
    registry = BrokerageRegistry()
    factory = _StaticFactory()
    registry.register(factory)

    assert registry.resolve("brokerages.static.StaticBrokerage") is factory
    assert "brokerages.static.StaticBrokerage" in registry


def test_unknown_brokerage_raises_resolution_error():
    registry = BrokerageRegistry()
    registry.register(_StaticFactory())

    with pytest.raises(BrokerageResolutionError) as exc_info:
        registry.resolve("UnknownBroker")

    assert exc_info.value.brokerage == "UnknownBroker"
    assert exc_info.value.details["registered"] == ["StaticBrokerage"]
    assert "UnknownBroker" not in registry


def test_duplicate_registration_rejected():
    registry = BrokerageRegistry()
    registry.register(_StaticFactory())

    with pytest.raises(ValueError, match="already registered"):
        registry.register(_StaticFactory())
    assert len(registry) == 1


def test_factory_without_type_rejected():
    class Anonymous(_StaticFactory):
        brokerage_type = ""

    with pytest.raises(ValueError):
        BrokerageRegistry().register(Anonymous())


def test_paper_brokerage_reports_configured_cash(make_settings):
    assert PaperBrokerageFactory(make_settings()).brokerage_data == {}

    settings = make_settings(paper_trading={"starting_cash": 250000.0})
    assert PaperBrokerageFactory(settings).brokerage_data == {"live-cash-balance": "250000.0"}


def test_zerodha_requires_credentials(make_settings):
    factory = ZerodhaBrokerageFactory(make_settings(zerodha={"api_key": "kite-key"}))

    with pytest.raises(BrokerageResolutionError) as exc_info:
        factory.brokerage_data

    assert exc_info.value.details["missing"] == ["access_token"]
