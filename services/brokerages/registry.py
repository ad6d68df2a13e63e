from typing import Dict, List

from core.config.settings import Settings
from core.logging import get_logger
from core.utils.exceptions import BrokerageResolutionError
from .factory import BrokerageFactory
from .paper import PaperBrokerageFactory
from .zerodha import ZerodhaBrokerageFactory

logger = get_logger(__name__, component="brokerages")


class BrokerageRegistry:
    """Brokerage factories keyed by brokerage type name.

    Populated once at startup and queried read-only while jobs are built.
    """

    def __init__(self):
        self._factories: Dict[str, BrokerageFactory] = {}

    def register(self, factory: BrokerageFactory) -> None:
        """Register a factory under its brokerage type name."""
        name = factory.brokerage_type
        if not name:
            raise ValueError(f"{type(factory).__name__} does not declare a brokerage type")
        if name in self._factories:
            raise ValueError(f"Brokerage already registered: {name}")
        self._factories[name] = factory
        logger.debug("Registered brokerage factory", brokerage=name)

    def resolve(self, type_name: str) -> BrokerageFactory:
        """Find the factory whose declared brokerage type matches ``type_name``."""
        factory = self._factories.get(type_name)
        if factory is not None:
            return factory

        # Fall back to qualified names, e.g. "brokerages.zerodha.ZerodhaBrokerage"
        for factory in self._factories.values():
            if factory.matches_type_name(type_name):
                return factory

        raise BrokerageResolutionError(
            f"No brokerage factory registered for type: {type_name}",
            brokerage=type_name,
            details={"registered": self.brokerage_types()},
        )

    def brokerage_types(self) -> List[str]:
        return list(self._factories.keys())

    def __contains__(self, type_name: str) -> bool:
        try:
            self.resolve(type_name)
        except BrokerageResolutionError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._factories)


def create_default_registry(settings: Settings) -> BrokerageRegistry:
    """Registry holding the built-in paper and Zerodha brokerages."""
    registry = BrokerageRegistry()
    registry.register(PaperBrokerageFactory(settings))
    registry.register(ZerodhaBrokerageFactory(settings))
    return registry
