from .factory import BrokerageFactory
from .paper import PaperBrokerageFactory
from .registry import BrokerageRegistry, create_default_registry
from .zerodha import ZerodhaBrokerageFactory

__all__ = [
    "BrokerageFactory",
    "BrokerageRegistry",
    "PaperBrokerageFactory",
    "ZerodhaBrokerageFactory",
    "create_default_registry",
]
