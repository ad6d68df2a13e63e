from abc import ABC, abstractmethod
from typing import Dict


class BrokerageFactory(ABC):
    """Abstract base class for brokerage data suppliers.

    A factory declares the brokerage type it serves and produces the
    connection data a live job needs for that brokerage.
    """

    brokerage_type: str = ""
    brokerage_module: str = ""

    @property
    @abstractmethod
    def brokerage_data(self) -> Dict[str, str]:
        """Return brokerage-specific connection data for a live job."""
        pass

    @property
    def qualified_name(self) -> str:
        if not self.brokerage_module:
            return self.brokerage_type
        return f"{self.brokerage_module}.{self.brokerage_type}"

    def matches_type_name(self, type_name: str) -> bool:
        """Match either the short brokerage type or its qualified name."""
        return type_name in (self.brokerage_type, self.qualified_name)
