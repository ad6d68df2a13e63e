from typing import Dict

from core.config.settings import PAPER_BROKERAGE_TYPE_NAME, Settings
from .factory import BrokerageFactory


class PaperBrokerageFactory(BrokerageFactory):
    """Simulated brokerage; needs no connection data beyond an optional cash balance."""

    brokerage_type = PAPER_BROKERAGE_TYPE_NAME
    brokerage_module = "brokerages.paper"

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def brokerage_data(self) -> Dict[str, str]:
        starting_cash = self._settings.paper_trading.starting_cash
        if starting_cash is None:
            return {}
        return {"live-cash-balance": str(starting_cash)}
