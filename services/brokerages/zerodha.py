from typing import Dict

from core.config.settings import Settings
from core.utils.exceptions import BrokerageResolutionError
from .factory import BrokerageFactory


class ZerodhaBrokerageFactory(BrokerageFactory):
    """Zerodha Kite brokerage data from the ``zerodha`` settings section."""

    brokerage_type = "ZerodhaBrokerage"
    brokerage_module = "brokerages.zerodha"

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def brokerage_data(self) -> Dict[str, str]:
        zerodha = self._settings.zerodha
        missing = [
            name for name, value in (
                ("api_key", zerodha.api_key),
                ("access_token", zerodha.access_token),
            ) if not value
        ]
        if missing:
            raise BrokerageResolutionError(
                f"Zerodha credentials not configured: {', '.join(missing)}",
                brokerage=self.brokerage_type,
                details={"missing": missing},
            )

        return {
            "zerodha-api-key": zerodha.api_key,
            "zerodha-access-token": zerodha.access_token,
            "zerodha-trading-segment": zerodha.trading_segment,
            "zerodha-product-type": zerodha.product_type,
        }
