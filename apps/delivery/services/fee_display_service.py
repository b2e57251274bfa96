from typing import Optional

from django.conf import settings

from apps.common.data_transfer_objects import FeeBreakdown, FeeDisplayMessages
from ..interfaces import FeeDisplayServiceInterface

DEFAULT_CURRENCY_SYMBOL = "₹"


class FeeDisplayService(FeeDisplayServiceInterface):
    def __init__(self, currency_symbol: Optional[str] = None):
        self.currency_symbol = currency_symbol or getattr(
            settings, 'DELIVERY_CURRENCY_SYMBOL', DEFAULT_CURRENCY_SYMBOL
        )

    def get_messages(self, breakdown: FeeBreakdown) -> FeeDisplayMessages:
        symbol = self.currency_symbol

        if breakdown.is_free_delivery:
            display_text = "FREE"
            savings_text = f"You saved {symbol}{breakdown.savings} on delivery!"
        else:
            display_text = f"{symbol}{breakdown.delivery_fee}"
            savings_text = None

        promotion_text = None
        if breakdown.amount_needed_for_free > 0:
            promotion_text = f"Add {symbol}{breakdown.amount_needed_for_free} more for FREE delivery!"

        return FeeDisplayMessages(
            display_text=display_text,
            savings_text=savings_text,
            promotion_text=promotion_text,
        )
