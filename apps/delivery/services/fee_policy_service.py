import logging
from decimal import Decimal
from typing import Optional

from apps.common.data_transfer_objects import (
    Policy,
    FeeBreakdown,
    EarningsBreakdown,
    DeliveryMode,
)
from ..interfaces import FeePolicyServiceInterface
from ..exceptions import InvalidAmount
from ..money import ZERO, parse_amount, to_money

logger = logging.getLogger(__name__)


class FeePolicyEngine(FeePolicyServiceInterface):
    """
    Delivery fee and partner earnings calculator.

    Orders at or above the free threshold ship free and the platform pays the
    partner a fixed amount; below it the customer pays the standard fee and the
    partner gets a share of it.
    """

    def __init__(self, policy: Optional[Policy] = None):
        self.policy = policy or Policy()

    def is_free_delivery(self, order_amount: Decimal) -> bool:
        """Threshold is inclusive. Used by every calculation so they classify alike."""
        return order_amount >= self.policy.free_threshold

    def compute_customer_fee(self, order_amount) -> FeeBreakdown:
        amount = self._validated(order_amount, "order_amount")
        policy = self.policy

        is_free = self.is_free_delivery(amount)
        delivery_fee = ZERO if is_free else policy.standard_fee
        savings = policy.standard_fee if is_free else ZERO
        amount_needed = ZERO if is_free else max(ZERO, policy.free_threshold - amount)

        breakdown = FeeBreakdown(
            order_amount=to_money(amount),
            delivery_fee=to_money(delivery_fee),
            total_amount=to_money(amount + delivery_fee),
            is_free_delivery=is_free,
            savings=to_money(savings),
            amount_needed_for_free=to_money(amount_needed),
        )
        logger.debug(f"Customer fee for {amount}: {breakdown}")
        return breakdown

    def compute_partner_earnings(self, order_amount, bonus=None) -> EarningsBreakdown:
        amount = self._validated(order_amount, "order_amount")
        bonuses = ZERO if bonus is None else self._validated(bonus, "bonus")
        policy = self.policy

        if self.is_free_delivery(amount):
            mode = DeliveryMode.FREE_DELIVERY
            base_earnings = policy.partner_earnings_when_free
            customer_paid = ZERO
            platform_paid = policy.partner_earnings_when_free
            platform_revenue = -policy.partner_earnings_when_free
        else:
            mode = DeliveryMode.PAID_DELIVERY
            base_earnings = policy.partner_earnings_when_paid
            customer_paid = policy.standard_fee
            platform_paid = ZERO
            platform_revenue = policy.standard_fee - policy.partner_earnings_when_paid

        earnings = EarningsBreakdown(
            order_amount=to_money(amount),
            delivery_mode=mode,
            base_earnings=to_money(base_earnings),
            total_bonuses=to_money(bonuses),
            total_earnings=to_money(base_earnings + bonuses),
            customer_paid=to_money(customer_paid),
            platform_paid_to_partner=to_money(platform_paid),
            platform_revenue=to_money(platform_revenue),
        )
        logger.debug(f"Partner earnings for {amount} (bonus {bonuses}): {earnings}")
        return earnings

    def get_policy(self) -> Policy:
        return self.policy

    def _validated(self, value, field: str) -> Decimal:
        try:
            return parse_amount(value, field)
        except InvalidAmount as e:
            logger.warning(f"Rejected {field}: {e.message}")
            raise
