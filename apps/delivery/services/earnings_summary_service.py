import logging
from decimal import Decimal
from typing import Iterable, Optional

from apps.common.data_transfer_objects import (
    BonusPolicy,
    DeliveryEarnings,
    DeliveryInput,
    DeliveryMode,
    EarningsSummary,
)
from ..interfaces import EarningsSummaryServiceInterface, FeePolicyServiceInterface
from ..money import ZERO, to_money

logger = logging.getLogger(__name__)


class EarningsSummaryService(EarningsSummaryServiceInterface):
    def __init__(
        self,
        fee_policy_service: FeePolicyServiceInterface,
        bonus_policy: Optional[BonusPolicy] = None
    ):
        self.fee_policy_service = fee_policy_service
        self.bonus_policy = bonus_policy or BonusPolicy()

    def get_daily_target_bonus(self, delivery_count: int) -> Decimal:
        """Flat bonus once the partner reaches the daily delivery target"""
        if delivery_count >= self.bonus_policy.daily_target_threshold:
            return to_money(self.bonus_policy.daily_target_bonus)
        return ZERO

    def summarize(self, deliveries: Iterable[DeliveryInput]) -> EarningsSummary:
        # Computed up front so one invalid delivery fails the whole batch
        breakdowns = [
            DeliveryEarnings(
                order_id=delivery.order_id,
                earnings=self.fee_policy_service.compute_partner_earnings(
                    delivery.order_amount, delivery.bonus
                ),
            )
            for delivery in deliveries
        ]

        total_deliveries = len(breakdowns)
        free_deliveries = sum(
            1 for item in breakdowns
            if item.earnings.delivery_mode == DeliveryMode.FREE_DELIVERY
        )
        total_base_earnings = sum((item.earnings.base_earnings for item in breakdowns), ZERO)
        delivery_bonuses = sum((item.earnings.total_bonuses for item in breakdowns), ZERO)
        delivery_earnings = sum((item.earnings.total_earnings for item in breakdowns), ZERO)

        daily_target_bonus = self.get_daily_target_bonus(total_deliveries)
        total_earnings = delivery_earnings + daily_target_bonus

        if total_deliveries:
            average = to_money(total_earnings / total_deliveries)
        else:
            average = ZERO

        logger.info(
            f"Summarized {total_deliveries} deliveries: total earnings {total_earnings}, "
            f"daily target bonus {daily_target_bonus}"
        )

        return EarningsSummary(
            total_deliveries=total_deliveries,
            free_deliveries=free_deliveries,
            paid_deliveries=total_deliveries - free_deliveries,
            total_base_earnings=to_money(total_base_earnings),
            total_bonuses=to_money(delivery_bonuses + daily_target_bonus),
            daily_target_bonus=daily_target_bonus,
            total_earnings=to_money(total_earnings),
            average_earnings_per_delivery=average,
            deliveries=breakdowns,
        )
