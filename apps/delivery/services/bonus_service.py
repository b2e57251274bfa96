import logging
from datetime import datetime
from typing import Optional

from apps.common.data_transfer_objects import BonusPolicy, EarningsBreakdown, TimeBonuses
from ..interfaces import BonusServiceInterface, FeePolicyServiceInterface
from ..exceptions import InvalidAmount
from ..money import ZERO, parse_amount, to_money

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6


class BonusService(BonusServiceInterface):
    def __init__(
        self,
        fee_policy_service: FeePolicyServiceInterface,
        bonus_policy: Optional[BonusPolicy] = None
    ):
        self.fee_policy_service = fee_policy_service
        self.bonus_policy = bonus_policy or BonusPolicy()

    def is_peak_hour(self, delivered_at: datetime) -> bool:
        return any(start <= delivered_at.hour < end for start, end in self.bonus_policy.peak_hours)

    def is_weekend(self, delivered_at: datetime) -> bool:
        return delivered_at.weekday() in (SATURDAY, SUNDAY)

    def calculate_time_bonuses(self, delivered_at: datetime) -> TimeBonuses:
        """
        Bonuses depend on the wall-clock time the delivery completed, so pass
        delivered_at in the partner's local timezone.
        """
        peak_hour = self.bonus_policy.peak_hour_bonus if self.is_peak_hour(delivered_at) else ZERO
        weekend = self.bonus_policy.weekend_bonus if self.is_weekend(delivered_at) else ZERO

        return TimeBonuses(
            peak_hour=to_money(peak_hour),
            weekend=to_money(weekend),
            total=to_money(peak_hour + weekend),
        )

    def compute_partner_earnings_at(
        self,
        order_amount,
        delivered_at: datetime,
        extra_bonus=None
    ) -> EarningsBreakdown:
        bonuses = self.calculate_time_bonuses(delivered_at)
        total_bonus = bonuses.total
        if extra_bonus is not None:
            try:
                total_bonus += parse_amount(extra_bonus, "bonus")
            except InvalidAmount as e:
                logger.warning(f"Rejected bonus: {e.message}")
                raise

        logger.debug(f"Time bonuses at {delivered_at.isoformat()}: {bonuses}")
        return self.fee_policy_service.compute_partner_earnings(order_amount, total_bonus)
