from pydantic import BaseModel, Field, ConfigDict, computed_field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional, List, Tuple
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum


class DeliveryMode(str, Enum):
    FREE_DELIVERY = "FREE_DELIVERY"
    PAID_DELIVERY = "PAID_DELIVERY"


class ValueObject(BaseModel):
    """Immutable record serialised with camelCase keys for the transport layer."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Policy(ValueObject):
    free_threshold: Decimal = Decimal("199.00")
    standard_fee: Decimal = Decimal("40.00")
    partner_earnings_when_paid: Decimal = Decimal("30.00")
    partner_earnings_when_free: Decimal = Decimal("25.00")

    @field_validator('free_threshold', 'standard_fee', 'partner_earnings_when_paid', 'partner_earnings_when_free')
    @classmethod
    def validate_amount(cls, v):
        if not v.is_finite() or v < 0:
            raise ValueError('Policy amounts must be finite and non-negative')
        return v

    @model_validator(mode='after')
    def validate_partner_earnings(self):
        # The platform never pays the partner more than the fee it collects
        if self.partner_earnings_when_paid >= self.standard_fee:
            raise ValueError('partner_earnings_when_paid must be lower than standard_fee')
        if self.partner_earnings_when_free >= self.standard_fee:
            raise ValueError('partner_earnings_when_free must be lower than standard_fee')
        return self

    @computed_field
    @property
    def partner_share_percentage(self) -> int:
        if not self.standard_fee:
            return 0
        share = self.partner_earnings_when_paid * 100 / self.standard_fee
        return int(share.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class BonusPolicy(ValueObject):
    peak_hour_bonus: Decimal = Decimal("5.00")
    weekend_bonus: Decimal = Decimal("3.00")
    daily_target_bonus: Decimal = Decimal("80.00")
    daily_target_threshold: int = Field(default=12, ge=1)
    # Half-open [start, end) hour windows
    peak_hours: List[Tuple[int, int]] = [(7, 10), (18, 21)]

    @field_validator('peak_hour_bonus', 'weekend_bonus', 'daily_target_bonus')
    @classmethod
    def validate_bonus(cls, v):
        if not v.is_finite() or v < 0:
            raise ValueError('Bonus amounts must be finite and non-negative')
        return v

    @field_validator('peak_hours')
    @classmethod
    def validate_peak_hours(cls, v):
        for start, end in v:
            if not 0 <= start < end <= 24:
                raise ValueError(f'Invalid peak hour window ({start}, {end})')
        return v


class FeeBreakdown(ValueObject):
    order_amount: Decimal
    delivery_fee: Decimal
    total_amount: Decimal
    is_free_delivery: bool
    savings: Decimal
    amount_needed_for_free: Decimal


class EarningsBreakdown(ValueObject):
    order_amount: Decimal
    delivery_mode: DeliveryMode
    base_earnings: Decimal
    total_bonuses: Decimal
    total_earnings: Decimal
    customer_paid: Decimal
    platform_paid_to_partner: Decimal
    platform_revenue: Decimal


class FeeDisplayMessages(ValueObject):
    display_text: str
    savings_text: Optional[str] = None
    promotion_text: Optional[str] = None


class TimeBonuses(ValueObject):
    peak_hour: Decimal
    weekend: Decimal
    total: Decimal


class DeliveryInput(ValueObject):
    # Amounts stay untyped here; the fee engine owns their validation
    order_id: Optional[str] = None
    order_amount: Any
    bonus: Optional[Any] = None


class DeliveryEarnings(ValueObject):
    order_id: Optional[str] = None
    earnings: EarningsBreakdown


class EarningsSummary(ValueObject):
    total_deliveries: int
    free_deliveries: int
    paid_deliveries: int
    total_base_earnings: Decimal
    total_bonuses: Decimal
    daily_target_bonus: Decimal
    total_earnings: Decimal
    average_earnings_per_delivery: Decimal
    deliveries: List[DeliveryEarnings]
