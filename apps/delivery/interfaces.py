from abc import ABC, abstractmethod
from typing import Iterable
from datetime import datetime
from apps.common.data_transfer_objects import (
    Policy,
    FeeBreakdown,
    EarningsBreakdown,
    FeeDisplayMessages,
    TimeBonuses,
    DeliveryInput,
    EarningsSummary,
)


class FeePolicyServiceInterface(ABC):
    @abstractmethod
    def compute_customer_fee(self, order_amount) -> FeeBreakdown:
        """
        Work out what the customer pays for delivery on an order

        Args:
            order_amount: Order value as Decimal, int or numeric string

        Returns:
            FeeBreakdown with every monetary value rounded to 2 decimals

        Raises:
            InvalidAmount: order_amount is negative, non-numeric or non-finite
        """
        pass

    @abstractmethod
    def compute_partner_earnings(
        self,
        order_amount,
        bonus=None
    ) -> EarningsBreakdown:
        """
        Work out what the delivery partner earns and what the platform keeps

        Args:
            order_amount: Order value as Decimal, int or numeric string
            bonus: Optional extra partner compensation, non-negative

        Returns:
            EarningsBreakdown with every monetary value rounded to 2 decimals

        Raises:
            InvalidAmount: order_amount or bonus is invalid
        """
        pass

    @abstractmethod
    def get_policy(self) -> Policy:
        """Get the fee policy the service computes with"""
        pass


class FeeDisplayServiceInterface(ABC):
    @abstractmethod
    def get_messages(self, breakdown: FeeBreakdown) -> FeeDisplayMessages:
        """Customer-facing texts for a fee breakdown"""
        pass


class BonusServiceInterface(ABC):
    @abstractmethod
    def calculate_time_bonuses(self, delivered_at: datetime) -> TimeBonuses:
        """Peak-hour and weekend bonuses earned for a delivery completed at delivered_at"""
        pass

    @abstractmethod
    def compute_partner_earnings_at(
        self,
        order_amount,
        delivered_at: datetime,
        extra_bonus=None
    ) -> EarningsBreakdown:
        """Partner earnings including the time bonuses for delivered_at"""
        pass


class EarningsSummaryServiceInterface(ABC):
    @abstractmethod
    def summarize(self, deliveries: Iterable[DeliveryInput]) -> EarningsSummary:
        """
        Aggregate partner earnings over a batch of deliveries

        Args:
            deliveries: Deliveries completed in the period (usually one day)

        Returns:
            EarningsSummary including the daily target bonus when reached

        Raises:
            InvalidAmount: any delivery carries an invalid amount; nothing is returned
        """
        pass
