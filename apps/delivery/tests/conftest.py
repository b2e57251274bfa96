import pytest
from datetime import datetime
from decimal import Decimal
from apps.common.data_transfer_objects import Policy, BonusPolicy
from apps.delivery.services.fee_policy_service import FeePolicyEngine
from apps.delivery.services.bonus_service import BonusService
from apps.delivery.services.earnings_summary_service import EarningsSummaryService
from apps.delivery.services.fee_display_service import FeeDisplayService
from apps.delivery.services.factory import get_fee_policy_engine


@pytest.fixture
def policy():
    return Policy(
        free_threshold=Decimal("199.00"),
        standard_fee=Decimal("40.00"),
        partner_earnings_when_paid=Decimal("30.00"),
        partner_earnings_when_free=Decimal("25.00"),
    )


@pytest.fixture
def engine(policy):
    return FeePolicyEngine(policy=policy)


@pytest.fixture
def bonus_policy():
    return BonusPolicy()


@pytest.fixture
def bonus_service(engine, bonus_policy):
    return BonusService(fee_policy_service=engine, bonus_policy=bonus_policy)


@pytest.fixture
def summary_service(engine, bonus_policy):
    return EarningsSummaryService(fee_policy_service=engine, bonus_policy=bonus_policy)


@pytest.fixture
def display_service():
    return FeeDisplayService(currency_symbol="₹")


@pytest.fixture
def mock_fee_policy_service(mocker):
    return mocker.Mock(spec=FeePolicyEngine)


@pytest.fixture
def delivery_times():
    # 2024-06-03 is a Monday, 2024-06-08 a Saturday
    return {
        'weekday_off_peak': datetime(2024, 6, 3, 12, 0),
        'weekday_morning_peak': datetime(2024, 6, 3, 8, 30),
        'weekday_peak_end': datetime(2024, 6, 3, 10, 0),
        'weekday_evening_peak': datetime(2024, 6, 3, 20, 59),
        'saturday_off_peak': datetime(2024, 6, 8, 14, 0),
        'saturday_evening_peak': datetime(2024, 6, 8, 19, 0),
        'sunday_morning_peak': datetime(2024, 6, 9, 7, 0),
    }


@pytest.fixture
def fresh_engine_cache():
    get_fee_policy_engine.cache_clear()
    yield
    get_fee_policy_engine.cache_clear()
