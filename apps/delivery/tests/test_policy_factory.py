import pytest
from decimal import Decimal
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from apps.delivery.services.factory import get_fee_policy_engine, load_bonus_policy, load_policy
from apps.delivery.services.fee_policy_service import FeePolicyEngine


def test_load_policy_from_settings(settings):
    settings.DELIVERY_FEE_POLICY = {
        'FREE_DELIVERY_THRESHOLD': "299.00",
        'DELIVERY_FEE': "50.00",
        'PARTNER_EARNINGS_PAID': "35.00",
        'PARTNER_EARNINGS_FREE': "30.00",
    }

    policy = load_policy()

    assert policy.free_threshold == Decimal("299.00")
    assert policy.standard_fee == Decimal("50.00")
    assert policy.partner_earnings_when_paid == Decimal("35.00")
    assert policy.partner_earnings_when_free == Decimal("30.00")
    assert policy.partner_share_percentage == 70


def test_missing_keys_keep_defaults(settings):
    settings.DELIVERY_FEE_POLICY = {'FREE_DELIVERY_THRESHOLD': "149"}

    policy = load_policy()

    assert policy.free_threshold == Decimal("149")
    assert policy.standard_fee == Decimal("40.00")


def test_partner_paid_more_than_fee_is_rejected(settings):
    settings.DELIVERY_FEE_POLICY = {'DELIVERY_FEE': "40.00", 'PARTNER_EARNINGS_PAID': "45.00"}

    with pytest.raises(ImproperlyConfigured):
        load_policy()


def test_partner_subsidy_above_fee_is_rejected(settings):
    settings.DELIVERY_FEE_POLICY = {'PARTNER_EARNINGS_FREE': "40.00"}

    with pytest.raises(ImproperlyConfigured):
        load_policy()


@pytest.mark.parametrize("value", ["abc", "-1", "NaN"])
def test_malformed_amount_is_rejected(settings, value):
    settings.DELIVERY_FEE_POLICY = {'FREE_DELIVERY_THRESHOLD': value}

    with pytest.raises(ImproperlyConfigured):
        load_policy()


def test_unknown_key_is_rejected(settings):
    settings.DELIVERY_FEE_POLICY = {'FREE_DELIVERY_THRESHHOLD': "199.00"}

    with pytest.raises(ImproperlyConfigured) as exc_info:
        load_policy()

    assert "FREE_DELIVERY_THRESHHOLD" in str(exc_info.value)


def test_load_bonus_policy_from_settings(settings):
    settings.DELIVERY_BONUS_POLICY = {'DAILY_TARGET': "100.00", 'PEAK_HOURS': [(11, 14)]}

    bonus_policy = load_bonus_policy()

    assert bonus_policy.daily_target_bonus == Decimal("100.00")
    assert bonus_policy.daily_target_threshold == 12
    assert bonus_policy.peak_hours == [(11, 14)]


def test_engine_is_built_once(fresh_engine_cache):
    engine = get_fee_policy_engine()

    assert isinstance(engine, FeePolicyEngine)
    assert get_fee_policy_engine() is engine


def test_engine_uses_configured_policy(settings, fresh_engine_cache):
    settings.DELIVERY_FEE_POLICY = {'FREE_DELIVERY_THRESHOLD': "99.00"}

    breakdown = get_fee_policy_engine().compute_customer_fee("150.00")

    assert breakdown.is_free_delivery


def test_delivery_app_is_installed():
    assert apps.get_app_config('delivery').verbose_name == "Delivery"
