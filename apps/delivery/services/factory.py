from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import ValidationError as PydanticValidationError

from apps.common.data_transfer_objects import Policy, BonusPolicy
from .fee_policy_service import FeePolicyEngine

# settings key -> Policy field
POLICY_SETTINGS = {
    'FREE_DELIVERY_THRESHOLD': 'free_threshold',
    'DELIVERY_FEE': 'standard_fee',
    'PARTNER_EARNINGS_PAID': 'partner_earnings_when_paid',
    'PARTNER_EARNINGS_FREE': 'partner_earnings_when_free',
}

BONUS_POLICY_SETTINGS = {
    'PEAK_HOUR': 'peak_hour_bonus',
    'WEEKEND': 'weekend_bonus',
    'DAILY_TARGET': 'daily_target_bonus',
    'DAILY_TARGET_THRESHOLD': 'daily_target_threshold',
    'PEAK_HOURS': 'peak_hours',
}


def _from_settings(setting_name, mapping, model):
    config = getattr(settings, setting_name, {}) or {}
    unknown = set(config) - set(mapping)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown {setting_name} keys: {', '.join(sorted(unknown))}"
        )

    values = {mapping[key]: value for key, value in config.items()}
    try:
        return model(**values)
    except PydanticValidationError as e:
        raise ImproperlyConfigured(
            f"Invalid {setting_name} configuration. Please check your settings: {str(e)}"
        )


def load_policy() -> Policy:
    """
    Build the fee policy from settings.DELIVERY_FEE_POLICY.

    Missing keys keep their defaults. Values are read as decimals, so strings
    such as '199.00' are preferred over floats.
    """
    return _from_settings('DELIVERY_FEE_POLICY', POLICY_SETTINGS, Policy)


def load_bonus_policy() -> BonusPolicy:
    """Build the partner bonus policy from settings.DELIVERY_BONUS_POLICY."""
    return _from_settings('DELIVERY_BONUS_POLICY', BONUS_POLICY_SETTINGS, BonusPolicy)


@lru_cache(maxsize=1)
def get_fee_policy_engine() -> FeePolicyEngine:
    """
    Get the process-wide FeePolicyEngine.

    Built once from settings; call get_fee_policy_engine.cache_clear() after
    changing DELIVERY_FEE_POLICY.
    """
    return FeePolicyEngine(policy=load_policy())
