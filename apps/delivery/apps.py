import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class DeliveryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.delivery'
    verbose_name = 'Delivery'

    def ready(self) -> None:
        """
        Build the fee policy engine at startup so a bad DELIVERY_FEE_POLICY
        stops the process instead of the first request.
        """
        from apps.delivery.services.factory import get_fee_policy_engine, load_bonus_policy

        try:
            policy = get_fee_policy_engine().get_policy()
            load_bonus_policy()
        except Exception as e:
            logger.error(f"Failed to initialize delivery fee policy: {str(e)}")
            raise

        logger.info(
            f"Delivery fee policy loaded: free from {policy.free_threshold}, "
            f"fee {policy.standard_fee}"
        )
