import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = [host for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "").split(",") if host]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "apps.delivery",
]

USE_TZ = True
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "Asia/Kolkata")

# Delivery fee policy. Amounts are decimal strings.
DELIVERY_FEE_POLICY = {
    'FREE_DELIVERY_THRESHOLD': os.environ.get("FREE_DELIVERY_THRESHOLD", "199.00"),
    'DELIVERY_FEE': os.environ.get("DELIVERY_FEE", "40.00"),
    'PARTNER_EARNINGS_PAID': os.environ.get("PARTNER_EARNINGS_PAID", "30.00"),
    'PARTNER_EARNINGS_FREE': os.environ.get("PARTNER_EARNINGS_FREE", "25.00"),
}

# Partner bonuses
DELIVERY_BONUS_POLICY = {
    'PEAK_HOUR': "5.00",
    'WEEKEND': "3.00",
    'DAILY_TARGET': "80.00",
    'DAILY_TARGET_THRESHOLD': 12,
    'PEAK_HOURS': [(7, 10), (18, 21)],
}

DELIVERY_CURRENCY_SYMBOL = "₹"

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'apps.delivery': {
            'level': os.environ.get("DELIVERY_LOG_LEVEL", "INFO"),
        },
    },
}
