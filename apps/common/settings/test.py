from apps.common.settings.base import *

DEBUG = True
SECRET_KEY = "Test secret"
ALLOWED_HOSTS = ["*"]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Pin the policy so tests don't depend on the environment
DELIVERY_FEE_POLICY = {
    'FREE_DELIVERY_THRESHOLD': "199.00",
    'DELIVERY_FEE': "40.00",
    'PARTNER_EARNINGS_PAID': "30.00",
    'PARTNER_EARNINGS_FREE': "25.00",
}

LOGGING['loggers']['apps.delivery']['level'] = 'DEBUG'
