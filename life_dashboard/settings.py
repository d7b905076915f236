# life_dashboard/settings.py
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'life-dashboard-dev-key-change-me')
DEBUG = os.environ.get('DJANGO_DEBUG', '0') == '1'

INSTALLED_APPS = [
    'apps.core',
    'apps.tasks',
    'apps.goals',
    'apps.calendar_app',
]

# Rdzeń trzyma dane w pamięci (RecordSet), baza nie jest potrzebna
DATABASES = {}

LANGUAGE_CODE = 'en-us'
USE_I18N = False

TIME_ZONE = 'UTC'
USE_TZ = True

# Parametry adapterów kalendarza (patrz apps/core/conf.py - wartości domyślne)
DASHBOARD = {
    'TRAINING_SESSION_TIME': '07:00',
    'DINNER_TIME': '18:30',
    'BIRTHDAY_LOOKAHEAD_DAYS': 60,
    'CATCH_UP_AFTER_DAYS': 14,
    'MAX_CATCH_UP_SUGGESTIONS': 2,
    'TEMPLATE_HORIZON_DAYS': 90,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': os.environ.get('DASHBOARD_LOG_LEVEL', 'INFO'),
            'propagate': True,
        },
    },
}
