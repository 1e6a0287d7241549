# config/settings.py
"""
Django settings for the audit énergétique project.
Configuration principale du projet.

Les coefficients réglables du calcul d'audit sont lus depuis les variables
d'environnement (voir AUDIT_ENERGETIQUE en bas de fichier).
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-audit-energetique-dev')

DEBUG = os.environ.get('DJANGO_DEBUG', 'False').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', '').split(',') if h]


# Application definition

INSTALLED_APPS = [
    'core',
    'audit_energetique',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Internationalization

LANGUAGE_CODE = 'fr-fr'

TIME_ZONE = 'Africa/Tunis'

USE_I18N = True

USE_TZ = True


# Logging

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
    'loggers': {
        'audit_energetique': {
            'handlers': ['console'],
            'level': os.environ.get('AUDIT_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}


# Audit énergétique : coefficients réglables

AUDIT_ENERGETIQUE = {
    # Part des besoins HVAC indépendante de l'occupation
    'K_CH': float(os.environ.get('ENERGY_AUDIT_K_CH', 0.2)),
    'K_FR': float(os.environ.get('ENERGY_AUDIT_K_FR', 0.3)),
    # ECS
    'ECS_GAS_EFF': float(os.environ.get('ENERGY_AUDIT_ECS_GAS_EFF', 0.9)),
    'ECS_SOLAR_COVERAGE': float(os.environ.get('ENERGY_AUDIT_ECS_SOLAR_COVERAGE', 0.7)),
    'ECS_SOLAR_APPOINT_EFF': float(os.environ.get('ENERGY_AUDIT_ECS_SOLAR_APPOINT_EFF', 0.9)),
    'ECS_PAC_COP': float(os.environ.get('ENERGY_AUDIT_ECS_PAC_COP', 3.0)),
    # Chauffage
    'GAS_BOILER_EFF': float(os.environ.get('ENERGY_AUDIT_GAS_BOILER_EFF', 0.6)),
    # Prix moyen TND/kWh
    'ENERGY_COST_PER_KWH': float(os.environ.get('ENERGY_COST_PER_KWH', 0.38)),
}
