"""
Configuration pytest : initialise Django avant la collecte des tests.
"""

import os

import django

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
django.setup()
