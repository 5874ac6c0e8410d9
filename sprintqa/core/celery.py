"""
Celery application for background work.

Tasks are discovered from installed apps (`<app>/tasks.py`) and configured
from Django settings under the CELERY_ namespace.
"""

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

app = Celery('sprintqa')
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
