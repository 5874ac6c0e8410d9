"""
Main pytest configuration for QA board tests

This module provides shared pytest fixtures and configuration for all
test categories (unit and API tests).
"""

import os
import sys
import django
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(project_root))

# Set Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

# Configure Django
django.setup()

import pytest

# Import fixtures from the fixtures directory
from .fixtures.conftest import *
from .fixtures.factories import *
