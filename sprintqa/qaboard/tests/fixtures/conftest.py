"""
Shared pytest fixtures for QA board tests
"""

import pytest
from rest_framework.test import APIClient

from qaboard.utils.jira.client import JiraCredentials, JiraTrackerClient


@pytest.fixture
def api_client():
    """
    API client for testing REST endpoints
    """
    return APIClient()


@pytest.fixture
def jira_credentials():
    """
    Credentials for a fake Jira account
    """
    return JiraCredentials(email='qa@example.com', api_token='secret-token')


@pytest.fixture
def jira_client(jira_credentials):
    """
    Jira client pointed at a fake site, using the current search API
    """
    return JiraTrackerClient(
        base_url='https://jira.example.com/',
        credentials=jira_credentials,
        search_api='v3',
        timeout=5
    )


@pytest.fixture
def unconfigured_jira_client():
    """
    Jira client without URL or credentials
    """
    return JiraTrackerClient(base_url='', credentials=None)
