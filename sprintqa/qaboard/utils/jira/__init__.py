"""
Jira integration utilities.

This package provides the Jira REST client, the sprint issue normalizer
and the ADF builder for checklist comments.
"""

from .client import JiraCredentials, JiraTrackerClient, get_tracker_client
from .comment_formatter import build_checklist_document
from .normalizer import fetch_sprint_issues

__all__ = [
    'JiraCredentials',
    'JiraTrackerClient',
    'get_tracker_client',
    'build_checklist_document',
    'fetch_sprint_issues',
]
