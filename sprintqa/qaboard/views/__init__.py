"""
QA Board Views Package

API views:
- SprintIssuesAPIView: sprint issues normalized from Jira
- QaStateAPIView: load/save AC and DoD checklist state
- JiraImportAPIView: post the stored checklists to Jira as a comment

Page views:
- qa_ui: the browser UI entry document
"""

from .sprint import SprintIssuesAPIView
from .qa_state import QaStateAPIView, JiraImportAPIView
from .ui import qa_ui

__all__ = [
    'SprintIssuesAPIView',
    'QaStateAPIView',
    'JiraImportAPIView',
    'qa_ui',
]
