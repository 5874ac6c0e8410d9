"""
QA Board API URLs Configuration

Endpoints (mounted under /api/):
- jira-sprint-issues: issues of the active or given sprint
- qa-state/<issue_key>: load (GET) and save (POST) checklist state
- jira-import/<issue_key>: post the stored checklists to Jira
"""

from django.urls import path

from .views import SprintIssuesAPIView, QaStateAPIView, JiraImportAPIView

urlpatterns = [
    path('jira-sprint-issues', SprintIssuesAPIView.as_view(),
         name='jira-sprint-issues'),
    path('qa-state/<str:issue_key>', QaStateAPIView.as_view(),
         name='qa-state'),
    path('jira-import/<str:issue_key>', JiraImportAPIView.as_view(),
         name='jira-import'),
]
