"""
QA board module for sprint checklist tracking.

This module provides:
- Sprint issue listing proxied and normalized from Jira
- Per-issue Acceptance Criteria / Definition of Done checklist storage
- Checklist summary comments posted back to Jira
"""
