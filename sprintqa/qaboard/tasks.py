"""
Background posting of checklist comments to Jira.

The save endpoint enqueues `post_checklist_comment` and answers without
waiting for it. The task owns its failures: it logs them and records the
outcome on the issue's QaState row, and never retries.
"""

import logging
from typing import Any, Dict, List

from celery import shared_task

from .exceptions import StoreError
from .services import ChecklistStore
from .utils.jira import build_checklist_document, get_tracker_client

logger = logging.getLogger(__name__)


def post_and_record_comment(issue_key: str, ac: List[Any],
                            dod: List[Any]) -> Dict[str, Any]:
    """
    Build the checklist comment, post it and record the outcome.

    Shared by the background task and the synchronous import endpoint.

    Returns:
        dict: {"success": True} or {"success": False, "message": str}
    """
    document = build_checklist_document(ac, dod)
    try:
        tracker = get_tracker_client()
    except ValueError as e:
        # Invalid Jira settings, e.g. an unknown JIRA_SEARCH_API
        logger.error(f"[COMMENT] Jira client unavailable for {issue_key}: {e}")
        result = {'success': False, 'message': str(e)}
    else:
        result = tracker.post_comment(issue_key, document)

    if result.get('success'):
        logger.info(f"[COMMENT] Checklist comment posted: {issue_key}")
    else:
        logger.error(f"[COMMENT] Checklist comment failed for {issue_key}: "
                     f"{result.get('message')}")

    try:
        ChecklistStore.record_comment_outcome(issue_key, result)
    except StoreError as e:
        # The post already happened; losing the status record is tolerable
        logger.error(f"[COMMENT] Could not record outcome for "
                     f"{issue_key}: {e}")

    return result


@shared_task(ignore_result=True, max_retries=0)
def post_checklist_comment(issue_key: str, ac: List[Any],
                           dod: List[Any]) -> Dict[str, Any]:
    """
    Post the checklist comment for an issue in the background.
    """
    try:
        return post_and_record_comment(issue_key, ac, dod)
    except Exception as e:
        logger.error(f"[COMMENT] Unexpected error for {issue_key}: {e}",
                     exc_info=True)
        return {'success': False, 'message': str(e)}
