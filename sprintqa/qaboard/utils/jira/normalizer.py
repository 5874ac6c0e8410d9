"""
Sprint issue normalization.

Maps raw Jira sprint/issue JSON into the issue records used by the QA
board UI. Optional fields are always present in the output, as None or an
empty list, so consumers never deal with missing keys.

Subtasks come from one bulk `parent in (...)` search for the whole sprint;
the inline `subtasks` field of each issue is only a fallback.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from ...exceptions import ConfigMissing, SprintFetchError, TrackerError

logger = logging.getLogger(__name__)


def _person(value: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(value, dict):
        return None
    return {'displayName': value.get('displayName')}


def _status_name(fields: Dict[str, Any]) -> Optional[str]:
    status = fields.get('status')
    if isinstance(status, dict):
        return status.get('name') or None
    return None


def normalize_subtask(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Project a raw (sub)issue onto {key, summary, status}.
    """
    fields = raw.get('fields') or {}
    return {
        'key': raw.get('key'),
        'summary': fields.get('summary') or None,
        'status': _status_name(fields),
    }


def normalize_issue(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Project a raw sprint issue onto the issue record shape.

    Args:
        raw: Issue JSON from the sprint issue endpoint

    Returns:
        dict: {key, fields: {summary, assignee, reporter, dueDate, labels,
        subtasks}, status}
    """
    fields = raw.get('fields') or {}
    labels = fields.get('labels')
    subtasks = fields.get('subtasks')

    return {
        'key': raw.get('key'),
        'fields': {
            'summary': fields.get('summary'),
            'assignee': _person(fields.get('assignee')),
            'reporter': _person(fields.get('reporter')),
            'dueDate': fields.get('duedate') or None,
            'labels': labels if isinstance(labels, list) else [],
            'subtasks': (
                [normalize_subtask(st) for st in subtasks
                 if isinstance(st, dict)]
                if isinstance(subtasks, list) else []
            ),
        },
        'status': _status_name(fields) or '',
    }


def group_subtasks_by_parent(
    raw_subtasks: List[Dict[str, Any]]
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Group bulk search results by their parent issue key.

    Results without a parent are dropped; order within a parent follows
    the search order.
    """
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for raw in raw_subtasks:
        if not isinstance(raw, dict):
            continue
        parent = (raw.get('fields') or {}).get('parent')
        parent_key = parent.get('key') if isinstance(parent, dict) else None
        if not parent_key:
            continue
        grouped.setdefault(parent_key, []).append(normalize_subtask(raw))
    return grouped


def merge_subtasks(
    issues: List[Dict[str, Any]],
    subtasks_by_parent: Dict[str, List[Dict[str, Any]]]
) -> List[Dict[str, Any]]:
    """
    Replace each issue's inline subtasks with the bulk search result.

    A non-empty search result for a key wins; otherwise the inline list
    (already defaulted to []) is kept.
    """
    merged = []
    for issue in issues:
        found = subtasks_by_parent.get(issue['key'])
        fields = dict(issue['fields'])
        if found:
            fields['subtasks'] = found
        merged.append({**issue, 'fields': fields})
    return merged


def fetch_sprint_issues(client, board_id,
                        sprint_id=None) -> Dict[str, Any]:
    """
    Fetch and normalize the issues of a sprint.

    Steps:
    1. Resolve the sprint (active sprint of the board if not given)
    2. Fetch sprint detail and sprint issues concurrently
    3. Normalize every issue
    4. Look up subtasks of all issues in one search
    5. Merge the subtasks into the issues

    Args:
        client: JiraTrackerClient
        board_id: Board used to find the active sprint
        sprint_id: Explicit sprint ID, optional

    Returns:
        dict: {"sprint": {"id", "name"}, "issues": [...]}, or
        {"issues": []} when the board has no active sprint, or the active
        sprint carries no id

    Raises:
        SprintFetchError: If any Jira call fails; no partial list is
            returned
    """
    try:
        if not sprint_id:
            active_sprint = client.get_active_sprint(board_id)
            if not active_sprint:
                logger.info(f"No active sprint on board {board_id}")
                return {'issues': []}
            sprint_id = active_sprint.get('id')
            if sprint_id is None:
                logger.warning(f"Active sprint on board {board_id} has no id")
                return {'issues': []}

        with ThreadPoolExecutor(max_workers=2) as executor:
            detail_future = executor.submit(
                client.get_sprint_detail, sprint_id
            )
            issues_future = executor.submit(
                client.get_sprint_issues, sprint_id
            )
            sprint_detail = detail_future.result()
            issues_data = issues_future.result()

        raw_issues = (
            issues_data.get('issues') if isinstance(issues_data, dict)
            else None
        ) or []
        issues = [
            normalize_issue(raw) for raw in raw_issues
            if isinstance(raw, dict)
        ]

        parent_keys = [issue['key'] for issue in issues if issue['key']]
        subtasks_by_parent = {}
        if parent_keys:
            subtasks_by_parent = group_subtasks_by_parent(
                client.search_by_parent(parent_keys)
            )

    except (TrackerError, ConfigMissing) as e:
        raise SprintFetchError(str(e)) from e

    sprint_name = None
    if isinstance(sprint_detail, dict):
        sprint_name = sprint_detail.get('name') or None

    logger.info(f"Fetched {len(issues)} issues for sprint {sprint_id}")
    return {
        'sprint': {'id': sprint_id, 'name': sprint_name},
        'issues': merge_subtasks(issues, subtasks_by_parent),
    }
