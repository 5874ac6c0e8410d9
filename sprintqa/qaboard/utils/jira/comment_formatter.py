"""
Build the Jira comment that summarizes an issue's QA checklists.

The comment is an Atlassian Document Format (ADF) document with one
section per checklist, in order AC then DoD:

    heading (level 3)   "AC"
    taskList
        taskItem [DONE|TODO]  item text

Blank items are shown as "(empty item N)" and an empty checklist as a
single "(none)" item. Stored checklist data is never modified.
"""

import uuid
from typing import Any, Dict, List

CHECKLIST_LABELS = ('AC', 'DoD')
NONE_PLACEHOLDER = '(none)'
EMPTY_ITEM_PLACEHOLDER = '(empty item {index})'


def _local_id() -> str:
    # ADF requires a localId on taskList and taskItem nodes
    return str(uuid.uuid4())


def _task_item(text: str, done: bool) -> Dict[str, Any]:
    return {
        'type': 'taskItem',
        'attrs': {
            'localId': _local_id(),
            'state': 'DONE' if done else 'TODO',
        },
        'content': [{'type': 'text', 'text': text}],
    }


def _item_text(item: Any, index: int) -> str:
    text = item.get('text') if isinstance(item, dict) else None
    text = '' if text is None else str(text).strip()
    return text or EMPTY_ITEM_PLACEHOLDER.format(index=index)


def build_checklist_block(label: str, items: Any) -> List[Dict[str, Any]]:
    """
    Build the heading and task list nodes for one checklist.

    Args:
        label: Section label, e.g. "AC"
        items: Checklist items ({"text", "checked"}); anything that is not a
            non-empty list renders as a single "(none)" item

    Returns:
        List[dict]: [heading node, taskList node]
    """
    if isinstance(items, list) and items:
        task_items = [
            _task_item(
                _item_text(item, index),
                isinstance(item, dict) and bool(item.get('checked'))
            )
            for index, item in enumerate(items, start=1)
        ]
    else:
        task_items = [_task_item(NONE_PLACEHOLDER, False)]

    return [
        {
            'type': 'heading',
            'attrs': {'level': 3},
            'content': [{'type': 'text', 'text': label}],
        },
        {
            'type': 'taskList',
            'attrs': {'localId': _local_id()},
            'content': task_items,
        },
    ]


def build_checklist_document(ac: Any, dod: Any) -> Dict[str, Any]:
    """
    Build the ADF comment body for an issue's AC and DoD checklists.
    """
    content = []
    for label, items in zip(CHECKLIST_LABELS, (ac, dod)):
        content.extend(build_checklist_block(label, items))
    return {
        'type': 'doc',
        'version': 1,
        'content': content,
    }
