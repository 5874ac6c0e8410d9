"""
Unit tests for sprint issue normalization and assembly.

The Jira client is replaced with a Mock; no network or database access.
"""

from unittest.mock import Mock

import pytest

from qaboard.exceptions import (
    ConfigMissing,
    SprintFetchError,
    TrackerHttpError,
)
from qaboard.utils.jira.normalizer import (
    fetch_sprint_issues,
    group_subtasks_by_parent,
    merge_subtasks,
    normalize_issue,
)
from ..fixtures.factories import make_raw_issue, make_raw_subtask


def _client(raw_issues, subtasks=None, active_sprint=None,
            sprint_name='Sprint 7'):
    client = Mock()
    client.get_active_sprint.return_value = (
        active_sprint if active_sprint is not None else {'id': 42}
    )
    client.get_sprint_detail.return_value = {'id': 42, 'name': sprint_name}
    client.get_sprint_issues.return_value = {'issues': raw_issues}
    client.search_by_parent.return_value = subtasks or []
    return client


class TestNormalizeIssue:
    """
    Test projection of raw issues onto the record shape
    """

    def test_full_issue(self):
        raw = make_raw_issue('QA-1', summary='Login page', labels=['ui'])

        assert normalize_issue(raw) == {
            'key': 'QA-1',
            'fields': {
                'summary': 'Login page',
                'assignee': {'displayName': 'Alice'},
                'reporter': {'displayName': 'Bob'},
                'dueDate': '2024-09-30',
                'labels': ['ui'],
                'subtasks': [],
            },
            'status': 'In Progress',
        }

    def test_missing_optional_fields_are_defaulted(self):
        raw = {'key': 'QA-2', 'fields': {'summary': 'Bare'}}

        issue = normalize_issue(raw)

        assert issue['fields']['assignee'] is None
        assert issue['fields']['reporter'] is None
        assert issue['fields']['dueDate'] is None
        assert issue['fields']['labels'] == []
        assert issue['fields']['subtasks'] == []
        assert issue['status'] == ''

    def test_missing_fields_object(self):
        issue = normalize_issue({'key': 'QA-3'})

        assert issue['key'] == 'QA-3'
        assert issue['fields']['summary'] is None
        assert issue['status'] == ''

    def test_inline_subtasks_are_projected(self):
        raw = make_raw_issue('QA-4', subtasks=[
            make_raw_subtask('QA-5', summary='Write tests', status='Done'),
        ])

        assert normalize_issue(raw)['fields']['subtasks'] == [
            {'key': 'QA-5', 'summary': 'Write tests', 'status': 'Done'}
        ]


class TestSubtaskMerge:
    """
    Test grouping bulk search results and merging them into issues
    """

    def test_group_by_parent_drops_orphans(self):
        grouped = group_subtasks_by_parent([
            make_raw_subtask('QA-10', parent_key='QA-1'),
            make_raw_subtask('QA-11', parent_key='QA-2'),
            make_raw_subtask('QA-12', parent_key='QA-1'),
            make_raw_subtask('QA-13'),
        ])

        assert [st['key'] for st in grouped['QA-1']] == ['QA-10', 'QA-12']
        assert [st['key'] for st in grouped['QA-2']] == ['QA-11']
        assert len(grouped) == 2

    def test_bulk_result_replaces_inline_subtasks(self):
        issue = normalize_issue(make_raw_issue('QA-1', subtasks=[
            make_raw_subtask('QA-99', summary='Inline'),
        ]))
        bulk = {'QA-1': [
            {'key': 'QA-10', 'summary': 'Bulk', 'status': 'To Do'}
        ]}

        merged = merge_subtasks([issue], bulk)

        assert merged[0]['fields']['subtasks'] == bulk['QA-1']

    def test_inline_subtasks_kept_without_bulk_result(self):
        issue = normalize_issue(make_raw_issue('QA-1', subtasks=[
            make_raw_subtask('QA-99', summary='Inline'),
        ]))

        merged = merge_subtasks([issue], {'QA-1': []})

        assert [st['key'] for st in merged[0]['fields']['subtasks']] == [
            'QA-99'
        ]


class TestFetchSprintIssues:
    """
    Test end-to-end sprint issue assembly
    """

    def test_active_sprint_issues(self):
        client = _client(
            [make_raw_issue('QA-1'), make_raw_issue('QA-2')],
            subtasks=[make_raw_subtask('QA-3', parent_key='QA-1')]
        )

        result = fetch_sprint_issues(client, '7')

        client.get_active_sprint.assert_called_once_with('7')
        client.get_sprint_detail.assert_called_once_with(42)
        client.get_sprint_issues.assert_called_once_with(42)
        client.search_by_parent.assert_called_once_with(['QA-1', 'QA-2'])
        assert result['sprint'] == {'id': 42, 'name': 'Sprint 7'}
        assert [i['key'] for i in result['issues']] == ['QA-1', 'QA-2']
        assert result['issues'][0]['fields']['subtasks'][0]['key'] == 'QA-3'
        assert result['issues'][1]['fields']['subtasks'] == []

    def test_explicit_sprint_skips_active_lookup(self):
        client = _client([make_raw_issue('QA-1')])

        result = fetch_sprint_issues(client, '7', sprint_id='101')

        client.get_active_sprint.assert_not_called()
        client.get_sprint_detail.assert_called_once_with('101')
        assert result['sprint']['id'] == '101'

    def test_no_active_sprint_returns_only_empty_issues(self):
        client = _client([])
        client.get_active_sprint.return_value = None

        result = fetch_sprint_issues(client, '7')

        assert result == {'issues': []}
        client.get_sprint_issues.assert_not_called()

    def test_active_sprint_without_id_returns_only_empty_issues(self):
        client = _client([])
        client.get_active_sprint.return_value = {'name': 'Sprint 7'}

        result = fetch_sprint_issues(client, '7')

        assert result == {'issues': []}
        client.get_sprint_detail.assert_not_called()
        client.get_sprint_issues.assert_not_called()

    def test_empty_sprint_skips_subtask_search(self):
        client = _client([])

        result = fetch_sprint_issues(client, '7')

        assert result['issues'] == []
        client.search_by_parent.assert_not_called()

    def test_missing_sprint_name_is_none(self):
        client = _client([], sprint_name='')

        result = fetch_sprint_issues(client, '7')

        assert result['sprint']['name'] is None

    def test_tracker_error_becomes_sprint_fetch_error(self):
        client = _client([make_raw_issue('QA-1')])
        client.get_sprint_issues.side_effect = TrackerHttpError(
            'Sprint issue lookup failed: 401 Unauthorized', status=401
        )

        with pytest.raises(SprintFetchError) as exc_info:
            fetch_sprint_issues(client, '7')

        assert '401' in str(exc_info.value)

    def test_subtask_search_failure_returns_no_partial_list(self):
        client = _client([make_raw_issue('QA-1')])
        client.search_by_parent.side_effect = TrackerHttpError(
            'Sub-task search failed: 400 bad jql', status=400
        )

        with pytest.raises(SprintFetchError):
            fetch_sprint_issues(client, '7')

    def test_missing_board_becomes_sprint_fetch_error(self):
        client = _client([])
        client.get_active_sprint.side_effect = ConfigMissing(['BOARD_ID'])

        with pytest.raises(SprintFetchError) as exc_info:
            fetch_sprint_issues(client, None)

        assert 'BOARD_ID' in str(exc_info.value)
