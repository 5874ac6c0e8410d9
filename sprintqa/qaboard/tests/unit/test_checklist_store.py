"""
Unit tests for ChecklistStore persistence
"""

from unittest.mock import patch

import pytest
from django.db import DatabaseError

from qaboard.exceptions import StoreError
from qaboard.models import QaState
from qaboard.services import ChecklistStore

AC = [{'text': 'Login works', 'checked': True}]
DOD = [{'text': 'Docs updated', 'checked': False}]


@pytest.mark.django_db
class TestLoad:
    """
    Test loading checklist state
    """

    def test_unknown_key_returns_empty_state(self):
        assert ChecklistStore.load('QA-404') == {
            'ac': [],
            'dod': [],
            'lastSavedAt': None,
            'lastComment': None,
        }

    def test_saved_state_round_trips(self):
        saved_at = ChecklistStore.save('QA-1', AC, DOD)

        state = ChecklistStore.load('QA-1')

        assert state['ac'] == AC
        assert state['dod'] == DOD
        assert state['lastSavedAt'] == saved_at
        assert state['lastComment'] is None

    def test_database_error_raises_store_error(self):
        with patch.object(QaState.objects, 'filter',
                          side_effect=DatabaseError('connection lost')):
            with pytest.raises(StoreError):
                ChecklistStore.load('QA-1')


@pytest.mark.django_db
class TestSave:
    """
    Test the checklist upsert
    """

    def test_save_overwrites_without_duplicating(self):
        first = ChecklistStore.save('QA-1', AC, DOD)
        second = ChecklistStore.save('QA-1', [], DOD)

        assert QaState.objects.filter(issue_key='QA-1').count() == 1
        state = QaState.objects.get(issue_key='QA-1')
        assert state.ac == []
        assert state.dod == DOD
        assert state.updated_at == second
        assert second >= first

    def test_non_list_inputs_stored_as_empty(self):
        ChecklistStore.save('QA-2', 'not a list', {'text': 'x'})

        state = QaState.objects.get(issue_key='QA-2')
        assert state.ac == []
        assert state.dod == []

    def test_item_order_preserved(self):
        ac = [{'text': str(n), 'checked': n % 2 == 0} for n in range(10)]

        ChecklistStore.save('QA-3', ac, [])

        assert ChecklistStore.load('QA-3')['ac'] == ac

    def test_save_keeps_comment_outcome(self):
        ChecklistStore.save('QA-4', AC, DOD)
        ChecklistStore.record_comment_outcome('QA-4', {'success': True})

        ChecklistStore.save('QA-4', [], [])

        assert ChecklistStore.load('QA-4')['lastComment']['success'] is True

    def test_database_error_raises_store_error(self):
        with patch.object(QaState.objects, 'bulk_create',
                          side_effect=DatabaseError('disk full')):
            with pytest.raises(StoreError) as exc_info:
                ChecklistStore.save('QA-1', AC, DOD)

        assert 'disk full' in str(exc_info.value)


@pytest.mark.django_db
class TestRecordCommentOutcome:
    """
    Test storing the last comment outcome
    """

    def test_failure_outcome_exposed_on_load(self):
        ChecklistStore.save('QA-1', AC, DOD)

        updated = ChecklistStore.record_comment_outcome('QA-1', {
            'success': False,
            'message': 'Comment post failed: 403 Forbidden',
        })

        assert updated == 1
        last_comment = ChecklistStore.load('QA-1')['lastComment']
        assert last_comment['success'] is False
        assert last_comment['message'] == 'Comment post failed: 403 Forbidden'
        assert last_comment['postedAt'] is not None

    def test_success_outcome_has_empty_message(self):
        ChecklistStore.save('QA-1', AC, DOD)

        ChecklistStore.record_comment_outcome('QA-1', {'success': True})

        last_comment = ChecklistStore.load('QA-1')['lastComment']
        assert last_comment['success'] is True
        assert last_comment['message'] == ''

    def test_unknown_key_is_ignored(self):
        updated = ChecklistStore.record_comment_outcome(
            'QA-404', {'success': True}
        )

        assert updated == 0
        assert not QaState.objects.filter(issue_key='QA-404').exists()
